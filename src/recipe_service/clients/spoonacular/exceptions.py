"""Recipe provider client exceptions.

Raised by the Spoonacular client and translated to HTTP responses by the
application exception handlers.
"""

from __future__ import annotations


SERVICE_NAME = "Spoonacular API"


class ExternalApiError(Exception):
    """Raised when a call to the recipe provider fails.

    ``status_code`` is the provider's HTTP status, or 0 when no response was
    received or the body could not be used.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        service_name: str = SERVICE_NAME,
    ) -> None:
        self.status_code = status_code
        self.service_name = service_name
        super().__init__(message)

    @property
    def is_rate_limit_error(self) -> bool:
        """Provider rejected the call for exceeding its quota."""
        return self.status_code == 429

    @property
    def is_network_error(self) -> bool:
        """No usable response was received."""
        return self.status_code == 0

    @property
    def is_server_error(self) -> bool:
        """Provider failed on its side."""
        return self.status_code >= 500


class ExternalApiNotFoundError(ExternalApiError):
    """Raised when the provider reports that a resource does not exist."""

    def __init__(self, message: str, service_name: str = SERVICE_NAME) -> None:
        super().__init__(message, status_code=404, service_name=service_name)


class ExternalApiResponseError(ExternalApiError):
    """Raised when the provider answered but its body was unusable.

    Covers undecodable JSON, empty bodies and payloads that do not match the
    expected shape.
    """

    def __init__(self, message: str, service_name: str = SERVICE_NAME) -> None:
        super().__init__(message, status_code=0, service_name=service_name)

    @property
    def is_network_error(self) -> bool:
        """A response was received, so this is never a network failure."""
        return False
