"""Application configuration using Pydantic Settings with YAML support.

Non-secret settings live in YAML files grouped by concern, with
per-environment overrides. Secrets come from ``.env`` or the environment
only. Any setting can be overridden from the environment using the ``__``
nested delimiter, e.g. ``RECIPE_SOURCE__MODE=spoonacular``.
"""

from __future__ import annotations

from enum import StrEnum
from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

from pydantic import BaseModel, BeforeValidator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .yaml_source import MultiYamlConfigSettingsSource


if TYPE_CHECKING:
    from pydantic_settings import PydanticBaseSettingsSource


DEFAULT_MOCK_DATA_DIR = Path(__file__).resolve().parents[2] / "data" / "mock"


class RecipeSourceMode(StrEnum):
    """Where recipe data is read from.

    - MOCK: bundled JSON files, no network access
    - SPOONACULAR: the live provider API
    """

    MOCK = "mock"
    SPOONACULAR = "spoonacular"


def parse_list(v: str | list[str]) -> list[str]:
    """Parse a comma-separated string or list into a list of strings."""
    if isinstance(v, str):
        return [x.strip() for x in v.split(",") if x.strip()]
    return v


# =============================================================================
# Nested Configuration Models (from YAML)
# =============================================================================


class AppSettings(BaseModel):
    """Application identity settings."""

    name: str = "Recipe Service"
    version: str = "0.1.0"
    debug: bool = False


class ServerSettings(BaseModel):
    """Server bind settings."""

    host: str = "127.0.0.1"
    port: int = 8080


class ApiSettings(BaseModel):
    """API routing and CORS settings."""

    v1_prefix: str = "/api/v1"
    cors_origins: Annotated[list[str], BeforeValidator(parse_list)] = []
    slow_request_threshold_ms: float = 1000.0


class LoggingSettings(BaseModel):
    """Logging configuration settings."""

    level: str = "INFO"
    format: str = "json"


class RateLimitingSettings(BaseModel):
    """Rate limiting configuration."""

    enabled: bool = True
    default: str = "100/minute"
    storage_uri: str = "memory://"


class RecipeSearchSettings(BaseModel):
    """Search paging and validation limits."""

    default_page_size: int = 9
    max_page_size: int = 100
    max_page: int = 1000
    max_query_length: int = 200
    slow_search_threshold_ms: float = 100.0


class RecipeSourceSettings(BaseModel):
    """Recipe data source selection."""

    mode: RecipeSourceMode = RecipeSourceMode.MOCK
    mock_data_dir: Path = DEFAULT_MOCK_DATA_DIR
    mock_files: list[str] = []


class RecipeCacheSettings(BaseModel):
    """In-memory cache for provider recipe lookups."""

    enabled: bool = True
    max_size: int = 500
    ttl_seconds: float = 3600.0


class SpoonacularSettings(BaseModel):
    """Spoonacular API client configuration."""

    base_url: str = "https://api.spoonacular.com"
    timeout: float = 10.0
    max_retries: int = 2


# =============================================================================
# Main Settings Class
# =============================================================================


class Settings(BaseSettings):
    """Application settings with YAML + environment variable support.

    Priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Environment-specific YAML files (config/environments/{APP_ENV}/)
    4. Base YAML files (config/base/)
    5. Defaults in code
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        case_sensitive=False,
        env_nested_delimiter="__",
    )

    APP_ENV: str = "development"

    app: AppSettings = AppSettings()
    server: ServerSettings = ServerSettings()
    api: ApiSettings = ApiSettings()
    logging: LoggingSettings = LoggingSettings()
    rate_limiting: RateLimitingSettings = RateLimitingSettings()
    recipe_search: RecipeSearchSettings = RecipeSearchSettings()
    recipe_source: RecipeSourceSettings = RecipeSourceSettings()
    recipe_cache: RecipeCacheSettings = RecipeCacheSettings()
    spoonacular: SpoonacularSettings = SpoonacularSettings()

    # Secrets (from .env or environment only - never in YAML)
    SPOONACULAR_API_KEY: str = ""

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the YAML source below environment and .env."""
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            MultiYamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    # =========================================================================
    # Environment Helpers
    # =========================================================================

    @property
    def is_development(self) -> bool:
        """Check if running in the development environment."""
        return self.APP_ENV == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in the production environment."""
        return self.APP_ENV == "production"

    @property
    def is_non_production(self) -> bool:
        """Check if API docs and detailed errors should be exposed."""
        return self.APP_ENV in ("local", "test", "development")

    @property
    def use_mock_data(self) -> bool:
        """Check if recipes are served from bundled mock files."""
        return self.recipe_source.mode == RecipeSourceMode.MOCK


@lru_cache
def get_settings() -> Settings:
    """Get the cached settings instance."""
    return Settings()
