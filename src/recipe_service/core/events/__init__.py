"""Application lifecycle events."""

from recipe_service.core.events.lifespan import build_repository, lifespan


__all__ = ["build_repository", "lifespan"]
