"""Auth use cases."""

from .resolve_auth import ResolveAuthRequest, ResolveAuthUseCase

__all__ = ["ResolveAuthRequest", "ResolveAuthUseCase"]
