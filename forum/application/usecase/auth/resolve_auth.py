"""Resolve auth use case."""

from pydantic import BaseModel

from forum.config import AuthSettings
from forum.domain.service import AuthService
from forum.domain.value import Auth

BEARER_PREFIX = "bearer "


class ResolveAuthRequest(BaseModel):
    """Credential transport of one HTTP request."""

    authorization: str | None = None  # Authorization header
    cookies: dict[str, str] = {}


class ResolveAuthUseCase:
    """Use case for turning request credentials into an auth context."""

    def __init__(self, auth_service: AuthService, auth_settings: AuthSettings) -> None:
        """Initialize resolve auth use case.

        Args:
            auth_service: Auth domain service
            auth_settings: Auth settings naming the session cookie
        """
        self.auth_service = auth_service
        self.auth_settings = auth_settings

    def extract_credential(self, request: ResolveAuthRequest) -> str:
        """Pick the credential of a request.

        A bearer token in the Authorization header wins over the session
        cookie. Returns an empty string when neither is present.
        """
        header = (request.authorization or "").strip()
        if header.lower().startswith(BEARER_PREFIX):
            token = header[len(BEARER_PREFIX) :].strip()
            if token:
                return token
        return request.cookies.get(self.auth_settings.session_cookie_name, "")

    async def execute(self, request: ResolveAuthRequest) -> Auth:
        """Execute resolve auth flow.

        Args:
            request: Authorization header and cookies

        Returns:
            Auth context, anonymous for missing or invalid credentials

        Raises:
            DataIntegrityError: If a valid token points at a missing user
        """
        return await self.auth_service.resolve(self.extract_credential(request))
