"""Request authentication for routes."""

from fastapi import Request

from forum.application.usecase.auth import ResolveAuthRequest, ResolveAuthUseCase
from forum.domain.value import Auth


async def current_auth(request: Request, use_case: ResolveAuthUseCase) -> Auth:
    """Resolve the auth context of an incoming request.

    Args:
        request: Incoming request carrying the credential
        use_case: Resolve auth use case from DI

    Returns:
        Auth context, anonymous when no valid credential is sent
    """
    return await use_case.execute(
        ResolveAuthRequest(
            authorization=request.headers.get("authorization"),
            cookies=dict(request.cookies),
        )
    )
