"""Authentication domain service.

Turns the opaque credential a request carries into the ``Auth`` facts the
rest of the service checks against. Resolution never fails for a bad or
missing credential; the caller just becomes anonymous.
"""

import time

import logfire

from forum.domain.error import DataIntegrityError, PermissionDecodeError
from forum.domain.model.user import User
from forum.domain.repository import (
    AccessTokenRepository,
    UserGroupRepository,
    UserRepository,
)
from forum.domain.value import Auth, Permission

from .base import Service

SECONDS_PER_DAY = 24 * 60 * 60


class PermissionDecoder:
    """Interface for decoding a role's stored permission bag."""

    def decode(self, blob: str) -> Permission:
        """Decode a serialized permission bag.

        Args:
            blob: Serialized permission array as stored on the role

        Returns:
            Decoded permission flags

        Raises:
            PermissionDecodeError: If the blob is malformed
        """
        raise NotImplementedError


class AuthService(Service):
    """Domain service resolving request credentials into an auth context."""

    def __init__(
        self,
        token_repository: AccessTokenRepository,
        user_repository: UserRepository,
        user_group_repository: UserGroupRepository,
        permission_decoder: PermissionDecoder,
        nsfw_min_account_age_days: int = 90,
    ) -> None:
        """Initialize auth service.

        Args:
            token_repository: Access token repository
            user_repository: User repository
            user_group_repository: User role repository
            permission_decoder: Decoder for role permission bags
            nsfw_min_account_age_days: Account age required to see NSFW content
        """
        self.token_repository = token_repository
        self.user_repository = user_repository
        self.user_group_repository = user_group_repository
        self.permission_decoder = permission_decoder
        self.nsfw_min_account_age = nsfw_min_account_age_days * SECONDS_PER_DAY

    async def resolve(self, credential: str, now: int | None = None) -> Auth:
        """Resolve a credential into an auth context.

        Args:
            credential: Session or bearer token, empty when absent
            now: Current unix time (defaults to the wall clock)

        Returns:
            Auth for the credential's owner, or the anonymous auth when the
            credential is empty, unknown or expired

        Raises:
            DataIntegrityError: If a valid token points at a missing user
        """
        if not credential:
            return Auth.anonymous()

        if now is None:
            now = int(time.time())

        with logfire.span("auth_service.resolve"):
            token = await self.token_repository.find_valid(credential, now)
            if token is None:
                logfire.info("Credential unknown or expired")
                return Auth.anonymous()

            user = await self.user_repository.find_by_id(token.user_id)
            if user is None:
                logfire.error(
                    "Access token references missing user", user_id=token.user_id
                )
                raise DataIntegrityError("user")

            permission = await self.get_permission(user)
            auth = Auth(
                login=True,
                allow_nsfw=self.allow_nsfw(user, now),
                user_id=user.id,
                permission=permission,
            )
            logfire.info(
                "Request authenticated",
                user_id=user.id,
                allow_nsfw=auth.allow_nsfw,
            )
            return auth

    def allow_nsfw(self, user: User, now: int) -> bool:
        """Whether the account is old enough to see NSFW content."""
        return now - user.registered_at >= self.nsfw_min_account_age

    async def get_permission(self, user: User) -> Permission:
        """Load and decode the permission bag of a user's role.

        A missing role or an undecodable bag yields no permissions at all.

        Args:
            user: User whose role to look up

        Returns:
            Permission flags of the role
        """
        user_group = await self.user_group_repository.find_by_id(user.group_id)
        if user_group is None or not user_group.permission:
            return Permission()

        try:
            return self.permission_decoder.decode(user_group.permission)
        except PermissionDecodeError as e:
            logfire.warn(
                "Failed to decode role permission",
                user_group_id=user_group.id,
                error=str(e),
            )
            return Permission()
