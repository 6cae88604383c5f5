"""JWT token domain service."""

from uuid import UUID

import logfire

from inkwell.config import AuthSettings
from inkwell.domain.value import Role, UserId, Viewer
from inkwell.util.jwt import TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(
        self, user_id: str, name: str | None = None, role: Role = Role.USER
    ) -> str:
        """Create JWT token for user.

        Args:
            user_id: User ID
            name: Display name
            role: Site role

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user_id, role=role.value):
            token = create_token(user_id, name, role.value, self.auth_settings)
            logfire.info("JWT token created", user_id=user_id)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", user_id=payload.user_id)
                return payload
            except Exception as e:
                logfire.error("JWT token verification failed", error=str(e))
                raise

    def get_viewer_from_token(self, token: str | None) -> Viewer | None:
        """Resolve the caller from a JWT token without raising exceptions.

        API routes use this to optionally authenticate: anonymous commenters
        have no token, and an invalid token is treated the same way.

        Args:
            token: JWT token string (optional)

        Returns:
            Viewer if token is valid, None if token is missing or invalid
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
            return Viewer(
                user_id=UserId(UUID(payload.user_id)),
                name=payload.name,
                role=Role(payload.role),
            )
        except Exception as e:
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None
