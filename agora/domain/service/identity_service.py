"""Identity provider service.

Resolves the caller's identity from an auth token. The core treats a
missing, invalid or expired token the same way: as an anonymous caller.
"""

import logfire
from pydantic import ValidationError as PydanticValidationError

from agora.config import AuthSettings
from agora.domain.model.common import DomainModel
from agora.domain.value import AuthorName, UserId
from agora.util.jwt import JWTError, TokenPayload, verify_token

from .base import Service


class Identity(DomainModel):
    """Authenticated caller."""

    user_id: UserId
    display_name: AuthorName


class IdentityService(Service):
    """Domain service for reading identity tokens.

    Tokens are issued by the external identity provider with the shared
    secret; this service only verifies them.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize identity service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def verify_token(self, token: str) -> TokenPayload:
        """Verify a token and extract its payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("identity_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("Identity token verified", user_id=payload.user_id)
                return payload
            except Exception as e:
                logfire.error("Identity token verification failed", error=str(e))
                raise

    def get_identity(self, token: str | None) -> Identity | None:
        """Resolve the caller's identity without raising.

        Args:
            token: JWT token string (optional)

        Returns:
            Identity if the token is valid, None if it is missing or invalid
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
            return Identity(
                user_id=UserId(payload.user_id),
                display_name=AuthorName(payload.name),
            )
        except (JWTError, PydanticValidationError) as e:
            logfire.debug(
                "Token verification failed, treating as anonymous", error=str(e)
            )
            return None
