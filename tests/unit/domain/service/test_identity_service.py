"""Unit tests for IdentityService."""

import pytest

from agora.config import AuthSettings
from agora.domain.service import IdentityService
from agora.util.jwt import JWTError
from tests.conftest import make_token

SECRET = "test-secret-that-is-long-enough-for-hs256"
AUTH_SETTINGS = AuthSettings(jwt_secret=SECRET)


def _service() -> IdentityService:
    return IdentityService(auth_settings=AUTH_SETTINGS)


class TestIdentityService:
    """Tests for identity resolution."""

    def test_valid_token_resolves_identity(self):
        """A token from the identity provider resolves to its user."""
        # Arrange
        token = make_token("user-1", "Ada", AUTH_SETTINGS)

        # Act
        identity = _service().get_identity(token)

        # Assert
        assert identity is not None
        assert identity.user_id == "user-1"
        assert identity.display_name.root == "Ada"

    @pytest.mark.parametrize("token", [None, ""])
    def test_missing_token_is_anonymous(self, token):
        """No token means no identity."""
        assert _service().get_identity(token) is None

    def test_garbage_token_is_anonymous(self):
        """An unparseable token is treated as anonymous."""
        assert _service().get_identity("not-a-jwt") is None

    def test_token_signed_with_other_secret_is_rejected(self):
        """A token from another issuer does not verify."""
        # Arrange
        other = AuthSettings(jwt_secret="another-secret-that-is-also-long-enough")
        token = make_token("user-1", "Ada", other)

        # Act & Assert
        with pytest.raises(JWTError, match="Invalid token"):
            _service().verify_token(token)
        assert _service().get_identity(token) is None

    def test_expired_token_is_rejected(self):
        """Expired tokens fail verification."""
        # Arrange
        token = make_token("user-1", "Ada", AUTH_SETTINGS, expires_in_days=-1)

        # Act & Assert
        with pytest.raises(JWTError, match="expired"):
            _service().verify_token(token)
        assert _service().get_identity(token) is None

    def test_blank_name_is_anonymous(self):
        """A token without a usable display name does not resolve."""
        token = make_token("user-1", "", AUTH_SETTINGS)

        assert _service().get_identity(token) is None
