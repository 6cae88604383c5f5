"""Unit tests for JWTService."""

from datetime import timedelta
from uuid import uuid4

import pytest

from inkwell.config import AuthSettings
from inkwell.domain.service import JWTService
from inkwell.domain.value import Role
from inkwell.util.jwt import JWTError, create_token


@pytest.fixture
def jwt_service():
    return JWTService(auth_settings=AuthSettings(jwt_secret="unit-test-secret-0123456789abcdef0123"))


class TestJWTService:
    """Tests for token round trips and viewer resolution."""

    def test_viewer_from_valid_token(self, jwt_service):
        user_id = str(uuid4())
        token = jwt_service.create_token(user_id, name="Ada", role=Role.ADMIN)

        viewer = jwt_service.get_viewer_from_token(token)

        assert viewer is not None
        assert str(viewer.user_id) == user_id
        assert viewer.name == "Ada"
        assert viewer.is_admin

    def test_missing_token_is_anonymous(self, jwt_service):
        assert jwt_service.get_viewer_from_token(None) is None
        assert jwt_service.get_viewer_from_token("") is None

    def test_token_signed_with_other_secret_is_anonymous(self, jwt_service):
        forger = JWTService(auth_settings=AuthSettings(jwt_secret="other-secret-0123456789abcdef0123456789"))
        token = forger.create_token(str(uuid4()), role=Role.ADMIN)

        assert jwt_service.get_viewer_from_token(token) is None

    def test_verify_rejects_garbage(self, jwt_service):
        with pytest.raises(JWTError):
            jwt_service.verify_token("not.a.token")

    def test_expired_token_is_anonymous(self, jwt_service):
        token = create_token(
            str(uuid4()),
            None,
            "admin",
            jwt_service.auth_settings,
            expires_in=timedelta(seconds=-5),
        )

        assert jwt_service.get_viewer_from_token(token) is None
        with pytest.raises(JWTError, match="expired"):
            jwt_service.verify_token(token)
