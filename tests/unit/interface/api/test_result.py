"""Unit tests for result-to-HTTP translation."""

import json
from uuid import uuid4

import pytest

from inkwell.application.usecase.result import ActionFailure, ActionSuccess
from inkwell.config import AuthSettings
from inkwell.domain.service import JWTService
from inkwell.domain.value import CommentErrorCode, Role
from inkwell.interface.api.result import ERROR_STATUS, resolve_viewer, to_response


@pytest.fixture
def jwt_service():
    return JWTService(
        auth_settings=AuthSettings(jwt_secret="unit-test-secret-0123456789abcdef0123")
    )


class TestToResponse:
    def test_every_error_code_has_a_status(self):
        assert set(ERROR_STATUS) == set(CommentErrorCode)

    @pytest.mark.parametrize(
        ("code", "status_code"),
        [
            (CommentErrorCode.VALIDATION_ERROR, 400),
            (CommentErrorCode.INVALID_PARENT, 400),
            (CommentErrorCode.MAX_DEPTH_EXCEEDED, 400),
            (CommentErrorCode.ARTICLE_NOT_FOUND, 404),
            (CommentErrorCode.PARENT_NOT_FOUND, 404),
            (CommentErrorCode.UNAUTHORIZED, 401),
            (CommentErrorCode.FORBIDDEN, 403),
        ],
    )
    def test_failure_status(self, code, status_code):
        response = to_response(ActionFailure.of(code, "nope"))

        assert response.status_code == status_code
        assert json.loads(response.body) == {
            "success": False,
            "error": {"message": "nope", "code": code.value},
        }

    def test_success_uses_given_status(self):
        response = to_response(ActionSuccess[dict](data={"id": "1"}), 201)

        assert response.status_code == 201
        assert json.loads(response.body) == {"success": True, "data": {"id": "1"}}


class TestResolveViewer:
    def test_bearer_token_resolves_viewer(self, jwt_service):
        user_id = str(uuid4())
        token = jwt_service.create_token(user_id, role=Role.ADMIN)

        viewer = resolve_viewer(jwt_service, f"Bearer {token}")

        assert str(viewer.user_id) == user_id
        assert viewer.is_admin

    @pytest.mark.parametrize(
        "header", [None, "", "Bearer", "Bearer   ", "Basic abc", "Token xyz"]
    )
    def test_missing_or_malformed_header_is_anonymous(self, jwt_service, header):
        assert resolve_viewer(jwt_service, header) is None
