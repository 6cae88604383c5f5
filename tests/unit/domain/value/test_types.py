"""Unit tests for comment value objects."""

from uuid import uuid4

import pytest
from pydantic import TypeAdapter, ValidationError

from inkwell.domain.value import (
    AnonymousAuthor,
    CommentAuthor,
    DisplayName,
    RegisteredAuthor,
    Role,
    UserId,
    Viewer,
)


class TestDisplayName:
    """Tests for DisplayName validation."""

    def test_strips_whitespace(self):
        assert DisplayName("  Grace Hopper ").root == "Grace Hopper"

    @pytest.mark.parametrize("value", ["", "   ", "x" * 101])
    def test_rejects_blank_or_long(self, value):
        with pytest.raises(ValidationError, match="Name must be 1-100 characters"):
            DisplayName(value)

    def test_accepts_boundary_length(self):
        assert len(DisplayName("x" * 100).root) == 100


class TestCommentAuthor:
    """The author is exactly one of two variants, chosen by ``kind``."""

    def test_discriminator_selects_variant(self):
        adapter = TypeAdapter(CommentAuthor)
        user_id = uuid4()

        registered = adapter.validate_python(
            {"kind": "user", "user_id": str(user_id), "name": "Ada"}
        )
        anonymous = adapter.validate_python(
            {"kind": "anonymous", "display_name": "Grace"}
        )

        assert isinstance(registered, RegisteredAuthor)
        assert registered.user_id == user_id
        assert isinstance(anonymous, AnonymousAuthor)
        assert anonymous.display_name.root == "Grace"

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            TypeAdapter(CommentAuthor).validate_python({"kind": "bot"})

    def test_anonymous_serializes_flat_name(self):
        author = AnonymousAuthor(display_name=DisplayName("Grace"))

        assert author.model_dump(mode="json") == {
            "kind": "anonymous",
            "display_name": "Grace",
        }


class TestViewer:
    def test_admin_flag(self):
        assert Viewer(user_id=UserId(uuid4()), role=Role.ADMIN).is_admin
        assert not Viewer(user_id=UserId(uuid4())).is_admin
