"""End-to-end tests for the comment endpoints."""

import asyncio
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from inkwell.config import Settings
from inkwell.domain.repository import ArticleRepository
from inkwell.domain.service import JWTService
from inkwell.domain.value import Role
from inkwell.interface.api.app import create_app
from tests.conftest import make_article
from tests.di import build_test_container


@pytest.fixture
def container():
    """Test container shared by the app and the test for seeding."""
    return build_test_container()


@pytest.fixture
def client(container):
    """Create test client served from the test container."""
    return TestClient(create_app(container=container))


@pytest.fixture
def article(container):
    """Article saved in the in-memory store before the test runs."""

    async def _seed():
        article_repo = await container.get(ArticleRepository)
        return await article_repo.save(make_article(slug="threads", title="Threads"))

    return asyncio.run(_seed())


def _auth(role: Role) -> dict[str, str]:
    jwt_service = JWTService(auth_settings=Settings().auth)
    token = jwt_service.create_token(str(uuid4()), name="Ada", role=role)
    return {"Authorization": f"Bearer {token}"}


def _post(client, article, content="Hello", parent_id=None, **extra):
    body = {
        "content": content,
        "article_id": str(article.id),
        "parent_id": parent_id,
        "author_name": "Grace",
        **extra,
    }
    return client.post("/comments", json=body)


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestCreateComment:
    """End-to-end tests for POST /comments."""

    def test_anonymous_comment(self, client, article):
        # Act
        response = _post(client, article, content="<i>First</i> comment")

        # Assert
        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["data"]["content"] == "First comment"
        assert body["data"]["author"] == {
            "kind": "anonymous",
            "display_name": "Grace",
        }

    def test_signed_in_comment(self, client, article):
        response = client.post(
            "/comments",
            json={"content": "Signed", "article_id": str(article.id)},
            headers=_auth(Role.USER),
        )

        assert response.status_code == 201
        author = response.json()["data"]["author"]
        assert author["kind"] == "user"
        assert author["name"] == "Ada"

    def test_missing_name_is_validation_error(self, client, article):
        response = client.post(
            "/comments", json={"content": "Hi", "article_id": str(article.id)}
        )

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "error": {
                "message": "Name is required for anonymous comments",
                "code": "VALIDATION_ERROR",
            },
        }

    def test_unknown_article_is_not_found(self, client):
        response = client.post(
            "/comments",
            json={"content": "Hi", "article_id": str(uuid4()), "author_name": "G"},
        )

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "ARTICLE_NOT_FOUND"

    def test_unknown_parent_is_not_found(self, client, article):
        response = _post(client, article, parent_id=str(uuid4()))

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "PARENT_NOT_FOUND"

    def test_thread_depth_is_capped(self, client, article):
        """Root, reply and reply-to-reply succeed; the next level is refused."""
        # Arrange
        root = _post(client, article, content="root").json()["data"]
        reply = _post(client, article, content="reply", parent_id=root["id"])
        nested = _post(
            client, article, content="nested", parent_id=reply.json()["data"]["id"]
        )
        assert nested.status_code == 201

        # Act
        too_deep = _post(
            client, article, content="too deep", parent_id=nested.json()["data"]["id"]
        )

        # Assert
        assert too_deep.status_code == 400
        assert too_deep.json()["error"] == {
            "message": "Maximum reply depth reached (3 levels)",
            "code": "MAX_DEPTH_EXCEEDED",
        }
        listing = client.get("/comments", params={"article_id": str(article.id)})
        assert listing.json()["total"] == 3


class TestListComments:
    """End-to-end tests for the read endpoints."""

    def test_nested_listing(self, client, article):
        root = _post(client, article, content="root").json()["data"]
        _post(client, article, content="reply", parent_id=root["id"])

        response = client.get("/comments", params={"article_id": str(article.id)})

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 2
        assert len(body["comments"]) == 1
        thread = body["comments"][0]
        assert thread["id"] == root["id"]
        assert [r["content"] for r in thread["replies"]] == ["reply"]
        assert thread["replies"][0]["replies"] == []

    def test_listing_by_slug(self, client, article):
        _post(client, article, content="by slug")

        response = client.get("/articles/threads/comments")

        assert response.status_code == 200
        assert [c["content"] for c in response.json()["comments"]] == ["by slug"]

    def test_bad_article_id_lists_nothing(self, client):
        response = client.get("/comments", params={"article_id": "garbage"})

        assert response.status_code == 200
        assert response.json()["comments"] == []
        assert response.json()["total"] == 0


class TestAdminEndpoints:
    """End-to-end tests for delete and the moderation inbox."""

    def test_delete_requires_token(self, client, article):
        comment = _post(client, article).json()["data"]

        response = client.delete(f"/comments/{comment['id']}")

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "UNAUTHORIZED"

    def test_delete_requires_admin(self, client, article):
        comment = _post(client, article).json()["data"]

        response = client.delete(
            f"/comments/{comment['id']}", headers=_auth(Role.USER)
        )

        assert response.status_code == 403
        assert response.json()["error"]["code"] == "FORBIDDEN"

    def test_admin_delete_removes_thread(self, client, article):
        root = _post(client, article, content="root").json()["data"]
        _post(client, article, content="reply", parent_id=root["id"])

        response = client.delete(f"/comments/{root['id']}", headers=_auth(Role.ADMIN))

        assert response.status_code == 200
        assert response.json() == {"success": True, "data": {"id": root["id"]}}
        listing = client.get("/comments", params={"article_id": str(article.id)})
        assert listing.json()["total"] == 0

    def test_delete_missing_comment(self, client):
        response = client.delete(f"/comments/{uuid4()}", headers=_auth(Role.ADMIN))

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "COMMENT_NOT_FOUND"

    def test_inbox_flow(self, client, article):
        """New comments show up unread until an admin opens one of them."""
        admin = _auth(Role.ADMIN)
        first = _post(client, article, content="one").json()["data"]
        _post(client, article, content="two")

        count = client.get("/admin/comments/unread-count", headers=admin)
        assert count.json() == {"success": True, "data": {"count": 2}}

        unread = client.get("/admin/comments/unread", headers=admin)
        comments = unread.json()["data"]["comments"]
        assert len(comments) == 2
        assert comments[0]["article"] == {
            "id": str(article.id),
            "slug": "threads",
            "title": "Threads",
        }

        marked = client.put(f"/admin/comments/{first['id']}/read", headers=admin)
        assert marked.status_code == 200
        assert marked.json()["data"]["marked_count"] == 2

        count = client.get("/admin/comments/unread-count", headers=admin)
        assert count.json()["data"]["count"] == 0

    def test_inbox_requires_admin(self, client):
        response = client.get("/admin/comments/unread", headers=_auth(Role.USER))

        assert response.status_code == 403
