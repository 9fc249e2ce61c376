"""End-to-end tests for the admin console API."""

from inkwell.domain.service import AuthProvider
from tests.e2e.conftest import ADMIN_EMAIL, ADMIN_PASSWORD, resolve


def create_post(client, title="Hello World", status="published", **fields):
    response = client.post("/admin/posts", json={"title": title, "status": status, **fields})
    assert response.status_code == 201
    return response.json()


class TestAdminAuth:
    """Admin sign-in, sign-out and guards."""

    def test_console_requires_session(self, client):
        assert client.get("/admin/posts").status_code == 401
        assert client.get("/admin/auth/session").status_code == 401

    def test_wrong_password_rejected(self, client):
        resolve(client, AuthProvider).add_user(ADMIN_EMAIL, ADMIN_PASSWORD)

        response = client.post(
            "/admin/auth/login", json={"email": ADMIN_EMAIL, "password": "wrong"}
        )

        assert response.status_code == 401

    def test_non_admin_cannot_sign_in(self, client):
        resolve(client, AuthProvider).add_user("reader@example.com", "password1")

        response = client.post(
            "/admin/auth/login",
            json={"email": "reader@example.com", "password": "password1"},
        )

        assert response.status_code == 403
        assert client.get("/admin/auth/session").status_code == 401

    def test_session_and_logout(self, admin_client):
        session = admin_client.get("/admin/auth/session").json()
        assert session["email"] == ADMIN_EMAIL
        assert session["is_admin"] is True

        assert admin_client.post("/admin/auth/logout").json() == {"success": True}
        assert admin_client.get("/admin/auth/session").status_code == 401


class TestAdminContent:
    """Posts and categories."""

    def test_category_crud(self, admin_client):
        created = admin_client.post("/admin/categories", json={"name": "Deep Learning"})
        assert created.status_code == 201
        category = created.json()
        assert category["slug"] == "deep-learning"

        renamed = admin_client.put(
            f"/admin/categories/{category['id']}", json={"name": "Machine Learning"}
        ).json()
        assert renamed["slug"] == "machine-learning"

        deleted = admin_client.delete(f"/admin/categories/{category['id']}")
        assert deleted.status_code == 204
        assert admin_client.get("/admin/categories").json()["categories"] == []

    def test_post_crud_and_reader_visibility(self, admin_client):
        category = admin_client.post("/admin/categories", json={"name": "News"}).json()
        draft = create_post(
            admin_client,
            title="Launch Notes",
            status="draft",
            content="<p>Soon</p>",
            category_ids=[category["id"]],
        )
        assert draft["slug"] == "launch-notes"
        assert draft["published_at"] is None
        assert draft["category_ids"] == [category["id"]]
        assert admin_client.get("/posts/launch-notes.html").status_code == 404

        published = admin_client.put(
            f"/admin/posts/{draft['id']}",
            json={
                "title": "Launch Notes",
                "status": "published",
                "content": "<p>Live</p>",
                "category_ids": [category["id"]],
            },
        ).json()
        assert published["published_at"] is not None
        assert admin_client.get("/posts/launch-notes.html").status_code == 200

        listing = admin_client.get("/admin/posts").json()
        assert listing["total"] == 1

        assert admin_client.delete(f"/admin/posts/{draft['id']}").status_code == 204
        assert admin_client.get(f"/admin/posts/{draft['id']}").status_code == 404

    def test_blank_title_rejected(self, admin_client):
        response = admin_client.post("/admin/posts", json={"title": "  "})

        assert response.status_code == 400
        assert response.json()["field"] == "title"


class TestModeration:
    def test_reply_and_delete(self, admin_client):
        post = create_post(admin_client)
        submitted = admin_client.post(
            f"/posts/{post['id']}/comments",
            json={"author_name": "Ada", "author_email": "ada@example.com", "content": "Hi"},
        ).json()
        comment_id = submitted["comment_id"]

        reply = admin_client.post(
            f"/admin/comments/{comment_id}/reply", json={"content": "Thanks!"}
        )
        assert reply.status_code == 201
        assert reply.json()["is_admin_reply"] is True

        listing = admin_client.get("/admin/comments").json()
        assert listing["threaded"] is True
        assert listing["comments"][0]["author_email"] == "ada@example.com"
        assert listing["comments"][0]["replies"][0]["content"] == "Thanks!"
        assert listing["totals"]["replies"] == 1

        filtered = admin_client.get("/admin/comments", params={"type": "admin"}).json()
        assert filtered["threaded"] is False
        assert [c["content"] for c in filtered["comments"]] == ["Thanks!"]

        assert admin_client.delete(f"/admin/comments/{comment_id}").status_code == 204
        assert admin_client.get("/admin/comments").json()["totals"]["total"] == 0


class TestLinks:
    def test_link_needs_published_post(self, admin_client):
        response = admin_client.post(
            "/admin/links",
            json={"link_name": "Docs", "original_url": "https://example.com/docs"},
        )

        assert response.status_code == 409

    def test_create_update_delete(self, admin_client):
        create_post(admin_client, title="Host Post")

        created = admin_client.post(
            "/admin/links",
            json={
                "link_name": "Docs",
                "original_url": "https://example.com/docs",
                "alias": "docs",
            },
        )
        assert created.status_code == 201
        link = created.json()
        assert link["post_slug"] == "host-post"
        assert link["short_url"].endswith("/posts/host-post.html?token=docs")

        updated = admin_client.put(
            f"/admin/links/{link['id']}",
            json={"link_name": "Manual", "original_url": "https://example.com/manual"},
        ).json()
        assert updated["link_name"] == "Manual"
        assert updated["alias"] == "docs"

        listing = admin_client.get("/admin/links").json()
        assert listing["total_clicks"] == 0
        assert len(listing["links"]) == 1

        assert admin_client.delete(f"/admin/links/{link['id']}").status_code == 204
        assert admin_client.get("/admin/links").json()["links"] == []


class TestSite:
    def test_settings_update_reaches_reader_site(self, admin_client):
        assert admin_client.get("/site/settings").json()["site_title"] == "Inkwell"

        response = admin_client.put(
            "/admin/settings", json={"site_title": "My Notebook", "social_twitter": None}
        )

        assert response.status_code == 200
        assert response.json()["site_title"] == "My Notebook"
        assert response.json()["social_twitter"] == ""
        assert admin_client.get("/site/settings").json()["site_title"] == "My Notebook"

    def test_upload_image(self, admin_client):
        response = admin_client.post(
            "/admin/uploads/thumbnail",
            files={"file": ("cover.PNG", b"\x89PNG fake", "image/png")},
        )

        assert response.status_code == 201
        assert response.json()["url"].startswith("http://storage.local/public/thumbnails/")
        assert response.json()["url"].endswith(".png")

    def test_upload_rejects_non_image(self, admin_client):
        response = admin_client.post(
            "/admin/uploads/branding",
            files={"file": ("notes.txt", b"hello", "text/plain")},
        )

        assert response.status_code == 400
        assert response.json()["field"] == "file"

    def test_dashboard_and_analytics(self, admin_client):
        create_post(admin_client, title="One")
        create_post(admin_client, title="Two", status="draft")
        admin_client.get("/posts/one.html")

        dashboard = admin_client.get("/admin/dashboard").json()
        assert dashboard["total_posts"] == 2
        assert dashboard["total_views"] == 1

        analytics = admin_client.get("/admin/analytics").json()
        assert analytics["published_count"] == 1
        assert analytics["draft_count"] == 1
        assert analytics["top_posts"][0]["title"] == "One"
