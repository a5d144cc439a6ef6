"""End-to-end tests for comment endpoints."""

from uuid import uuid4


def _create_post(client, headers, content="rough day"):
    response = client.post("/api/posts", json={"content": content}, headers=headers)
    assert response.status_code == 201
    return response.json()["id"]


def _comment(client, headers, post_id, content, parent_id=None):
    body = {"content": content}
    if parent_id:
        body["parentCommentId"] = parent_id
    return client.post(f"/api/posts/{post_id}/comments", json=body, headers=headers)


class TestCommentTree:
    """Reading comment trees over HTTP."""

    def test_missing_post_returns_404(self, client):
        response = client.get(f"/api/posts/{uuid4()}/comments")

        assert response.status_code == 404
        assert response.json()["detail"] == "Post not found"

    def test_tree_shape(self, client, auth_headers):
        """Roots newest first, replies nested, leaves with empty replies."""
        # Arrange
        alice = auth_headers("alice")
        bob = auth_headers("bob")
        client.post(
            "/api/users/setup-username", json={"username": "alice_v"}, headers=alice
        )
        post_id = _create_post(client, alice)

        a = _comment(client, alice, post_id, "A").json()
        b = _comment(client, bob, post_id, "B", parent_id=a["id"]).json()
        c = _comment(client, alice, post_id, "C").json()

        # Act
        response = client.get(f"/api/posts/{post_id}/comments", headers=bob)

        # Assert
        assert response.status_code == 200
        tree = response.json()
        assert [node["id"] for node in tree] == [c["id"], a["id"]]
        assert tree[0]["replies"] == []
        assert tree[1]["authorUsername"] == "alice_v"

        reply = tree[1]["replies"][0]
        assert reply["id"] == b["id"]
        assert reply["parentCommentId"] == a["id"]
        assert reply["authorUsername"] == "anonymous"
        assert reply["replies"] == []
        assert reply["likeCount"] == 0
        assert reply["hasLiked"] is False

    def test_like_shows_in_tree(self, client, auth_headers):
        alice = auth_headers("alice")
        post_id = _create_post(client, alice)
        comment = _comment(client, alice, post_id, "like me").json()

        like = client.post(f"/api/comments/{comment['id']}/like", headers=alice)
        mine = client.get(f"/api/posts/{post_id}/comments", headers=alice).json()
        anonymous = client.get(f"/api/posts/{post_id}/comments").json()

        assert like.json() == {"liked": True, "likeCount": 1}
        assert mine[0]["likeCount"] == 1
        assert mine[0]["hasLiked"] is True
        assert anonymous[0]["hasLiked"] is False

    def test_root_pages_are_disjoint(self, client, auth_headers):
        alice = auth_headers("alice")
        post_id = _create_post(client, alice)
        older = _comment(client, alice, post_id, "older").json()
        newer = _comment(client, alice, post_id, "newer").json()

        first = client.get(f"/api/posts/{post_id}/comments?limit=1&offset=0").json()
        second = client.get(f"/api/posts/{post_id}/comments?limit=1&offset=1").json()

        assert [node["id"] for node in first] == [newer["id"]]
        assert [node["id"] for node in second] == [older["id"]]

    def test_each_page_carries_its_replies(self, client, auth_headers):
        alice = auth_headers("alice")
        bob = auth_headers("bob")
        post_id = _create_post(client, alice)
        older = _comment(client, alice, post_id, "older").json()
        older_reply = _comment(client, bob, post_id, "re older", older["id"]).json()
        nested = _comment(client, alice, post_id, "deeper", older_reply["id"]).json()
        newer = _comment(client, alice, post_id, "newer").json()
        newer_reply = _comment(client, bob, post_id, "re newer", newer["id"]).json()

        first = client.get(f"/api/posts/{post_id}/comments?limit=1").json()
        second = client.get(f"/api/posts/{post_id}/comments?limit=1&offset=1").json()

        assert [node["id"] for node in first] == [newer["id"]]
        assert [r["id"] for r in first[0]["replies"]] == [newer_reply["id"]]
        assert [node["id"] for node in second] == [older["id"]]
        assert [r["id"] for r in second[0]["replies"]] == [older_reply["id"]]
        assert [r["id"] for r in second[0]["replies"][0]["replies"]] == [nested["id"]]

    def test_invalid_pagination_is_rejected(self, client, auth_headers):
        post_id = _create_post(client, auth_headers("alice"))

        response = client.get(f"/api/posts/{post_id}/comments?limit=0")

        assert response.status_code == 422


class TestCreateComment:
    """Writing comments over HTTP."""

    def test_requires_authentication(self, client, auth_headers):
        post_id = _create_post(client, auth_headers("alice"))

        response = client.post(
            f"/api/posts/{post_id}/comments", json={"content": "hi"}
        )

        assert response.status_code == 401

    def test_invalid_token_is_rejected(self, client, auth_headers):
        post_id = _create_post(client, auth_headers("alice"))

        response = client.post(
            f"/api/posts/{post_id}/comments",
            json={"content": "hi"},
            headers={"Authorization": "Bearer not-a-token"},
        )

        assert response.status_code == 401

    def test_cookie_token_is_accepted(self, client, auth_headers):
        headers = auth_headers("alice")
        post_id = _create_post(client, headers)
        token = headers["Authorization"].removeprefix("Bearer ")
        client.cookies.set("auth_token", token)

        response = client.post(
            f"/api/posts/{post_id}/comments", json={"content": "via cookie"}
        )

        assert response.status_code == 201
        assert response.json()["authorId"] == "alice"

    def test_blank_content_is_rejected(self, client, auth_headers):
        headers = auth_headers("alice")
        post_id = _create_post(client, headers)

        response = _comment(client, headers, post_id, "   ")

        assert response.status_code == 400

    def test_missing_parent_returns_404(self, client, auth_headers):
        headers = auth_headers("alice")
        post_id = _create_post(client, headers)

        response = _comment(client, headers, post_id, "reply", parent_id=str(uuid4()))

        assert response.status_code == 404

    def test_parent_from_other_post_is_rejected(self, client, auth_headers):
        """A cross-post reply fails and leaves the target post untouched."""
        headers = auth_headers("alice")
        post_a = _create_post(client, headers, "A")
        post_b = _create_post(client, headers, "B")
        parent = _comment(client, headers, post_a, "on A").json()

        response = _comment(client, headers, post_b, "on B", parent_id=parent["id"])

        assert response.status_code == 400
        assert client.get(f"/api/posts/{post_b}/comments").json() == []


class TestChangeComment:
    """Editing and deleting comments."""

    def test_only_author_can_edit_or_delete(self, client, auth_headers):
        alice = auth_headers("alice")
        bob = auth_headers("bob")
        post_id = _create_post(client, alice)
        comment = _comment(client, alice, post_id, "mine").json()

        edit = client.put(
            f"/api/comments/{comment['id']}", json={"content": "x"}, headers=bob
        )
        delete = client.delete(f"/api/comments/{comment['id']}", headers=bob)

        assert edit.status_code == 403
        assert delete.status_code == 403

    def test_edit_then_delete(self, client, auth_headers):
        alice = auth_headers("alice")
        post_id = _create_post(client, alice)
        root = _comment(client, alice, post_id, "root").json()
        _comment(client, alice, post_id, "reply", parent_id=root["id"])

        edit = client.put(
            f"/api/comments/{root['id']}", json={"content": "edited"}, headers=alice
        )
        fetched = client.get(f"/api/comments/{root['id']}")
        delete = client.delete(f"/api/comments/{root['id']}", headers=alice)

        assert edit.status_code == 200
        assert fetched.json()["content"] == "edited"
        assert delete.json() == {"success": True}
        assert client.get(f"/api/posts/{post_id}/comments").json() == []
        assert client.get(f"/api/comments/{root['id']}").status_code == 404

    def test_user_comment_history(self, client, auth_headers):
        alice = auth_headers("alice")
        client.post(
            "/api/users/setup-username", json={"username": "alice_v"}, headers=alice
        )
        post_id = _create_post(client, alice)
        comment = _comment(client, alice, post_id, "history").json()

        response = client.get("/api/users/alice_v/comments")
        unknown = client.get("/api/users/nobody/comments")

        assert [c["id"] for c in response.json()] == [comment["id"]]
        assert unknown.status_code == 404
