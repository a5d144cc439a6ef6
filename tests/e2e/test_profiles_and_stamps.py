"""End-to-end tests for profile and stamp endpoints."""


class TestProfiles:
    """Username setup and profile reads."""

    def test_setup_username_flow(self, client, auth_headers):
        headers = auth_headers("alice")

        before = client.get("/api/users/check-username/alice_v")
        created = client.post(
            "/api/users/setup-username", json={"username": "alice_v"}, headers=headers
        )
        after = client.get("/api/users/check-username/alice_v")
        again = client.post(
            "/api/users/setup-username", json={"username": "other"}, headers=headers
        )

        assert before.json() == {"username": "alice_v", "available": True}
        assert created.status_code == 201
        assert created.json()["username"] == "alice_v"
        assert after.json()["available"] is False
        assert again.status_code == 409

    def test_check_username_named_like_a_user_subpath(self, client, auth_headers):
        """Availability checks work for names that match /users/{name}/... routes."""
        comments = client.get("/api/users/check-username/comments")
        posts = client.get("/api/users/check-username/posts")
        client.post(
            "/api/users/setup-username",
            json={"username": "comments"},
            headers=auth_headers("alice"),
        )
        taken = client.get("/api/users/check-username/comments")

        assert comments.status_code == 200
        assert comments.json() == {"username": "comments", "available": True}
        assert posts.json() == {"username": "posts", "available": True}
        assert taken.json() == {"username": "comments", "available": False}

    def test_taken_username(self, client, auth_headers):
        client.post(
            "/api/users/setup-username",
            json={"username": "alice_v"},
            headers=auth_headers("alice"),
        )

        response = client.post(
            "/api/users/setup-username",
            json={"username": "alice_v"},
            headers=auth_headers("bob"),
        )

        assert response.status_code == 409

    def test_invalid_username(self, client, auth_headers):
        response = client.post(
            "/api/users/setup-username",
            json={"username": "no spaces!"},
            headers=auth_headers("alice"),
        )

        assert response.status_code == 400

    def test_profile_read_and_update(self, client, auth_headers):
        headers = auth_headers("alice")
        client.post(
            "/api/users/setup-username", json={"username": "alice_v"}, headers=headers
        )

        updated = client.put(
            "/api/users/profile", json={"bio": "just venting"}, headers=headers
        )
        mine = client.get("/api/users/profile", headers=headers)
        public = client.get("/api/profiles/alice_v")

        assert updated.status_code == 200
        assert mine.json()["bio"] == "just venting"
        assert public.json()["username"] == "alice_v"
        assert "userId" not in public.json()

    def test_profiles_me(self, client, auth_headers):
        headers = auth_headers("alice")
        missing = client.get("/api/profiles/me", headers=headers)
        client.post(
            "/api/users/setup-username", json={"username": "alice_v"}, headers=headers
        )

        updated = client.put(
            "/api/profiles/me", json={"bio": "still here"}, headers=headers
        )
        mine = client.get("/api/profiles/me", headers=headers)

        assert missing.status_code == 404
        assert updated.status_code == 200
        assert mine.json()["username"] == "alice_v"
        assert mine.json()["userId"] == "alice"
        assert mine.json()["bio"] == "still here"

    def test_profiles_me_requires_authentication(self, client):
        assert client.get("/api/profiles/me").status_code == 401
        assert client.put("/api/profiles/me", json={"bio": "x"}).status_code == 401

    def test_profile_before_setup(self, client, auth_headers):
        response = client.get("/api/users/profile", headers=auth_headers("alice"))

        assert response.status_code == 404

    def test_unknown_public_profile(self, client):
        response = client.get("/api/profiles/nobody")

        assert response.status_code == 404
        assert response.json()["detail"] == "User not found"


class TestStamps:
    """Daily stamps."""

    def test_stamp_today(self, client, auth_headers):
        headers = auth_headers("alice")

        first = client.post("/api/stamps/today", headers=headers)
        second = client.post("/api/stamps/today", headers=headers)
        listing = client.get("/api/stamps/my-stamps", headers=headers)

        assert first.json()["created"] is True
        assert second.json()["created"] is False
        assert listing.json()["total"] == 1
        assert listing.json()["streak"] == 1

    def test_stamps_require_authentication(self, client):
        assert client.post("/api/stamps/today").status_code == 401
        assert client.get("/api/stamps/my-stamps").status_code == 401


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
