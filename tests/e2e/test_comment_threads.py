"""End-to-end tests for posts and threaded comments."""

from uuid import uuid4

from tests.e2e.api import MEMBER_PASSWORD, login, register
from tests.harness import create_client_fixture

# E2E test fixture - in-memory persistence, real app
client = create_client_fixture()


def create_post(client, title="Alumni reunion 2025"):
    response = client.post(
        "/posts",
        json={
            "title": title,
            "content": "Join us on campus for the annual reunion.",
            "category": "events",
            "tags": ["reunion"],
        },
    )
    assert response.status_code == 201, response.text
    return response.json()["post"]


class TestPosts:
    """End-to-end tests for posts and likes."""

    def test_create_post_requires_session(self, client):
        response = client.post(
            "/posts",
            json={"title": "t", "content": "c", "category": "news"},
        )

        assert response.status_code == 401

    def test_create_list_get(self, client):
        register(client, "rita")
        login(client, "rita@example.org", MEMBER_PASSWORD)
        post = create_post(client)

        listed = client.get("/posts", params={"search": "REUNION"}).json()
        fetched = client.get(f"/posts/{post['post_id']}").json()

        assert [p["post_id"] for p in listed["posts"]] == [post["post_id"]]
        assert fetched["post"]["excerpt"].startswith("Join us")
        assert fetched["comment_count"] == 0

    def test_unknown_and_malformed_post(self, client):
        assert client.get(f"/posts/{uuid4()}").status_code == 404
        assert client.get("/posts/not-a-uuid").status_code == 400

    def test_anonymous_like_toggle(self, client):
        register(client, "sam")
        login(client, "sam@example.org", MEMBER_PASSWORD)
        post = create_post(client)
        client.post("/auth/logout")

        first = client.post(f"/posts/{post['post_id']}/like").json()
        second = client.post(f"/posts/{post['post_id']}/like").json()

        assert first == {"liked": True, "like_count": 1}
        assert second == {"liked": False, "like_count": 0}


class TestCommentThreads:
    """End-to-end tests for the comment tree."""

    def test_tree_shape_and_order(self, client):
        """Roots come newest first with replies nested oldest first."""
        # Arrange
        register(client, "tom")
        login(client, "tom@example.org", MEMBER_PASSWORD)
        post_id = create_post(client)["post_id"]
        url = f"/posts/{post_id}/comments"

        older = client.post(url, json={"content": "First!"}).json()
        reply_a = client.post(
            url, json={"content": "Reply A", "parent_id": older["comment_id"]}
        ).json()
        client.post(
            url, json={"content": "Reply B", "parent_id": older["comment_id"]}
        )
        client.post(
            url, json={"content": "Deep reply", "parent_id": reply_a["comment_id"]}
        )
        client.post("/auth/logout")
        newer = client.post(url, json={"content": "Anonymous thought"}).json()

        # Act
        response = client.get(url)

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 5
        roots = data["comments"]
        assert [r["content"] for r in roots] == ["Anonymous thought", "First!"]
        assert roots[0]["author_id"] is None
        assert newer["author_id"] is None
        assert [r["content"] for r in roots[1]["replies"]] == ["Reply A", "Reply B"]
        assert roots[1]["replies"][0]["replies"][0]["content"] == "Deep reply"

    def test_reply_to_comment_on_other_post(self, client):
        register(client, "uma")
        login(client, "uma@example.org", MEMBER_PASSWORD)
        first_post = create_post(client, "One")["post_id"]
        second_post = create_post(client, "Two")["post_id"]
        parent = client.post(
            f"/posts/{first_post}/comments", json={"content": "Here"}
        ).json()

        response = client.post(
            f"/posts/{second_post}/comments",
            json={"content": "There", "parent_id": parent["comment_id"]},
        )

        assert response.status_code == 400

    def test_comments_of_unknown_post(self, client):
        assert client.get(f"/posts/{uuid4()}/comments").status_code == 404

    def test_delete_comment_subtree(self, client):
        register(client, "vera")
        login(client, "vera@example.org", MEMBER_PASSWORD)
        post_id = create_post(client)["post_id"]
        url = f"/posts/{post_id}/comments"
        root = client.post(url, json={"content": "root"}).json()
        client.post(url, json={"content": "child", "parent_id": root["comment_id"]})

        response = client.delete(f"/comments/{root['comment_id']}")

        assert response.status_code == 200
        assert response.json()["removed"] == 2
        assert client.get(url).json()["total"] == 0

    def test_delete_post_with_comments(self, client):
        register(client, "walt")
        login(client, "walt@example.org", MEMBER_PASSWORD)
        post_id = create_post(client)["post_id"]
        client.post(f"/posts/{post_id}/comments", json={"content": "bye"})

        response = client.delete(f"/posts/{post_id}")

        assert response.status_code == 200
        assert response.json()["comments_removed"] == 1
        assert client.get(f"/posts/{post_id}").status_code == 404
