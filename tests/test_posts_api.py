from fitsocial.modules.posts.comments.models.comment import PostComment
from fitsocial.modules.posts.likes.models.like import PostLike
from fitsocial.modules.posts.models.post import Post
from fitsocial.modules.posts.reposts.models.repost import PostRepost
from fitsocial.modules.workouts.models.workout import Workout

from factories import (
    add_comments, add_follow, add_likes, add_repost, at, auth_headers, make_post, make_profile, make_workout
)

POSTS_URL = "/api/v1/social/posts"


def test_create_post(client, db):
    make_profile(db, "alice")

    response = client.post(
        POSTS_URL,
        json={
            "content": "New PR on deadlift",
            "images": [{"url": "https://cdn.example.com/lift.jpg", "alt": "lift"}],
            "tags": ["deadlift", "pr"],
            "post_type": "achievement",
        },
        headers=auth_headers("alice"),
    )

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Post created successfully"
    data = body["data"]
    assert data["userId"] == "alice"
    assert data["imageUrls"] == ["https://cdn.example.com/lift.jpg"]
    assert data["hashtags"] == ["deadlift", "pr"]
    assert data["postType"] == "achievement"
    assert data["isPublic"] is True
    assert db.query(Post).filter(Post.id == data["id"]).count() == 1


def test_create_post_marks_workout_shared(client, db):
    make_profile(db, "alice")
    workout = make_workout(db, "alice", id="w1")

    response = client.post(
        POSTS_URL, json={"content": "Done", "workout_id": workout.id}, headers=auth_headers("alice")
    )

    assert response.status_code == 201
    db.expire_all()
    assert db.query(Workout).filter(Workout.id == "w1").first().is_shared is True


def test_create_post_validates_content(client, db):
    make_profile(db, "alice")

    empty = client.post(POSTS_URL, json={"content": ""}, headers=auth_headers("alice"))
    too_long = client.post(POSTS_URL, json={"content": "x" * 2001}, headers=auth_headers("alice"))
    bad_type = client.post(POSTS_URL, json={"content": "ok", "post_type": "rant"}, headers=auth_headers("alice"))

    assert empty.status_code == 400
    assert too_long.status_code == 400
    assert bad_type.status_code == 400
    assert empty.json()["error"]["code"] == "VALIDATION_ERROR"


def test_read_post_detail(client, db):
    make_profile(db, "alice")
    make_profile(db, "bob")
    make_post(db, "alice", post_id="p1")
    add_likes(db, "p1", ["bob"])
    add_comments(db, "p1", "bob", 2)
    add_repost(db, "p1", "bob", at(5))
    add_follow(db, "bob", "alice")

    response = client.get(f"{POSTS_URL}/p1", headers=auth_headers("bob"))

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["likesCount"] == 1
    assert data["commentsCount"] == 2
    assert data["repostsCount"] == 1
    assert data["isLiked"] is True
    assert data["isReposted"] is True
    assert data["author"]["isFollowing"] is True


def test_private_post_visible_only_to_owner(client, db):
    make_profile(db, "alice")
    make_profile(db, "bob")
    make_post(db, "alice", post_id="secret", is_public=False)

    assert client.get(f"{POSTS_URL}/secret", headers=auth_headers("alice")).status_code == 200
    response = client.get(f"{POSTS_URL}/secret", headers=auth_headers("bob"))
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"


def test_post_detail_author_null_when_profile_missing(client, db):
    make_profile(db, "bob")
    make_post(db, "gone", post_id="p1")

    response = client.get(f"{POSTS_URL}/p1", headers=auth_headers("bob"))

    assert response.json()["data"]["author"] is None


def test_update_post_owner_only(client, db):
    make_profile(db, "alice")
    make_profile(db, "bob")
    make_post(db, "alice", post_id="p1", content="before")

    denied = client.put(f"{POSTS_URL}/p1", json={"content": "hijack"}, headers=auth_headers("bob"))
    assert denied.status_code == 404
    assert denied.json()["error"]["message"] == "Post not found or access denied"

    response = client.put(
        f"{POSTS_URL}/p1", json={"content": "after", "tags": ["edit"], "is_public": False}, headers=auth_headers("alice")
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["content"] == "after"
    assert data["hashtags"] == ["edit"]
    assert data["isPublic"] is False


def test_delete_post_removes_children(client, db):
    make_profile(db, "alice")
    make_profile(db, "bob")
    make_post(db, "alice", post_id="p1")
    add_likes(db, "p1", ["bob"])
    add_comments(db, "p1", "bob", 2)
    add_repost(db, "p1", "bob", at(1))

    assert client.delete(f"{POSTS_URL}/p1", headers=auth_headers("bob")).status_code == 404

    response = client.delete(f"{POSTS_URL}/p1", headers=auth_headers("alice"))

    assert response.status_code == 200
    assert response.json()["message"] == "Post deleted successfully"
    assert db.query(Post).count() == 0
    assert db.query(PostLike).count() == 0
    assert db.query(PostComment).count() == 0
    assert db.query(PostRepost).count() == 0


def test_delete_missing_post(client, db):
    make_profile(db, "alice")

    assert client.delete(f"{POSTS_URL}/nope", headers=auth_headers("alice")).status_code == 404


def test_cannot_link_someone_elses_private_workout(client, db):
    make_profile(db, "alice")
    make_profile(db, "bob")
    make_workout(db, "alice", id="w-secret", name="Alice secret plan", is_public=False)

    response = client.post(
        POSTS_URL, json={"content": "borrowed", "workout_id": "w-secret"}, headers=auth_headers("bob")
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"
    assert db.query(Post).count() == 0
    db.expire_all()
    assert db.get(Workout, "w-secret").is_shared is False


def test_cannot_link_someone_elses_public_workout(client, db):
    make_profile(db, "alice")
    make_profile(db, "bob")
    make_workout(db, "alice", id="w-public", is_public=True)

    response = client.post(
        POSTS_URL, json={"content": "borrowed", "workout_id": "w-public"}, headers=auth_headers("bob")
    )

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "FORBIDDEN"
    db.expire_all()
    assert db.get(Workout, "w-public").is_shared is False


def test_create_post_with_unknown_workout(client, db):
    make_profile(db, "alice")

    response = client.post(
        POSTS_URL, json={"content": "ghost workout", "workout_id": "missing"}, headers=auth_headers("alice")
    )

    assert response.status_code == 404
    assert db.query(Post).count() == 0
