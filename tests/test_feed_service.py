import pytest

from fitsocial.core.errors import AppError, ErrorCode
from fitsocial.modules.feed.services.feed import fan_in_reposts, compose_feed
from fitsocial.modules.feed.services.mapping import aggregate_post, map_author, map_post
from fitsocial.modules.feed.services.ranking import FeedSort
from fitsocial.modules.feed.services.repository import PostRow, SocialRepository
from fitsocial.modules.posts.models.post import Post

from factories import (
    add_comments, add_follow, add_likes, add_repost, at, make_post, make_profile, make_workout
)


@pytest.fixture
def repo(db):
    return SocialRepository(db)


@pytest.fixture
def users(db):
    for user_id in ["viewer", "alice", "bob", "carol"]:
        make_profile(db, user_id)
    return db


def test_aggregate_post_counts_live_rows(repo, users):
    db = users
    make_post(db, "alice", post_id="p1")
    add_likes(db, "p1", ["viewer", "bob"])
    add_comments(db, "p1", "bob", 3)
    add_repost(db, "p1", "carol", at(5))

    aggregates = aggregate_post(repo, "p1", "viewer")

    assert aggregates.likes_count == 2
    assert aggregates.comments_count == 3
    assert aggregates.reposts_count == 1
    assert aggregates.is_liked is True


def test_map_author_without_profile_is_placeholder():
    author = map_author(None, "ghost", set())

    assert author.id == "ghost"
    assert author.username == "Usuario"
    assert author.full_name == "Usuario"
    assert author.avatar is None
    assert author.is_following is False


def test_map_post_defaults_missing_fields(repo, users):
    post = Post(id="bare", user_id="ghost", content="hi", image_urls=None, hashtags=None, is_public=None)
    row = PostRow(post=post, author=None, workout=None)

    entry = map_post(row, aggregate_post(repo, "bare", "viewer"), set())

    assert entry.kind == "post"
    assert entry.is_repost is False
    assert entry.image_urls == []
    assert entry.hashtags == []
    assert entry.is_public is True
    assert entry.workout is None
    assert entry.author.username == "Usuario"


def test_map_post_marks_followed_author(repo, users):
    db = users
    workout = make_workout(db, "alice", name="Push day", duration_minutes=45)
    make_post(db, "alice", post_id="p1", workout_id=workout.id)
    row = repo.get_visible_post("p1", "viewer")

    entry = map_post(row, aggregate_post(repo, "p1", "viewer"), {"alice"})

    assert entry.author.is_following is True
    assert entry.workout.name == "Push day"
    assert entry.workout.duration_minutes == 45


def test_fan_in_skips_private_and_missing_originals(repo, users):
    db = users
    make_post(db, "alice", post_id="public")
    make_post(db, "alice", post_id="private", is_public=False)
    add_repost(db, "public", "bob", at(10), repost_id="r1")
    add_repost(db, "private", "bob", at(20), repost_id="r2")
    # Original row no longer exists
    add_repost(db, "deleted-post", "carol", at(30), repost_id="r3")

    entries = fan_in_reposts(repo, "viewer", set())

    assert [e.id for e in entries] == ["repost-r1"]


def test_fan_in_copies_original_counts_and_uses_reposted_at(repo, users):
    db = users
    make_post(db, "alice", post_id="q", created_at=at(0))
    add_likes(db, "q", ["viewer", "bob"])
    add_repost(db, "q", "ghost", at(30), repost_id="r")

    [entry] = fan_in_reposts(repo, "viewer", set())

    assert entry.kind == "repost"
    assert entry.is_repost is True
    assert entry.user_id == "alice"
    assert entry.created_at == at(30)
    assert entry.updated_at == at(30)
    assert entry.reposted_at == at(30)
    assert entry.likes_count == entry.original_post.likes_count == 2
    assert entry.reposts_count == 1
    assert entry.is_liked is True
    assert entry.reposted_by.username == "Usuario"


def test_get_feed_merges_posts_and_reposts(repo, users):
    db = users
    make_post(db, "alice", post_id="p", created_at=at(0))
    add_likes(db, "p", ["bob"])
    make_post(db, "bob", post_id="q", created_at=at(1))
    add_likes(db, "q", ["alice", "carol", "viewer"])
    add_comments(db, "q", "alice", 6)
    add_repost(db, "q", "carol", at(60), repost_id="r")

    page = compose_feed(repo, "viewer", page=1, limit=2, sort=FeedSort.POPULAR)

    assert page.total == 3
    assert [e.id for e in page.posts] == ["repost-r", "q"]


def test_get_feed_user_filter_does_not_narrow_reposts(repo, users):
    db = users
    make_post(db, "alice", post_id="a1", created_at=at(0))
    make_post(db, "bob", post_id="b1", created_at=at(1))
    add_repost(db, "b1", "carol", at(2), repost_id="r")

    page = compose_feed(repo, "viewer", sort=FeedSort.RECENT, user_id="alice")

    assert [e.id for e in page.posts] == ["repost-r", "a1"]
    assert page.total == 2


def test_get_feed_marks_followed_authors(repo, users):
    db = users
    make_post(db, "alice", post_id="a1")
    add_follow(db, "viewer", "alice")

    page = compose_feed(repo, "viewer")

    assert page.posts[0].author.is_following is True


class FailingRepository(SocialRepository):
    """Repository whose like lookups fail"""

    def count_likes(self, post_id):
        raise AppError(ErrorCode.DATABASE_ERROR, "Failed to count likes: connection lost")


def test_get_feed_fails_fast_on_lookup_error(db, users):
    make_post(db, "alice", post_id="a1")

    with pytest.raises(AppError) as exc_info:
        compose_feed(FailingRepository(db), "viewer")

    assert exc_info.value.code == ErrorCode.DATABASE_ERROR
    assert "count likes" in exc_info.value.message


def test_get_feed_fails_fast_inside_repost_fan_in(db, users):
    make_post(db, "alice", post_id="a1", is_public=False)
    make_post(db, "bob", post_id="b1")
    add_repost(db, "b1", "carol", at(5))

    class FailingOriginals(SocialRepository):
        def get_public_posts_by_ids(self, post_ids):
            raise AppError(ErrorCode.DATABASE_ERROR, "Failed to get original posts: timeout")

    with pytest.raises(AppError):
        compose_feed(FailingOriginals(db), "viewer")


def test_native_db_pagination_ranges_posts_before_merge(repo, users, monkeypatch):
    from fitsocial.core.config import settings

    db = users
    for i in range(3):
        make_post(db, "alice", post_id=f"p{i}", created_at=at(i))
    add_repost(db, "p0", "bob", at(10), repost_id="r")
    monkeypatch.setattr(settings, "FEED_PAGINATE_NATIVE_IN_DB", True)

    first = compose_feed(repo, "viewer", page=1, limit=2, sort=FeedSort.RECENT)
    second = compose_feed(repo, "viewer", page=2, limit=2, sort=FeedSort.RECENT)

    assert [e.id for e in first.posts] == ["repost-r", "p2"]
    assert first.total == 3
    assert second.posts == []
    assert second.total == 2
