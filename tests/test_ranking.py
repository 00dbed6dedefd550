from datetime import datetime

from fitsocial.modules.feed.schemas.feed import RepostEntry
from fitsocial.modules.feed.services.ranking import (
    FeedSort, effective_timestamp, paginate, popularity, rank_entries
)
from fitsocial.modules.posts.schemas.post import PostEntry
from fitsocial.modules.profiles.schemas.profile import AuthorSummary


def post(post_id, score=0, created_at=None):
    return PostEntry(
        id=post_id,
        user_id="author",
        author=AuthorSummary(id="author"),
        likes_count=score,
        created_at=created_at,
    )


def repost(repost_id, original, reposted_at):
    return RepostEntry(
        id=f"repost-{repost_id}",
        user_id=original.user_id,
        reposted_by=AuthorSummary(id="reposter"),
        reposted_at=reposted_at,
        created_at=reposted_at,
        original_post=original,
        likes_count=original.likes_count,
        comments_count=original.comments_count,
        reposts_count=original.reposts_count,
    )


def test_popularity_sums_counts():
    entry = PostEntry(
        id="p", user_id="u", author=AuthorSummary(id="u"),
        likes_count=3, comments_count=2, reposts_count=1,
    )
    assert popularity(entry) == 6


def test_popularity_of_repost_uses_original_counts():
    original = post("q", score=10)
    entry = repost("r", original, datetime(2024, 1, 1))
    entry.likes_count = 0
    assert popularity(entry) == 10


def test_popular_sort_breaks_ties_by_recency():
    older = post("older", score=5, created_at=datetime(2024, 1, 1))
    newer = post("newer", score=5, created_at=datetime(2024, 1, 2))
    top = post("top", score=9, created_at=datetime(2023, 1, 1))

    ranked = rank_entries([older, newer, top], FeedSort.POPULAR)

    assert [e.id for e in ranked] == ["top", "newer", "older"]


def test_recent_sort_ignores_popularity():
    popular = post("popular", score=100, created_at=datetime(2024, 1, 1))
    fresh = post("fresh", score=0, created_at=datetime(2024, 2, 1))

    ranked = rank_entries([popular, fresh], FeedSort.RECENT)

    assert [e.id for e in ranked] == ["fresh", "popular"]


def test_repost_ranks_by_reposted_at_when_recent():
    original = post("q", created_at=datetime(2024, 1, 1))
    shared = repost("r", original, datetime(2024, 3, 1))
    middle = post("p", created_at=datetime(2024, 2, 1))

    ranked = rank_entries([original, middle, shared], FeedSort.RECENT)

    assert [e.id for e in ranked] == ["repost-r", "p", "q"]


def test_missing_timestamp_sorts_last():
    undated = post("undated")
    dated = post("dated", created_at=datetime(2024, 1, 1))

    assert effective_timestamp(undated) == float("-inf")
    assert [e.id for e in rank_entries([undated, dated], FeedSort.RECENT)] == ["dated", "undated"]


def test_equal_keys_keep_input_order():
    same = datetime(2024, 1, 1)
    entries = [post("a", created_at=same), post("b", created_at=same), post("c", created_at=same)]

    assert [e.id for e in rank_entries(entries, FeedSort.RECENT)] == ["a", "b", "c"]


def test_paginate_slices_and_reports_full_total():
    entries = [post(str(i)) for i in range(5)]

    page, total = paginate(entries, page=2, limit=2)

    assert [e.id for e in page] == ["2", "3"]
    assert total == 5


def test_paginate_past_the_end_is_empty():
    entries = [post("only")]

    page, total = paginate(entries, page=3, limit=10)

    assert page == []
    assert total == 1
