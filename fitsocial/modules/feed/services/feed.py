from typing import List, Optional, Set
import logging

from fitsocial.core.config import settings
from fitsocial.modules.feed.schemas.feed import FeedPage, RepostEntry
from fitsocial.modules.feed.services.mapping import aggregate_post, map_author, map_post
from fitsocial.modules.feed.services.ranking import FeedSort, paginate, rank_entries
from fitsocial.modules.feed.services.repository import PostRow, SocialRepository
from fitsocial.modules.posts.schemas.post import PostEntry

logger = logging.getLogger(__name__)

def compose_feed(
    repo: SocialRepository,
    viewer_id: str,
    page: int = 1,
    limit: int = 20,
    sort: FeedSort = FeedSort.POPULAR,
    user_id: Optional[str] = None,
) -> FeedPage:
    """Compose, rank and paginate native posts and reposts into one feed page"""
    following_ids = repo.following_ids(viewer_id)

    native_entries = _native_entries(repo, viewer_id, following_ids, page, limit, user_id)

    # Reposts come from the whole repost table and ignore the user_id filter
    repost_entries = fan_in_reposts(repo, viewer_id, following_ids)

    combined = native_entries + repost_entries
    ranked = rank_entries(combined, sort)
    posts, total = paginate(ranked, page, limit)

    logger.debug(
        f"Feed for {viewer_id}: {len(native_entries)} posts, {len(repost_entries)} reposts, "
        f"page={page} limit={limit} sort={sort.value}"
    )
    return FeedPage(posts=posts, total=total)

def _native_entries(
    repo: SocialRepository,
    viewer_id: str,
    following_ids: Set[str],
    page: int,
    limit: int,
    user_id: Optional[str],
) -> List[PostEntry]:
    if settings.FEED_PAGINATE_NATIVE_IN_DB:
        # Legacy: range the posts table before merging with the reposts
        rows = repo.list_public_posts(user_id=user_id, offset=(page - 1) * limit, limit=limit)
    else:
        rows = repo.list_public_posts(user_id=user_id)
    return [enrich_post(repo, row, viewer_id, following_ids) for row in rows]

def enrich_post(repo: SocialRepository, row: PostRow, viewer_id: str, following_ids: Set[str]) -> PostEntry:
    aggregates = aggregate_post(repo, row.post.id, viewer_id)
    return map_post(row, aggregates, following_ids)

def fan_in_reposts(repo: SocialRepository, viewer_id: str, following_ids: Set[str]) -> List[RepostEntry]:
    """
    Turn every repost event into a feed entry wrapping its original post.

    Events whose original post is gone or private are skipped. A missing
    reposter profile becomes a placeholder author.
    """
    reposts = repo.list_reposts()
    if not reposts:
        return []

    originals = repo.get_public_posts_by_ids(r.original_post_id for r in reposts)
    reposters = repo.get_profiles_by_ids(r.reposted_by_user_id for r in reposts)

    entries = []
    for repost in reposts:
        original_row = originals.get(repost.original_post_id)
        if original_row is None:
            continue

        original = enrich_post(repo, original_row, viewer_id, following_ids)
        reposter = map_author(reposters.get(repost.reposted_by_user_id), repost.reposted_by_user_id, following_ids)

        entries.append(RepostEntry(
            id=f"repost-{repost.id}",
            workout_id=original.workout_id,
            workout=original.workout,
            created_at=repost.reposted_at,
            updated_at=repost.reposted_at,
            user_id=original.user_id,
            reposted_by=reposter,
            reposted_at=repost.reposted_at,
            original_post=original,
            likes_count=original.likes_count,
            comments_count=original.comments_count,
            reposts_count=original.reposts_count,
            is_liked=original.is_liked,
        ))
    return entries
