from datetime import datetime
from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

from fitsocial.modules.feed.schemas.feed import RepostEntry
from fitsocial.modules.posts.schemas.post import PostEntry

Entry = Union[PostEntry, RepostEntry]


class FeedSort(str, Enum):
    POPULAR = "popular"
    RECENT = "recent"


def popularity(entry: Entry) -> int:
    """likes + comments + reposts; reposts score their original post"""
    source = entry.original_post if isinstance(entry, RepostEntry) else entry
    return source.likes_count + source.comments_count + source.reposts_count


def _timestamp(value: Optional[datetime]) -> float:
    # Entries without a timestamp sort last
    return value.timestamp() if value is not None else float("-inf")


def effective_timestamp(entry: Entry) -> float:
    """createdAt of a post; for reposts createdAt already holds repostedAt"""
    return _timestamp(entry.created_at)


def rank_entries(entries: Sequence[Entry], sort: FeedSort = FeedSort.POPULAR) -> List[Entry]:
    if sort == FeedSort.RECENT:
        key = effective_timestamp
    else:
        key = lambda entry: (popularity(entry), effective_timestamp(entry))
    return sorted(entries, key=key, reverse=True)


def paginate(entries: Sequence[Entry], page: int, limit: int) -> Tuple[List[Entry], int]:
    """Slice one page out of the ranked list; total is the full list length"""
    offset = (page - 1) * limit
    return list(entries[offset:offset + limit]), len(entries)
