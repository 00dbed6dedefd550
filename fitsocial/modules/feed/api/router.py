from typing import Any, Optional
from fastapi import APIRouter, Depends, Query

from fitsocial.core.config import settings
from fitsocial.core.responses import paginated_response
from fitsocial.deps import get_current_user, get_social_repository
from fitsocial.modules.profiles.models.profile import Profile
from fitsocial.modules.feed.services.feed import compose_feed
from fitsocial.modules.feed.services.ranking import FeedSort
from fitsocial.modules.feed.services.repository import SocialRepository

router = APIRouter()

@router.get("")
def read_feed(
    *,
    repo: SocialRepository = Depends(get_social_repository),
    page: int = Query(1, ge=1),
    limit: int = Query(settings.FEED_DEFAULT_LIMIT, ge=1, le=settings.FEED_MAX_LIMIT),
    sort: FeedSort = Query(FeedSort.POPULAR),
    user_id: Optional[str] = Query(None, description="Only this author's posts; reposts are not narrowed"),
    current_user: Profile = Depends(get_current_user),
) -> Any:
    """Public feed of posts and reposts ranked by popularity or recency"""
    feed = compose_feed(repo, current_user.id, page=page, limit=limit, sort=sort, user_id=user_id)
    return paginated_response(feed, page=page, limit=limit, total=feed.total)
