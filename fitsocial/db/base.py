# Import all models here so Alembic and create_all can detect them
from fitsocial.db.session import Base

from fitsocial.modules.profiles.models.profile import Profile
from fitsocial.modules.workouts.models.workout import Workout
from fitsocial.modules.posts.models.post import Post
from fitsocial.modules.posts.likes.models.like import PostLike
from fitsocial.modules.posts.comments.models.comment import PostComment
from fitsocial.modules.posts.reposts.models.repost import PostRepost
from fitsocial.modules.follows.models.follow import Follow
