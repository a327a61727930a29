"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Integer autoincrement primary keys everywhere

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from ewm.models.user import User  # noqa: F401
from ewm.models.category import Category  # noqa: F401
from ewm.models.location import Location  # noqa: F401
from ewm.models.event import Event  # noqa: F401
from ewm.models.friendship_group import FriendshipGroup  # noqa: F401
from ewm.models.participation_request import ParticipationRequest  # noqa: F401
from ewm.models.compilation import Compilation, compilation_events  # noqa: F401
from ewm.models.follower import Follower  # noqa: F401
from ewm.models.subscription_request import SubscriptionRequest  # noqa: F401
