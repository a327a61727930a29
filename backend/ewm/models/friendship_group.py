"""FriendshipGroup ORM — a named tier a user sorts their followers into.

Invariants:
    - title stored upper-case, unique per owner
    - FOLLOWER and FRIENDS_ALL exist for every user
"""

from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from ewm.db.base import Base


class FriendshipGroup(Base):
    __tablename__ = "friendship_groups"
    __table_args__ = (
        UniqueConstraint("user_id", "title", name="uq_group_user_title"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False,
    )
    title: Mapped[str] = mapped_column(String(50), nullable=False)
