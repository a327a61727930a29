"""Follower ORM — an accepted subscription: `follower` follows `publisher`.

Invariants:
    - One link per (publisher, follower)
    - group belongs to the publisher; FOLLOWER group = plain subscriber,
      any other group = friend
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ewm.db.base import Base


class Follower(Base):
    __tablename__ = "followers"
    __table_args__ = (
        UniqueConstraint("publisher_id", "follower_id", name="uq_follower_pair"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    publisher_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False,
    )
    follower_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False,
    )
    group_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("friendship_groups.id", ondelete="CASCADE"), nullable=False,
    )
    created: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.now,
    )

    group: Mapped["FriendshipGroup"] = relationship("FriendshipGroup", lazy="selectin")
    publisher: Mapped["User"] = relationship(
        "User", foreign_keys=[publisher_id], lazy="selectin",
    )
    follower: Mapped["User"] = relationship(
        "User", foreign_keys=[follower_id], lazy="selectin",
    )
