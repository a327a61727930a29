"""SubscriptionRequest ORM — a follower's request to subscribe to a publisher.

Invariants:
    - status transitions: WAITING -> CONSIDER | CANCELED | REVOKE, CONSIDER -> REVOKE
    - updated is stamped on every transition
    - friendship records whether the follower asked to be a friend

Design Decisions:
    - Requests are never deleted: REVOKE keeps history while allowing a new request
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ewm.core.domain_types import SubscriptionStatus
from ewm.db.base import Base


class SubscriptionRequest(Base):
    __tablename__ = "subscription_requests"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    follower_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False,
    )
    publisher_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False,
    )
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=SubscriptionStatus.WAITING.value,
    )
    friendship: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    message: Mapped[str | None] = mapped_column(Text, nullable=True)
    created: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.now,
    )
    updated: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)

    follower: Mapped["User"] = relationship(
        "User", foreign_keys=[follower_id], lazy="selectin",
    )
    publisher: Mapped["User"] = relationship(
        "User", foreign_keys=[publisher_id], lazy="selectin",
    )
