"""Event ORM — a user-initiated event moving through PENDING -> PUBLISHED | CANCELED.

Invariants:
    - state is one of EventState values (stored as plain string)
    - participant_limit == 0 means unlimited
    - confirmed_requests counts CONFIRMED participation requests
    - views grows by one on every public read of a published event

Design Decisions:
    - confirmed_requests denormalized: limit checks avoid a COUNT per request
    - category/initiator/location loaded with selectin: async sessions cannot lazy-load
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ewm.core.domain_types import EventState
from ewm.db.base import Base


class Event(Base):
    """Event entity."""
    __tablename__ = "events"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(120), nullable=False)
    annotation: Mapped[str] = mapped_column(String(2000), nullable=False)
    description: Mapped[str] = mapped_column(String(7000), nullable=False)
    category_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("categories.id"), nullable=False,
    )
    initiator_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False,
    )
    location_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("locations.id"), nullable=False,
    )
    event_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    created_on: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.now,
    )
    published_on: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    paid: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    participant_limit: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
    request_moderation: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True,
    )
    state: Mapped[str] = mapped_column(
        String(20), nullable=False, default=EventState.PENDING.value,
    )
    confirmed_requests: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
    views: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Relationships
    category: Mapped["Category"] = relationship("Category", lazy="selectin")
    initiator: Mapped["User"] = relationship("User", lazy="selectin")
    location: Mapped["Location"] = relationship("Location", lazy="selectin")
