"""ParticipationRequest ORM — a user's request to take part in an event.

Invariants:
    - At most one request per (event, requester)
    - group_id points to one of the requester's friendship groups: only friends
      in that group (or every friend, for FRIENDS_ALL) see this participation
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ewm.core.domain_types import RequestStatus
from ewm.db.base import Base


class ParticipationRequest(Base):
    __tablename__ = "participation_requests"
    __table_args__ = (
        UniqueConstraint("event_id", "requester_id", name="uq_request_event_requester"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    event_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("events.id", ondelete="CASCADE"), nullable=False,
    )
    requester_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False,
    )
    group_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("friendship_groups.id"), nullable=False,
    )
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=RequestStatus.PENDING.value,
    )
    created: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.now,
    )

    group: Mapped["FriendshipGroup"] = relationship(
        "FriendshipGroup", lazy="selectin",
    )
