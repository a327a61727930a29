"""Compilation ORM — an admin-curated, optionally pinned collection of events."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ewm.db.base import Base


compilation_events = Table(
    "compilation_events",
    Base.metadata,
    Column(
        "compilation_id", Integer,
        ForeignKey("compilations.id", ondelete="CASCADE"), primary_key=True,
    ),
    Column(
        "event_id", Integer,
        ForeignKey("events.id", ondelete="CASCADE"), primary_key=True,
    ),
)


class Compilation(Base):
    __tablename__ = "compilations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(50), nullable=False)
    pinned: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    events: Mapped[list["Event"]] = relationship(
        "Event", secondary=compilation_events, lazy="selectin",
    )
