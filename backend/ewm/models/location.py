"""Location ORM — event coordinates.

Invariants:
    - A (lat, lon) pair is stored once and shared by every event at that point
"""

from sqlalchemy import Float, Integer
from sqlalchemy.orm import Mapped, mapped_column

from ewm.db.base import Base


class Location(Base):
    __tablename__ = "locations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    lat: Mapped[float] = mapped_column(Float, nullable=False)
    lon: Mapped[float] = mapped_column(Float, nullable=False)
