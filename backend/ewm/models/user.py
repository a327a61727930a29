"""User ORM — a registered participant, publisher and follower.

Invariants:
    - email is unique
    - Every user owns the FOLLOWER and FRIENDS_ALL groups (created with the user)
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from ewm.db.base import Base


class User(Base):
    """Platform user."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(250), nullable=False)
    email: Mapped[str] = mapped_column(String(254), nullable=False, unique=True)
