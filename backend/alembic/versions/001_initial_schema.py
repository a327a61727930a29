"""Initial schema — users, categories, events, requests, compilations, subscriptions.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("name", sa.String(250), nullable=False),
        sa.Column("email", sa.String(254), nullable=False, unique=True),
    )

    op.create_table(
        "categories",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("name", sa.String(50), nullable=False, unique=True),
    )

    op.create_table(
        "locations",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("lat", sa.Float, nullable=False),
        sa.Column("lon", sa.Float, nullable=False),
    )

    op.create_table(
        "events",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("title", sa.String(120), nullable=False),
        sa.Column("annotation", sa.String(2000), nullable=False),
        sa.Column("description", sa.String(7000), nullable=False),
        sa.Column("category_id", sa.Integer, sa.ForeignKey("categories.id"), nullable=False),
        sa.Column("initiator_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
        sa.Column("location_id", sa.Integer, sa.ForeignKey("locations.id"), nullable=False),
        sa.Column("event_date", sa.DateTime, nullable=False),
        sa.Column("created_on", sa.DateTime, nullable=False, server_default=sa.func.now()),
        sa.Column("published_on", sa.DateTime, nullable=True),
        sa.Column("paid", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("participant_limit", sa.Integer, nullable=False, server_default="0"),
        sa.Column("request_moderation", sa.Boolean, nullable=False, server_default="true"),
        sa.Column("state", sa.String(20), nullable=False, server_default="PENDING"),
        sa.Column("confirmed_requests", sa.Integer, nullable=False, server_default="0"),
        sa.Column("views", sa.Integer, nullable=False, server_default="0"),
    )
    op.create_index("ix_events_initiator_id", "events", ["initiator_id"])
    op.create_index("ix_events_event_date", "events", ["event_date"])

    op.create_table(
        "friendship_groups",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("user_id", sa.Integer, sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("title", sa.String(50), nullable=False),
        sa.UniqueConstraint("user_id", "title", name="uq_group_user_title"),
    )

    op.create_table(
        "participation_requests",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("event_id", sa.Integer, sa.ForeignKey("events.id", ondelete="CASCADE"), nullable=False),
        sa.Column("requester_id", sa.Integer, sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("group_id", sa.Integer, sa.ForeignKey("friendship_groups.id"), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="PENDING"),
        sa.Column("created", sa.DateTime, nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("event_id", "requester_id", name="uq_request_event_requester"),
    )

    op.create_table(
        "compilations",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("title", sa.String(50), nullable=False),
        sa.Column("pinned", sa.Boolean, nullable=False, server_default="false"),
    )

    op.create_table(
        "compilation_events",
        sa.Column("compilation_id", sa.Integer, sa.ForeignKey("compilations.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("event_id", sa.Integer, sa.ForeignKey("events.id", ondelete="CASCADE"), primary_key=True),
    )

    op.create_table(
        "followers",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("publisher_id", sa.Integer, sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("follower_id", sa.Integer, sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("group_id", sa.Integer, sa.ForeignKey("friendship_groups.id", ondelete="CASCADE"), nullable=False),
        sa.Column("created", sa.DateTime, nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("publisher_id", "follower_id", name="uq_follower_pair"),
    )

    op.create_table(
        "subscription_requests",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("follower_id", sa.Integer, sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("publisher_id", sa.Integer, sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="WAITING"),
        sa.Column("friendship", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("message", sa.Text, nullable=True),
        sa.Column("created", sa.DateTime, nullable=False, server_default=sa.func.now()),
        sa.Column("updated", sa.DateTime, nullable=True),
    )
    op.create_index(
        "ix_subscription_requests_pair", "subscription_requests",
        ["follower_id", "publisher_id"],
    )


def downgrade() -> None:
    op.drop_index("ix_subscription_requests_pair", table_name="subscription_requests")
    op.drop_table("subscription_requests")
    op.drop_table("followers")
    op.drop_table("compilation_events")
    op.drop_table("compilations")
    op.drop_table("participation_requests")
    op.drop_table("friendship_groups")
    op.drop_index("ix_events_event_date", table_name="events")
    op.drop_index("ix_events_initiator_id", table_name="events")
    op.drop_table("events")
    op.drop_table("locations")
    op.drop_table("categories")
    op.drop_table("users")
