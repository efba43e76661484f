"""initial_schema

Create the trip engine schema:
- Users (profiles mirrored from the authentication collaborator)
- Trips with their organizer
- Participants (real users and placeholders)
- Trip invites (multi-use join codes, hashed)
- Placeholder claims (one-time claim codes, hashed)
- Proposals (date options, destinations, terms, transportations)
- Votes
- Gear items and assignments

Revision ID: 3c1f0a9d2e47
Revises:
Create Date: 2026-10-19 09:12:44.318205

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0a9d2e47"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

PROPOSAL_KIND = postgresql.ENUM(
    "date", "destination", "term", "transportation", name="proposal_kind", create_type=False
)


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at",
        postgresql.TIMESTAMP(timezone=True),
        server_default=sa.text("NOW()"),
        nullable=False,
    )


def upgrade() -> None:
    """Upgrade schema."""
    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE proposal_kind AS ENUM ('date', 'destination', 'term', 'transportation');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # USERS and TRIPS
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("display_name", sa.String(length=100), nullable=True),
        sa.Column("email", sa.String(length=255), nullable=True),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "trips",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("organizer_id", sa.UUID(), nullable=False),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_trips_organizer_id", "trips", ["organizer_id"])

    # ========================================================================
    # PARTICIPANTS
    # ========================================================================
    op.create_table(
        "participants",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("trip_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=True),
        sa.Column("display_name", sa.String(length=100), nullable=False),
        sa.Column("is_placeholder", sa.Boolean(), server_default="false", nullable=False),
        sa.Column("claimed_at", postgresql.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("created_by", sa.UUID(), nullable=True),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["trip_id"], ["trips.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("trip_id", "user_id", name="uq_participants_trip_user"),
        sa.CheckConstraint(
            "(is_placeholder AND user_id IS NULL) OR (NOT is_placeholder AND user_id IS NOT NULL)",
            name="ck_participants_placeholder_link",
        ),
    )
    op.create_index("idx_participants_trip_id", "participants", ["trip_id"])

    # ========================================================================
    # CODES (invites and placeholder claims store only SHA-256 digests)
    # ========================================================================
    op.create_table(
        "trip_invites",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("trip_id", sa.UUID(), nullable=False),
        sa.Column("code_hash", sa.String(length=64), nullable=False),
        sa.Column("expires_at", postgresql.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("max_uses", sa.Integer(), nullable=False),
        sa.Column("uses", sa.Integer(), server_default="0", nullable=False),
        sa.Column("created_by", sa.UUID(), nullable=False),
        _created_at(),
        sa.Column("revoked_at", postgresql.TIMESTAMP(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["trip_id"], ["trips.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("code_hash"),
        sa.CheckConstraint("max_uses >= 1", name="ck_trip_invites_max_uses"),
        sa.CheckConstraint("uses >= 0 AND uses <= max_uses", name="ck_trip_invites_uses"),
    )
    op.create_index("idx_trip_invites_trip_id", "trip_invites", ["trip_id"])

    op.create_table(
        "placeholder_claims",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("trip_id", sa.UUID(), nullable=False),
        sa.Column("participant_id", sa.UUID(), nullable=True),
        sa.Column("code_hash", sa.String(length=64), nullable=False),
        sa.Column("expires_at", postgresql.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("created_by", sa.UUID(), nullable=False),
        _created_at(),
        sa.Column("revoked_at", postgresql.TIMESTAMP(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["trip_id"], ["trips.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["participant_id"], ["participants.id"], ondelete="SET NULL"
        ),
        sa.UniqueConstraint("code_hash"),
    )
    op.create_index(
        "idx_placeholder_claims_participant_id", "placeholder_claims", ["participant_id"]
    )

    # ========================================================================
    # PROPOSALS
    # ========================================================================
    op.create_table(
        "proposals",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("trip_id", sa.UUID(), nullable=False),
        sa.Column("kind", PROPOSAL_KIND, nullable=False),
        sa.Column("title", sa.Text(), nullable=True),
        sa.Column("starts_on", sa.Date(), nullable=True),
        sa.Column("ends_on", sa.Date(), nullable=True),
        sa.Column("is_chosen", sa.Boolean(), server_default="false", nullable=False),
        sa.Column("created_by", sa.UUID(), nullable=True),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["trip_id"], ["trips.id"], ondelete="CASCADE"),
        sa.CheckConstraint(
            "ends_on IS NULL OR starts_on IS NULL OR ends_on >= starts_on",
            name="ck_proposals_term_order",
        ),
        sa.CheckConstraint(
            "kind <> 'date' OR NOT is_chosen", name="ck_proposals_date_unchosen"
        ),
    )
    op.create_index("idx_proposals_trip_kind", "proposals", ["trip_id", "kind"])
    op.create_index(
        "uq_proposals_one_chosen",
        "proposals",
        ["trip_id", "kind"],
        unique=True,
        postgresql_where=sa.text("is_chosen"),
    )
    op.create_index(
        "uq_proposals_date_per_day",
        "proposals",
        ["trip_id", "starts_on"],
        unique=True,
        postgresql_where=sa.text("kind = 'date'"),
    )

    # ========================================================================
    # VOTES
    # ========================================================================
    op.create_table(
        "votes",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("kind", PROPOSAL_KIND, nullable=False),
        sa.Column("option_id", sa.UUID(), nullable=False),
        sa.Column("participant_id", sa.UUID(), nullable=False),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["option_id"], ["proposals.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["participant_id"], ["participants.id"], ondelete="CASCADE"
        ),
        sa.UniqueConstraint(
            "option_id", "participant_id", name="uq_votes_option_participant"
        ),
    )
    op.create_index("idx_votes_participant_id", "votes", ["participant_id"])

    # ========================================================================
    # GEAR
    # ========================================================================
    op.create_table(
        "gear_items",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("trip_id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["trip_id"], ["trips.id"], ondelete="CASCADE"),
    )

    op.create_table(
        "gear_assignments",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("gear_id", sa.UUID(), nullable=False),
        sa.Column("participant_id", sa.UUID(), nullable=False),
        sa.Column("quantity", sa.Integer(), server_default="1", nullable=False),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["gear_id"], ["gear_items.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["participant_id"], ["participants.id"], ondelete="CASCADE"
        ),
        sa.UniqueConstraint(
            "gear_id", "participant_id", name="uq_gear_assignments_gear_participant"
        ),
        sa.CheckConstraint("quantity >= 1", name="ck_gear_assignments_quantity"),
    )
    op.create_index(
        "idx_gear_assignments_participant_id", "gear_assignments", ["participant_id"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("gear_assignments")
    op.drop_table("gear_items")
    op.drop_table("votes")
    op.drop_table("proposals")
    op.drop_table("placeholder_claims")
    op.drop_table("trip_invites")
    op.drop_table("participants")
    op.drop_table("trips")
    op.drop_table("users")
    op.execute("DROP TYPE IF EXISTS proposal_kind")
