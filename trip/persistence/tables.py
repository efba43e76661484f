"""SQLAlchemy table definitions for the trip engine.

These definitions match the schema created by the Alembic migrations.
Uniqueness rules the engine relies on under concurrency live here as
constraints, not only in application code.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Date,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

PROPOSAL_KINDS = ("date", "destination", "term", "transportation")

# ============================================================================
# USERS TABLE (profiles mirrored from the authentication collaborator)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("display_name", String(100), nullable=True),
    Column("email", String(255), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# TRIPS TABLE
# ============================================================================
trips_table = Table(
    "trips",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("name", String(200), nullable=False),
    Column("organizer_id", UUID, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_trips_organizer_id", trips_table.c.organizer_id)

# ============================================================================
# PARTICIPANTS TABLE (real users and placeholders)
# ============================================================================
participants_table = Table(
    "participants",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("trip_id", UUID, ForeignKey("trips.id", ondelete="CASCADE"), nullable=False),
    Column("user_id", UUID, nullable=True),  # NULL for placeholders
    Column("display_name", String(100), nullable=False),
    Column("is_placeholder", Boolean, nullable=False, server_default="false"),
    Column("claimed_at", TIMESTAMP(timezone=True), nullable=True),
    Column("created_by", UUID, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    # NULL user ids never collide, so any number of placeholders may coexist
    UniqueConstraint("trip_id", "user_id", name="uq_participants_trip_user"),
    CheckConstraint(
        "(is_placeholder AND user_id IS NULL) OR (NOT is_placeholder AND user_id IS NOT NULL)",
        name="ck_participants_placeholder_link",
    ),
)

Index("idx_participants_trip_id", participants_table.c.trip_id)

# ============================================================================
# TRIP INVITES TABLE
# ============================================================================
trip_invites_table = Table(
    "trip_invites",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("trip_id", UUID, ForeignKey("trips.id", ondelete="CASCADE"), nullable=False),
    Column("code_hash", String(64), nullable=False, unique=True),  # SHA-256 hex
    Column("expires_at", TIMESTAMP(timezone=True), nullable=False),
    Column("max_uses", Integer, nullable=False),
    Column("uses", Integer, nullable=False, server_default="0"),
    Column("created_by", UUID, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("revoked_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint("max_uses >= 1", name="ck_trip_invites_max_uses"),
    CheckConstraint("uses >= 0 AND uses <= max_uses", name="ck_trip_invites_uses"),
)

Index("idx_trip_invites_trip_id", trip_invites_table.c.trip_id)

# ============================================================================
# PLACEHOLDER CLAIMS TABLE
# ============================================================================
placeholder_claims_table = Table(
    "placeholder_claims",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("trip_id", UUID, ForeignKey("trips.id", ondelete="CASCADE"), nullable=False),
    Column(
        "participant_id",
        UUID,
        ForeignKey("participants.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("code_hash", String(64), nullable=False, unique=True),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=False),
    Column("created_by", UUID, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("revoked_at", TIMESTAMP(timezone=True), nullable=True),
)

Index("idx_placeholder_claims_participant_id", placeholder_claims_table.c.participant_id)

# ============================================================================
# PROPOSALS TABLE (date options, destinations, terms, transportations)
# ============================================================================
proposals_table = Table(
    "proposals",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("trip_id", UUID, ForeignKey("trips.id", ondelete="CASCADE"), nullable=False),
    Column(
        "kind",
        Enum(*PROPOSAL_KINDS, name="proposal_kind", create_type=False),
        nullable=False,
    ),
    Column("title", Text, nullable=True),
    Column("starts_on", Date, nullable=True),
    Column("ends_on", Date, nullable=True),
    Column("is_chosen", Boolean, nullable=False, server_default="false"),
    Column("created_by", UUID, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "ends_on IS NULL OR starts_on IS NULL OR ends_on >= starts_on",
        name="ck_proposals_term_order",
    ),
    CheckConstraint("kind <> 'date' OR NOT is_chosen", name="ck_proposals_date_unchosen"),
)

Index("idx_proposals_trip_kind", proposals_table.c.trip_id, proposals_table.c.kind)

# At most one chosen proposal per kind per trip
Index(
    "uq_proposals_one_chosen",
    proposals_table.c.trip_id,
    proposals_table.c.kind,
    unique=True,
    postgresql_where=proposals_table.c.is_chosen,
)

# One date option per calendar day per trip
Index(
    "uq_proposals_date_per_day",
    proposals_table.c.trip_id,
    proposals_table.c.starts_on,
    unique=True,
    postgresql_where=proposals_table.c.kind == "date",
)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "kind",
        Enum(*PROPOSAL_KINDS, name="proposal_kind", create_type=False),
        nullable=False,
    ),
    Column(
        "option_id", UUID, ForeignKey("proposals.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "participant_id",
        UUID,
        ForeignKey("participants.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("option_id", "participant_id", name="uq_votes_option_participant"),
)

Index("idx_votes_participant_id", votes_table.c.participant_id)

# ============================================================================
# GEAR TABLES
# ============================================================================
gear_items_table = Table(
    "gear_items",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("trip_id", UUID, ForeignKey("trips.id", ondelete="CASCADE"), nullable=False),
    Column("name", String(200), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

gear_assignments_table = Table(
    "gear_assignments",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "gear_id", UUID, ForeignKey("gear_items.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "participant_id",
        UUID,
        ForeignKey("participants.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("quantity", Integer, nullable=False, server_default="1"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("gear_id", "participant_id", name="uq_gear_assignments_gear_participant"),
    CheckConstraint("quantity >= 1", name="ck_gear_assignments_quantity"),
)

Index("idx_gear_assignments_participant_id", gear_assignments_table.c.participant_id)
