"""Mappers between database rows and domain models.

Domain models are frozen pydantic models, so rows are mapped by hand
rather than through SQLAlchemy's ORM mapping.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from trip.domain.model import (
    GearAssignment,
    GearItem,
    Participant,
    PlaceholderClaim,
    Proposal,
    Trip,
    TripInvite,
    User,
    Vote,
)
from trip.domain.value import ProposalKind


def _uuid(value: Any) -> Optional[UUID]:
    """Accept UUIDs or their string form, as drivers differ."""
    if value is None:
        return None
    return UUID(value) if isinstance(value, str) else value


def row_to_trip(row: Dict[str, Any]) -> Trip:
    return Trip(
        id=_uuid(row["id"]),
        name=row["name"],
        organizer_id=_uuid(row["organizer_id"]),
        created_at=row["created_at"],
    )


def trip_to_dict(trip: Trip) -> Dict[str, Any]:
    return trip.model_dump()


def row_to_user(row: Dict[str, Any]) -> User:
    return User(
        id=_uuid(row["id"]),
        display_name=row.get("display_name"),
        email=row.get("email"),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    return user.model_dump()


def row_to_participant(row: Dict[str, Any]) -> Participant:
    """Convert database row to Participant domain model.

    Args:
        row: Database row as dict

    Returns:
        Participant domain model
    """
    return Participant(
        id=_uuid(row["id"]),
        trip_id=_uuid(row["trip_id"]),
        user_id=_uuid(row.get("user_id")),
        display_name=row["display_name"],
        is_placeholder=row["is_placeholder"],
        claimed_at=row.get("claimed_at"),
        created_by=_uuid(row.get("created_by")),
        created_at=row["created_at"],
    )


def participant_to_dict(participant: Participant) -> Dict[str, Any]:
    return participant.model_dump()


def row_to_invite(row: Dict[str, Any]) -> TripInvite:
    return TripInvite(
        id=_uuid(row["id"]),
        trip_id=_uuid(row["trip_id"]),
        code_hash=row["code_hash"],
        expires_at=row["expires_at"],
        max_uses=row["max_uses"],
        uses=row["uses"],
        created_by=_uuid(row["created_by"]),
        created_at=row["created_at"],
        revoked_at=row.get("revoked_at"),
    )


def invite_to_dict(invite: TripInvite) -> Dict[str, Any]:
    return invite.model_dump()


def row_to_claim(row: Dict[str, Any]) -> PlaceholderClaim:
    return PlaceholderClaim(
        id=_uuid(row["id"]),
        trip_id=_uuid(row["trip_id"]),
        participant_id=_uuid(row["participant_id"]),
        code_hash=row["code_hash"],
        expires_at=row["expires_at"],
        created_by=_uuid(row["created_by"]),
        created_at=row["created_at"],
        revoked_at=row.get("revoked_at"),
    )


def claim_to_dict(claim: PlaceholderClaim) -> Dict[str, Any]:
    return claim.model_dump()


def row_to_proposal(row: Dict[str, Any]) -> Proposal:
    """Convert database row to Proposal domain model.

    Args:
        row: Database row as dict

    Returns:
        Proposal domain model of the row's kind
    """
    return Proposal(
        id=_uuid(row["id"]),
        trip_id=_uuid(row["trip_id"]),
        kind=ProposalKind(row["kind"]),
        title=row.get("title"),
        starts_on=row.get("starts_on"),
        ends_on=row.get("ends_on"),
        is_chosen=row["is_chosen"],
        created_by=_uuid(row.get("created_by")),
        created_at=row["created_at"],
    )


def proposal_to_dict(proposal: Proposal) -> Dict[str, Any]:
    data = proposal.model_dump()
    # Enum columns take the plain string value
    data["kind"] = proposal.kind.value
    return data


def row_to_vote(row: Dict[str, Any]) -> Vote:
    return Vote(
        id=_uuid(row["id"]),
        kind=ProposalKind(row["kind"]),
        option_id=_uuid(row["option_id"]),
        participant_id=_uuid(row["participant_id"]),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    data = vote.model_dump()
    data["kind"] = vote.kind.value
    return data


def row_to_gear_item(row: Dict[str, Any]) -> GearItem:
    return GearItem(
        id=_uuid(row["id"]),
        trip_id=_uuid(row["trip_id"]),
        name=row["name"],
        created_at=row["created_at"],
    )


def gear_item_to_dict(item: GearItem) -> Dict[str, Any]:
    return item.model_dump()


def row_to_gear_assignment(row: Dict[str, Any]) -> GearAssignment:
    return GearAssignment(
        id=_uuid(row["id"]),
        gear_id=_uuid(row["gear_id"]),
        participant_id=_uuid(row["participant_id"]),
        quantity=row["quantity"],
        created_at=row["created_at"],
    )


def gear_assignment_to_dict(assignment: GearAssignment) -> Dict[str, Any]:
    return assignment.model_dump()
