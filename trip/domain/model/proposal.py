"""Proposal entity.

Date options, destinations, term proposals and transportations share one
polymorphic shape keyed by ``ProposalKind``.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import Field, model_validator

from trip.domain.model.common import DomainModel, utcnow
from trip.domain.value import ProposalId, ProposalKind, TripId, UserId


class Proposal(DomainModel):
    """Proposal entity.

    Business rules:
    - Date options carry a single date and are never chosen
    - Term proposals carry a start and an end, end not before start
    - Destinations and transportations carry a title
    - At most one chosen proposal per kind per trip (storage constraint)
    """

    id: ProposalId
    trip_id: TripId
    kind: ProposalKind
    title: Optional[str] = None
    starts_on: Optional[date] = None
    ends_on: Optional[date] = None
    is_chosen: bool = False
    created_by: Optional[UserId] = None
    created_at: datetime = Field(default_factory=utcnow)

    @model_validator(mode="after")
    def validate_kind_requirements(self) -> "Proposal":
        """Validate the fields each kind requires."""
        if self.kind == ProposalKind.DATE:
            if self.starts_on is None:
                raise ValueError("Date options require a date")
            if self.is_chosen:
                raise ValueError("Date options cannot be chosen")
        elif self.kind == ProposalKind.TERM:
            if self.starts_on is None or self.ends_on is None:
                raise ValueError("Term proposals require a start and an end date")
            if self.ends_on < self.starts_on:
                raise ValueError("Term end date must not precede its start date")
        elif not self.title or not self.title.strip():
            raise ValueError(f"{self.kind.value.capitalize()} proposals require a title")
        return self
