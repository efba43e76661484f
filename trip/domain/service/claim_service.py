"""Placeholder claim domain service.

Claiming turns a placeholder into a real user's participant while keeping
its participant id, so everything recorded against the placeholder stays
attached. When the user already had a participant in the trip, that row is
merged into the placeholder and removed.
"""

from datetime import timedelta
from typing import Optional, Sequence
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from trip.config import CodeSettings
from trip.domain.error import InvalidOrExpiredCodeError, NotFoundError, ValidationError
from trip.domain.model import Participant, PlaceholderClaim
from trip.domain.model.common import utcnow
from trip.domain.repository import ParticipantRepository, PlaceholderClaimRepository
from trip.domain.value import ClaimId, ParticipantId, TripId, UserId
from trip.util.codes import generate_code, hash_code, normalize_code

from .access_service import TripAccessService
from .base import Service
from .participant_migrator import ParticipantMigrator
from .participant_service import ParticipantService


class ClaimService(Service):
    """Domain service for one-time placeholder claim codes."""

    def __init__(
        self,
        claim_repository: PlaceholderClaimRepository,
        participant_repository: ParticipantRepository,
        participant_service: ParticipantService,
        access_service: TripAccessService,
        migrators: Sequence[ParticipantMigrator],
        settings: CodeSettings,
    ) -> None:
        """Initialize claim service.

        Args:
            claim_repository: Placeholder claim repository
            participant_repository: Participant repository
            participant_service: Participant domain service
            access_service: Trip access service
            migrators: Migrators run when merging two participants
            settings: Code length and TTL defaults
        """
        self.claim_repository = claim_repository
        self.participant_repository = participant_repository
        self.participant_service = participant_service
        self.access_service = access_service
        self.migrators = list(migrators)
        self.settings = settings

    async def issue_claim(
        self,
        trip_id: TripId,
        participant_id: ParticipantId,
        creator: UserId,
        ttl_minutes: Optional[int] = None,
    ) -> tuple[PlaceholderClaim, str]:
        """Issue a one-time code for claiming a placeholder.

        Returns:
            Tuple of (stored claim, plaintext code)

        Raises:
            NotFoundError: If the trip or participant does not exist
            ForbiddenError: If the caller is not the organizer
            ValidationError: If the target is not a placeholder or the TTL is below 1
        """
        with logfire.span(
            "issue_claim", trip_id=str(trip_id), participant_id=str(participant_id)
        ):
            await self.access_service.require_organizer(
                trip_id, creator, "issue claim codes"
            )
            target = await self.participant_service.get_in_trip(trip_id, participant_id)
            if not target.is_placeholder:
                raise ValidationError("Only placeholders can be claimed")

            ttl = self.settings.claim_ttl_minutes if ttl_minutes is None else ttl_minutes
            if ttl < 1:
                raise ValidationError("Claim lifetime must be at least one minute")

            code = generate_code(self.settings.length)
            now = utcnow()
            claim = await self.claim_repository.save(
                PlaceholderClaim(
                    id=ClaimId(uuid4()),
                    trip_id=trip_id,
                    participant_id=participant_id,
                    code_hash=hash_code(code),
                    expires_at=now + timedelta(minutes=ttl),
                    created_by=creator,
                    created_at=now,
                )
            )
            logfire.info("Claim code issued", claim_id=str(claim.id))
            return claim, code

    async def consume(self, code: str) -> PlaceholderClaim:
        """Look up a claim by code and revoke it in the same step.

        The caller must commit this before acting on the claim so the code
        stays used even if the claim itself later fails.

        Raises:
            ValidationError: If the code is blank
            InvalidOrExpiredCodeError: If no unrevoked, unexpired claim matches
        """
        normalized = normalize_code(code or "")
        if not normalized:
            raise ValidationError("Code is required")

        code_hash = hash_code(normalized)
        with logfire.span("consume_claim", code_hash=code_hash[:8]):
            claim = await self.claim_repository.consume(code_hash, utcnow())
            if claim is None:
                logfire.warn("Claim code refused", code_hash=code_hash[:8])
                raise InvalidOrExpiredCodeError()
            return claim

    async def claim(
        self,
        claim: PlaceholderClaim,
        caller: UserId,
        display_name: Optional[str] = None,
    ) -> tuple[Participant, bool]:
        """Convert a consumed claim's placeholder into the caller's participant.

        If the caller already has a participant in the trip, every registered
        migrator moves its rows onto the placeholder, then the old participant
        is deleted. Run this inside one transaction so a failed merge leaves
        nothing behind.

        Args:
            claim: Claim returned by ``consume``
            caller: Redeeming user's ID
            display_name: Name override, defaults to the caller's profile name

        Returns:
            Tuple of (surviving participant, whether a merge happened)

        Raises:
            InvalidOrExpiredCodeError: If the placeholder is gone or another
                redemption claimed it first
        """
        with logfire.span(
            "claim_placeholder",
            trip_id=str(claim.trip_id),
            participant_id=str(claim.participant_id),
            user_id=str(caller),
        ):
            placeholder = None
            if claim.participant_id is not None:
                placeholder = await self.participant_repository.lock_placeholder(
                    claim.participant_id
                )
            if (
                placeholder is None
                or placeholder.trip_id != claim.trip_id
                or not placeholder.is_placeholder
            ):
                logfire.warn(
                    "Claimed placeholder no longer available",
                    participant_id=str(claim.participant_id),
                )
                raise InvalidOrExpiredCodeError()

            name = await self._claim_name(caller, display_name)
            merged = await self._merge_own(claim.trip_id, caller, placeholder.id)

            try:
                saved = await self.participant_repository.claim_placeholder(
                    placeholder.id, caller, name, utcnow()
                )
            except IntegrityError:
                # The caller joined the trip after the merge check ran
                logfire.warn(
                    "Claim raced a join, merging again",
                    trip_id=str(claim.trip_id),
                    user_id=str(caller),
                )
                if await self._merge_own(claim.trip_id, caller, placeholder.id):
                    merged = True
                saved = await self._claim_after_merge(placeholder.id, caller, name)

            if saved is None:
                logfire.warn(
                    "Placeholder claimed concurrently",
                    participant_id=str(placeholder.id),
                )
                raise InvalidOrExpiredCodeError()

            logfire.info(
                "Placeholder claimed",
                participant_id=str(saved.id),
                merged=merged,
            )
            return saved, merged

    async def claim_by_selection(
        self,
        trip_id: TripId,
        participant_id: ParticipantId,
        caller: UserId,
        display_name: Optional[str] = None,
    ) -> Participant:
        """Take over a placeholder without a code.

        Only a caller without a participant in the trip may do this, so no
        merge is ever needed.

        Raises:
            NotFoundError: If the trip or participant does not exist
            ValidationError: If the caller already participates or the
                target is not a placeholder
        """
        with logfire.span(
            "claim_by_selection", trip_id=str(trip_id), participant_id=str(participant_id)
        ):
            await self.access_service.get_trip(trip_id)
            if await self.participant_service.find_own(trip_id, caller) is not None:
                raise ValidationError("You already have a participant in this trip")

            target = await self.participant_service.get_in_trip(trip_id, participant_id)
            if not target.is_placeholder:
                raise ValidationError("Selected participant is not a claimable placeholder")

            name = await self._claim_name(caller, display_name)
            try:
                claimed = await self.participant_repository.claim_placeholder(
                    target.id, caller, name, utcnow()
                )
            except IntegrityError:
                logfire.warn(
                    "Selection raced a join", trip_id=str(trip_id), user_id=str(caller)
                )
                raise ValidationError("You already have a participant in this trip")
            if claimed is None:
                raise ValidationError("Selected participant is not a claimable placeholder")
            return claimed

    async def revoke(
        self, trip_id: TripId, claim_id: ClaimId, caller: UserId
    ) -> PlaceholderClaim:
        """Revoke an unused claim code. Revoking twice is still a success.

        Raises:
            NotFoundError: If the trip or claim does not exist
            ForbiddenError: If the caller is not the organizer
        """
        await self.access_service.require_organizer(trip_id, caller, "revoke claim codes")

        claim = await self.claim_repository.find_by_id(claim_id)
        if claim is None or claim.trip_id != trip_id:
            raise NotFoundError("Claim", str(claim_id))
        if claim.revoked_at is not None:
            return claim

        revoked = await self.claim_repository.revoke(claim_id, utcnow())
        if revoked is None:
            raise NotFoundError("Claim", str(claim_id))
        return revoked

    async def _claim_name(self, caller: UserId, display_name: Optional[str]) -> str:
        if display_name is not None and display_name.strip():
            return self.participant_service.require_name(display_name)
        return await self.participant_service.profile_name(caller)

    async def _merge_own(
        self, trip_id: TripId, caller: UserId, placeholder_id: ParticipantId
    ) -> bool:
        """Merge the caller's current participant, if any, into the placeholder."""
        existing = await self.participant_service.find_own(trip_id, caller)
        if existing is None or existing.id == placeholder_id:
            return False
        await self._merge(trip_id, existing.id, placeholder_id)
        return True

    async def _claim_after_merge(
        self, placeholder_id: ParticipantId, caller: UserId, name: str
    ) -> Optional[Participant]:
        try:
            return await self.participant_repository.claim_placeholder(
                placeholder_id, caller, name, utcnow()
            )
        except IntegrityError:
            raise ValidationError("You already have a participant in this trip")

    async def _merge(
        self, trip_id: TripId, source: ParticipantId, target: ParticipantId
    ) -> None:
        """Move everything keyed by ``source`` onto ``target`` and delete ``source``."""
        with logfire.span("merge_participants", source=str(source), target=str(target)):
            for migrator in self.migrators:
                moved = await migrator.migrate(trip_id, source, target)
                logfire.info("Merged participant rows", kind=migrator.name, moved=moved)

            # The source row must go before the placeholder takes over its user link
            await self.participant_repository.delete(source)
