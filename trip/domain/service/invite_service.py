"""Invite domain service."""

from datetime import timedelta
from typing import Optional
from uuid import uuid4

import logfire

from trip.config import CodeSettings
from trip.domain.error import InvalidOrExpiredCodeError, NotFoundError, ValidationError
from trip.domain.model import Participant, TripInvite
from trip.domain.model.common import utcnow
from trip.domain.repository import InviteRepository
from trip.domain.value import InviteId, TripId, UserId
from trip.util.codes import generate_code, hash_code, normalize_code

from .access_service import TripAccessService
from .base import Service
from .participant_service import ParticipantService


class InviteService(Service):
    """Domain service for multi-use trip join codes."""

    def __init__(
        self,
        invite_repository: InviteRepository,
        participant_service: ParticipantService,
        access_service: TripAccessService,
        settings: CodeSettings,
    ) -> None:
        """Initialize invite service.

        Args:
            invite_repository: Invite repository
            participant_service: Participant domain service
            access_service: Trip access service
            settings: Code length, TTL and quota defaults
        """
        self.invite_repository = invite_repository
        self.participant_service = participant_service
        self.access_service = access_service
        self.settings = settings

    async def create_invite(
        self,
        trip_id: TripId,
        creator: UserId,
        ttl_minutes: Optional[int] = None,
        max_uses: Optional[int] = None,
    ) -> tuple[TripInvite, str]:
        """Issue an invite code for a trip.

        The plaintext code is returned here once and never stored.

        Args:
            trip_id: Trip to invite into
            creator: Caller's user ID, must be the organizer
            ttl_minutes: Lifetime, defaults to the configured invite TTL
            max_uses: Redemption quota, defaults to the configured maximum

        Returns:
            Tuple of (stored invite, plaintext code)

        Raises:
            NotFoundError: If the trip does not exist
            ForbiddenError: If the caller is not the organizer
            ValidationError: If ttl_minutes or max_uses is below 1
        """
        with logfire.span("create_invite", trip_id=str(trip_id)):
            await self.access_service.require_organizer(trip_id, creator, "create invites")

            ttl = self.settings.invite_ttl_minutes if ttl_minutes is None else ttl_minutes
            quota = self.settings.invite_max_uses if max_uses is None else max_uses
            if ttl < 1:
                raise ValidationError("Invite lifetime must be at least one minute")
            if quota < 1:
                raise ValidationError("Invite quota must be at least 1")

            code = generate_code(self.settings.length)
            now = utcnow()
            invite = await self.invite_repository.save(
                TripInvite(
                    id=InviteId(uuid4()),
                    trip_id=trip_id,
                    code_hash=hash_code(code),
                    expires_at=now + timedelta(minutes=ttl),
                    max_uses=quota,
                    created_by=creator,
                    created_at=now,
                )
            )
            logfire.info(
                "Invite created",
                trip_id=str(trip_id),
                invite_id=str(invite.id),
                max_uses=quota,
            )
            return invite, code

    async def redeem(self, code: str, caller: UserId) -> tuple[Participant, TripInvite]:
        """Join a trip with an invite code.

        Already being a member is not an error; the existing participant is
        returned and the use is still counted.

        Returns:
            Tuple of (caller's participant, invite after this use)

        Raises:
            ValidationError: If the code is blank
            InvalidOrExpiredCodeError: If no usable invite matches the code
        """
        normalized = normalize_code(code or "")
        if not normalized:
            raise ValidationError("Code is required")

        code_hash = hash_code(normalized)
        with logfire.span("redeem_invite", code_hash=code_hash[:8], user_id=str(caller)):
            invite = await self.invite_repository.redeem(code_hash, utcnow())
            if invite is None:
                logfire.warn("Invite redemption refused", code_hash=code_hash[:8])
                raise InvalidOrExpiredCodeError()

            participant, created = await self.participant_service.add_real_participant(
                invite.trip_id, caller
            )
            logfire.info(
                "Invite redeemed",
                trip_id=str(invite.trip_id),
                invite_id=str(invite.id),
                uses=invite.uses,
                joined=created,
            )
            return participant, invite

    async def revoke(
        self, trip_id: TripId, invite_id: InviteId, caller: UserId
    ) -> TripInvite:
        """Revoke an invite. Revoking twice is still a success.

        Raises:
            NotFoundError: If the trip or invite does not exist
            ForbiddenError: If the caller is not the organizer
        """
        with logfire.span("revoke_invite", trip_id=str(trip_id), invite_id=str(invite_id)):
            await self.access_service.require_organizer(trip_id, caller, "revoke invites")

            invite = await self.invite_repository.find_by_id(invite_id)
            if invite is None or invite.trip_id != trip_id:
                raise NotFoundError("Invite", str(invite_id))
            if invite.revoked_at is not None:
                return invite

            revoked = await self.invite_repository.revoke(invite_id, utcnow())
            if revoked is None:
                raise NotFoundError("Invite", str(invite_id))
            logfire.info("Invite revoked", invite_id=str(invite_id))
            return revoked

    async def list_invites(self, trip_id: TripId, caller: UserId) -> list[TripInvite]:
        """List a trip's invites, newest first. Organizer only."""
        await self.access_service.require_organizer(trip_id, caller, "list invites")
        invites = await self.invite_repository.list_by_trip(trip_id)
        return sorted(invites, key=lambda invite: invite.created_at, reverse=True)
