"""Invite repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from trip.domain.model import TripInvite
from trip.domain.value import InviteId, TripId


class InviteRepository(ABC):
    """Repository for TripInvite entity."""

    @abstractmethod
    async def find_by_id(self, invite_id: InviteId) -> Optional[TripInvite]:
        pass

    @abstractmethod
    async def list_by_trip(self, trip_id: TripId) -> list[TripInvite]:
        pass

    @abstractmethod
    async def save(self, invite: TripInvite) -> TripInvite:
        """Save an invite (create or update).

        Raises:
            IntegrityError: If another invite already has the same code hash
        """
        pass

    @abstractmethod
    async def redeem(self, code_hash: str, now: datetime) -> Optional[TripInvite]:
        """Consume one use of a usable invite.

        The usability check and the increment happen as one atomic step, so
        concurrent redemptions can never push uses past max_uses. The invite
        is revoked in the same step when it reaches max_uses.

        Args:
            code_hash: Hash of the normalized code
            now: Redemption time used for the expiry check

        Returns:
            The updated invite, or None if no usable invite matches
        """
        pass

    @abstractmethod
    async def revoke(self, invite_id: InviteId, now: datetime) -> Optional[TripInvite]:
        """Revoke an invite unless it is already revoked.

        Returns:
            The invite after revocation, or None if it does not exist
        """
        pass
