"""Placeholder claim repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from trip.domain.model import PlaceholderClaim
from trip.domain.value import ClaimId


class PlaceholderClaimRepository(ABC):
    """Repository for PlaceholderClaim entity."""

    @abstractmethod
    async def find_by_id(self, claim_id: ClaimId) -> Optional[PlaceholderClaim]:
        pass

    @abstractmethod
    async def save(self, claim: PlaceholderClaim) -> PlaceholderClaim:
        pass

    @abstractmethod
    async def consume(self, code_hash: str, now: datetime) -> Optional[PlaceholderClaim]:
        """Atomically revoke a usable claim and return it.

        Only one of several concurrent callers can consume a given claim.

        Args:
            code_hash: Hash of the normalized code
            now: Redemption time, also recorded as the revocation time

        Returns:
            The revoked claim, or None if no unrevoked, unexpired claim matches
        """
        pass

    @abstractmethod
    async def revoke(self, claim_id: ClaimId, now: datetime) -> Optional[PlaceholderClaim]:
        pass
