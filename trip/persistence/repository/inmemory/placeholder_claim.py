"""In-memory placeholder claim repository for testing."""

from datetime import datetime
from typing import Optional

from trip.domain.model import PlaceholderClaim
from trip.domain.repository import PlaceholderClaimRepository
from trip.domain.value import ClaimId

from .store import InMemoryStore


class InMemoryPlaceholderClaimRepository(PlaceholderClaimRepository):
    """In-memory implementation of PlaceholderClaimRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_by_id(self, claim_id: ClaimId) -> Optional[PlaceholderClaim]:
        return self.store.claims.get(claim_id)

    async def save(self, claim: PlaceholderClaim) -> PlaceholderClaim:
        self.store.claims[claim.id] = claim
        return claim

    async def consume(self, code_hash: str, now: datetime) -> Optional[PlaceholderClaim]:
        for claim in self.store.claims.values():
            if claim.code_hash == code_hash and claim.is_usable(now):
                revoked = claim.model_copy(update={"revoked_at": now})
                self.store.claims[claim.id] = revoked
                return revoked
        return None

    async def revoke(self, claim_id: ClaimId, now: datetime) -> Optional[PlaceholderClaim]:
        claim = self.store.claims.get(claim_id)
        if claim is None:
            return None
        if claim.revoked_at is None:
            claim = claim.model_copy(update={"revoked_at": now})
            self.store.claims[claim_id] = claim
        return claim
