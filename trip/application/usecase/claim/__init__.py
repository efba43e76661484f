"""Placeholder claim use cases."""

from .claim_by_selection import (
    ClaimBySelectionRequest,
    ClaimBySelectionResponse,
    ClaimBySelectionUseCase,
)
from .claim_placeholder import (
    ClaimPlaceholderRequest,
    ClaimPlaceholderResponse,
    ClaimPlaceholderUseCase,
)
from .issue_claim_code import (
    IssueClaimCodeRequest,
    IssueClaimCodeResponse,
    IssueClaimCodeUseCase,
)
from .revoke_claim import RevokeClaimRequest, RevokeClaimResponse, RevokeClaimUseCase

__all__ = [
    "ClaimBySelectionRequest",
    "ClaimBySelectionResponse",
    "ClaimBySelectionUseCase",
    "ClaimPlaceholderRequest",
    "ClaimPlaceholderResponse",
    "ClaimPlaceholderUseCase",
    "IssueClaimCodeRequest",
    "IssueClaimCodeResponse",
    "IssueClaimCodeUseCase",
    "RevokeClaimRequest",
    "RevokeClaimResponse",
    "RevokeClaimUseCase",
]
