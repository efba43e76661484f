"""Proposal use cases."""

from .list_proposals import (
    ListProposalsRequest,
    ListProposalsResponse,
    ListProposalsUseCase,
)
from .propose import ProposeRequest, ProposeResponse, ProposeUseCase

__all__ = [
    "ListProposalsRequest",
    "ListProposalsResponse",
    "ListProposalsUseCase",
    "ProposeRequest",
    "ProposeResponse",
    "ProposeUseCase",
]
