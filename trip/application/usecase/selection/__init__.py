"""Exclusive selection use cases."""

from .choose_proposal import (
    ChooseProposalRequest,
    ChooseProposalResponse,
    ChooseProposalUseCase,
)

__all__ = [
    "ChooseProposalRequest",
    "ChooseProposalResponse",
    "ChooseProposalUseCase",
]
