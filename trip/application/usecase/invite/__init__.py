"""Invite use cases."""

from .create_invite import CreateInviteRequest, CreateInviteResponse, CreateInviteUseCase
from .join_trip import JoinTripRequest, JoinTripResponse, JoinTripUseCase
from .list_invites import (
    InviteItem,
    ListInvitesRequest,
    ListInvitesResponse,
    ListInvitesUseCase,
)
from .revoke_invite import RevokeInviteRequest, RevokeInviteResponse, RevokeInviteUseCase

__all__ = [
    "CreateInviteRequest",
    "CreateInviteResponse",
    "CreateInviteUseCase",
    "InviteItem",
    "JoinTripRequest",
    "JoinTripResponse",
    "JoinTripUseCase",
    "ListInvitesRequest",
    "ListInvitesResponse",
    "ListInvitesUseCase",
    "RevokeInviteRequest",
    "RevokeInviteResponse",
    "RevokeInviteUseCase",
]
