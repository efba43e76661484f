"""Participant use cases."""

from .add_placeholder import (
    AddPlaceholderRequest,
    AddPlaceholderResponse,
    AddPlaceholderUseCase,
)
from .list_participants import (
    ListParticipantsRequest,
    ListParticipantsResponse,
    ListParticipantsUseCase,
)
from .remove_participant import (
    RemoveParticipantRequest,
    RemoveParticipantResponse,
    RemoveParticipantUseCase,
)
from .rename_participant import (
    RenameParticipantRequest,
    RenameParticipantResponse,
    RenameParticipantUseCase,
)

__all__ = [
    "AddPlaceholderRequest",
    "AddPlaceholderResponse",
    "AddPlaceholderUseCase",
    "ListParticipantsRequest",
    "ListParticipantsResponse",
    "ListParticipantsUseCase",
    "RemoveParticipantRequest",
    "RemoveParticipantResponse",
    "RemoveParticipantUseCase",
    "RenameParticipantRequest",
    "RenameParticipantResponse",
    "RenameParticipantUseCase",
]
