"""Rename participant use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from trip.application.usecase.base import BaseUseCase, UseCaseResponse
from trip.application.usecase.views import ParticipantView
from trip.config import EngineSettings
from trip.domain.repository import UnitOfWork
from trip.domain.service import ParticipantService
from trip.domain.value import ParticipantId, TripId, UserId


class RenameParticipantRequest(BaseModel):
    """Rename request.

    Without ``participant_id`` the caller renames their own participant.
    With it, the organizer renames a placeholder.
    """

    trip_id: UUID
    caller_id: UUID
    new_name: str
    participant_id: Optional[UUID] = None


class RenameParticipantResponse(UseCaseResponse):
    """Rename response. ``renamed`` is False when a real participant was left as is."""

    participant: Optional[ParticipantView] = None
    renamed: bool = False


class RenameParticipantUseCase(
    BaseUseCase[RenameParticipantRequest, RenameParticipantResponse]
):
    """Use case for renaming a placeholder or oneself."""

    name = "rename_participant"
    response_type = RenameParticipantResponse

    def __init__(
        self,
        participant_service: ParticipantService,
        unit_of_work: UnitOfWork,
        settings: EngineSettings,
    ) -> None:
        super().__init__(unit_of_work, settings)
        self.participant_service = participant_service

    async def _execute(
        self, request: RenameParticipantRequest
    ) -> RenameParticipantResponse:
        trip_id = TripId(request.trip_id)
        caller = UserId(request.caller_id)

        async with self.unit_of_work.transaction():
            if request.participant_id is None:
                participant = await self.participant_service.rename_self(
                    trip_id, request.new_name, caller
                )
                renamed = True
            else:
                participant, renamed = await self.participant_service.rename_placeholder(
                    trip_id, ParticipantId(request.participant_id), request.new_name, caller
                )

        return RenameParticipantResponse(
            participant=ParticipantView.from_model(participant), renamed=renamed
        )
