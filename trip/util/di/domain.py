"""Domain layer DI providers."""

from dishka import Scope, provide

from trip.config import CodeSettings, ParticipantSettings
from trip.domain.repository import (
    GearRepository,
    InviteRepository,
    ParticipantRepository,
    PlaceholderClaimRepository,
    ProposalRepository,
    TripRepository,
    UserRepository,
    VoteRepository,
)
from trip.domain.service import (
    ClaimService,
    GearAssignmentMigrator,
    GearService,
    InviteService,
    ParticipantMigrator,
    ParticipantService,
    ProposalService,
    SelectionService,
    TripAccessService,
    TripService,
    VoteMigrator,
    VoteService,
)
from trip.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with the repository and
    session lifecycle: each engine call gets fresh services sharing one
    transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_access_service(
        self,
        trip_repository: TripRepository,
        participant_repository: ParticipantRepository,
    ) -> TripAccessService:
        """Provide trip access domain service."""
        return TripAccessService(
            trip_repository=trip_repository,
            participant_repository=participant_repository,
        )

    @provide
    def get_participant_service(
        self,
        participant_repository: ParticipantRepository,
        user_repository: UserRepository,
        access_service: TripAccessService,
        settings: ParticipantSettings,
    ) -> ParticipantService:
        """Provide participant domain service."""
        return ParticipantService(
            participant_repository=participant_repository,
            user_repository=user_repository,
            access_service=access_service,
            settings=settings,
        )

    @provide
    def get_trip_service(
        self,
        trip_repository: TripRepository,
        participant_service: ParticipantService,
        access_service: TripAccessService,
    ) -> TripService:
        """Provide trip domain service."""
        return TripService(
            trip_repository=trip_repository,
            participant_service=participant_service,
            access_service=access_service,
        )

    @provide
    def get_invite_service(
        self,
        invite_repository: InviteRepository,
        participant_service: ParticipantService,
        access_service: TripAccessService,
        settings: CodeSettings,
    ) -> InviteService:
        """Provide invite domain service."""
        return InviteService(
            invite_repository=invite_repository,
            participant_service=participant_service,
            access_service=access_service,
            settings=settings,
        )

    @provide
    def get_participant_migrators(
        self,
        vote_repository: VoteRepository,
        gear_repository: GearRepository,
    ) -> list[ParticipantMigrator]:
        """Provide every migrator run when two participants are merged.

        A new participant-keyed table joins claim merges by adding its
        migrator here.
        """
        return [
            VoteMigrator(vote_repository),
            GearAssignmentMigrator(gear_repository),
        ]

    @provide
    def get_claim_service(
        self,
        claim_repository: PlaceholderClaimRepository,
        participant_repository: ParticipantRepository,
        participant_service: ParticipantService,
        access_service: TripAccessService,
        migrators: list[ParticipantMigrator],
        settings: CodeSettings,
    ) -> ClaimService:
        """Provide placeholder claim domain service."""
        return ClaimService(
            claim_repository=claim_repository,
            participant_repository=participant_repository,
            participant_service=participant_service,
            access_service=access_service,
            migrators=migrators,
            settings=settings,
        )

    @provide
    def get_proposal_service(
        self,
        proposal_repository: ProposalRepository,
        access_service: TripAccessService,
    ) -> ProposalService:
        """Provide proposal domain service."""
        return ProposalService(
            proposal_repository=proposal_repository,
            access_service=access_service,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        proposal_service: ProposalService,
        participant_service: ParticipantService,
        access_service: TripAccessService,
    ) -> VoteService:
        """Provide vote ledger domain service."""
        return VoteService(
            vote_repository=vote_repository,
            proposal_service=proposal_service,
            participant_service=participant_service,
            access_service=access_service,
        )

    @provide
    def get_selection_service(
        self,
        proposal_repository: ProposalRepository,
        proposal_service: ProposalService,
        access_service: TripAccessService,
    ) -> SelectionService:
        """Provide exclusive selection domain service."""
        return SelectionService(
            proposal_repository=proposal_repository,
            proposal_service=proposal_service,
            access_service=access_service,
        )

    @provide
    def get_gear_service(
        self,
        gear_repository: GearRepository,
        participant_service: ParticipantService,
        access_service: TripAccessService,
    ) -> GearService:
        """Provide gear checklist domain service."""
        return GearService(
            gear_repository=gear_repository,
            participant_service=participant_service,
            access_service=access_service,
        )
