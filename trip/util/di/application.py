"""Application layer DI providers."""

from dishka import Scope, provide

from trip.application.usecase.claim import (
    ClaimBySelectionUseCase,
    ClaimPlaceholderUseCase,
    IssueClaimCodeUseCase,
    RevokeClaimUseCase,
)
from trip.application.usecase.gear import (
    AddGearUseCase,
    AssignGearUseCase,
    UnassignGearUseCase,
)
from trip.application.usecase.invite import (
    CreateInviteUseCase,
    JoinTripUseCase,
    ListInvitesUseCase,
    RevokeInviteUseCase,
)
from trip.application.usecase.participant import (
    AddPlaceholderUseCase,
    ListParticipantsUseCase,
    RemoveParticipantUseCase,
    RenameParticipantUseCase,
)
from trip.application.usecase.proposal import ListProposalsUseCase, ProposeUseCase
from trip.application.usecase.selection import ChooseProposalUseCase
from trip.application.usecase.trip import CreateTripUseCase, GetTripUseCase
from trip.application.usecase.vote import (
    CastVoteUseCase,
    RetractVoteUseCase,
    TallyVotesUseCase,
)
from trip.config import CodeSettings, EngineSettings
from trip.domain.repository import UnitOfWork
from trip.domain.service import (
    ClaimService,
    GearService,
    InviteService,
    ParticipantService,
    ProposalService,
    SelectionService,
    TripService,
    VoteService,
)
from trip.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed.

    Every use case shares the request's unit of work with the services it
    drives, so their writes commit together.
    """

    scope = Scope.REQUEST

    # Trip use cases
    @provide
    def get_create_trip_use_case(
        self, trip_service: TripService, unit_of_work: UnitOfWork, settings: EngineSettings
    ) -> CreateTripUseCase:
        """Provide create trip use case."""
        return CreateTripUseCase(trip_service, unit_of_work, settings)

    @provide
    def get_trip_use_case(
        self, trip_service: TripService, unit_of_work: UnitOfWork, settings: EngineSettings
    ) -> GetTripUseCase:
        """Provide get trip use case."""
        return GetTripUseCase(trip_service, unit_of_work, settings)

    # Participant use cases
    @provide
    def get_add_placeholder_use_case(
        self,
        participant_service: ParticipantService,
        unit_of_work: UnitOfWork,
        settings: EngineSettings,
    ) -> AddPlaceholderUseCase:
        """Provide add placeholder use case."""
        return AddPlaceholderUseCase(participant_service, unit_of_work, settings)

    @provide
    def get_rename_participant_use_case(
        self,
        participant_service: ParticipantService,
        unit_of_work: UnitOfWork,
        settings: EngineSettings,
    ) -> RenameParticipantUseCase:
        """Provide rename participant use case."""
        return RenameParticipantUseCase(participant_service, unit_of_work, settings)

    @provide
    def get_remove_participant_use_case(
        self,
        participant_service: ParticipantService,
        unit_of_work: UnitOfWork,
        settings: EngineSettings,
    ) -> RemoveParticipantUseCase:
        """Provide remove participant use case."""
        return RemoveParticipantUseCase(participant_service, unit_of_work, settings)

    @provide
    def get_list_participants_use_case(
        self,
        participant_service: ParticipantService,
        unit_of_work: UnitOfWork,
        settings: EngineSettings,
    ) -> ListParticipantsUseCase:
        """Provide list participants use case."""
        return ListParticipantsUseCase(participant_service, unit_of_work, settings)

    # Invite use cases
    @provide
    def get_create_invite_use_case(
        self,
        invite_service: InviteService,
        code_settings: CodeSettings,
        unit_of_work: UnitOfWork,
        settings: EngineSettings,
    ) -> CreateInviteUseCase:
        """Provide create invite use case."""
        return CreateInviteUseCase(invite_service, code_settings, unit_of_work, settings)

    @provide
    def get_join_trip_use_case(
        self,
        invite_service: InviteService,
        unit_of_work: UnitOfWork,
        settings: EngineSettings,
    ) -> JoinTripUseCase:
        """Provide join trip use case."""
        return JoinTripUseCase(invite_service, unit_of_work, settings)

    @provide
    def get_revoke_invite_use_case(
        self,
        invite_service: InviteService,
        unit_of_work: UnitOfWork,
        settings: EngineSettings,
    ) -> RevokeInviteUseCase:
        """Provide revoke invite use case."""
        return RevokeInviteUseCase(invite_service, unit_of_work, settings)

    @provide
    def get_list_invites_use_case(
        self,
        invite_service: InviteService,
        unit_of_work: UnitOfWork,
        settings: EngineSettings,
    ) -> ListInvitesUseCase:
        """Provide list invites use case."""
        return ListInvitesUseCase(invite_service, unit_of_work, settings)

    # Claim use cases
    @provide
    def get_issue_claim_code_use_case(
        self,
        claim_service: ClaimService,
        code_settings: CodeSettings,
        unit_of_work: UnitOfWork,
        settings: EngineSettings,
    ) -> IssueClaimCodeUseCase:
        """Provide issue claim code use case."""
        return IssueClaimCodeUseCase(claim_service, code_settings, unit_of_work, settings)

    @provide
    def get_claim_placeholder_use_case(
        self,
        claim_service: ClaimService,
        unit_of_work: UnitOfWork,
        settings: EngineSettings,
    ) -> ClaimPlaceholderUseCase:
        """Provide claim placeholder use case."""
        return ClaimPlaceholderUseCase(claim_service, unit_of_work, settings)

    @provide
    def get_claim_by_selection_use_case(
        self,
        claim_service: ClaimService,
        unit_of_work: UnitOfWork,
        settings: EngineSettings,
    ) -> ClaimBySelectionUseCase:
        """Provide claim by selection use case."""
        return ClaimBySelectionUseCase(claim_service, unit_of_work, settings)

    @provide
    def get_revoke_claim_use_case(
        self,
        claim_service: ClaimService,
        unit_of_work: UnitOfWork,
        settings: EngineSettings,
    ) -> RevokeClaimUseCase:
        """Provide revoke claim use case."""
        return RevokeClaimUseCase(claim_service, unit_of_work, settings)

    # Proposal and selection use cases
    @provide
    def get_propose_use_case(
        self,
        proposal_service: ProposalService,
        unit_of_work: UnitOfWork,
        settings: EngineSettings,
    ) -> ProposeUseCase:
        """Provide propose use case."""
        return ProposeUseCase(proposal_service, unit_of_work, settings)

    @provide
    def get_list_proposals_use_case(
        self,
        proposal_service: ProposalService,
        unit_of_work: UnitOfWork,
        settings: EngineSettings,
    ) -> ListProposalsUseCase:
        """Provide list proposals use case."""
        return ListProposalsUseCase(proposal_service, unit_of_work, settings)

    @provide
    def get_choose_proposal_use_case(
        self,
        selection_service: SelectionService,
        unit_of_work: UnitOfWork,
        settings: EngineSettings,
    ) -> ChooseProposalUseCase:
        """Provide choose proposal use case."""
        return ChooseProposalUseCase(selection_service, unit_of_work, settings)

    # Vote use cases
    @provide
    def get_cast_vote_use_case(
        self,
        vote_service: VoteService,
        proposal_service: ProposalService,
        unit_of_work: UnitOfWork,
        settings: EngineSettings,
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service, proposal_service, unit_of_work, settings)

    @provide
    def get_retract_vote_use_case(
        self,
        vote_service: VoteService,
        proposal_service: ProposalService,
        unit_of_work: UnitOfWork,
        settings: EngineSettings,
    ) -> RetractVoteUseCase:
        """Provide retract vote use case."""
        return RetractVoteUseCase(vote_service, proposal_service, unit_of_work, settings)

    @provide
    def get_tally_votes_use_case(
        self,
        vote_service: VoteService,
        unit_of_work: UnitOfWork,
        settings: EngineSettings,
    ) -> TallyVotesUseCase:
        """Provide tally votes use case."""
        return TallyVotesUseCase(vote_service, unit_of_work, settings)

    # Gear use cases
    @provide
    def get_add_gear_use_case(
        self, gear_service: GearService, unit_of_work: UnitOfWork, settings: EngineSettings
    ) -> AddGearUseCase:
        """Provide add gear use case."""
        return AddGearUseCase(gear_service, unit_of_work, settings)

    @provide
    def get_assign_gear_use_case(
        self, gear_service: GearService, unit_of_work: UnitOfWork, settings: EngineSettings
    ) -> AssignGearUseCase:
        """Provide assign gear use case."""
        return AssignGearUseCase(gear_service, unit_of_work, settings)

    @provide
    def get_unassign_gear_use_case(
        self, gear_service: GearService, unit_of_work: UnitOfWork, settings: EngineSettings
    ) -> UnassignGearUseCase:
        """Provide unassign gear use case."""
        return UnassignGearUseCase(gear_service, unit_of_work, settings)
