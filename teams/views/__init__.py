from .teams import (
    TeamListCreateView,
    TeamDetailView,
    JoinTeamView,
    LeaveTeamView,
    TeamMemberDetailView,
    TransferLeadershipView,
)
from .requests import (
    TeamApplicationsView,
    MyApplicationsView,
    ApplicationReviewView,
    TeamInvitationsView,
    MyInvitationsView,
    InvitationRespondView,
)
from .match import MatchView, MatchLikeView, MatchPassView, MatchResetView
