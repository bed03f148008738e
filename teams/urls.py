from django.urls import path
from .views import (
    TeamListCreateView,
    TeamDetailView,
    JoinTeamView,
    LeaveTeamView,
    TeamMemberDetailView,
    TransferLeadershipView,
    TeamApplicationsView,
    MyApplicationsView,
    ApplicationReviewView,
    TeamInvitationsView,
    MyInvitationsView,
    InvitationRespondView,
    MatchView,
    MatchLikeView,
    MatchPassView,
    MatchResetView,
)

urlpatterns = [
    path("", TeamListCreateView.as_view(), name="team-list"),
    path("join/", JoinTeamView.as_view(), name="team-join"),

    # Matching
    path("match/", MatchView.as_view(), name="team-match"),
    path("match/reset/", MatchResetView.as_view(), name="team-match-reset"),
    path("match/<uuid:team_id>/like/", MatchLikeView.as_view(), name="team-match-like"),
    path("match/<uuid:team_id>/pass/", MatchPassView.as_view(), name="team-match-pass"),

    # Applications & invitations addressed to me
    path("applications/me/", MyApplicationsView.as_view(), name="team-my-applications"),
    path("applications/<uuid:application_id>/", ApplicationReviewView.as_view(), name="team-application-review"),
    path("invitations/me/", MyInvitationsView.as_view(), name="team-my-invitations"),
    path("invitations/<uuid:invitation_id>/respond/", InvitationRespondView.as_view(), name="team-invitation-respond"),

    # Single team
    path("<uuid:team_id>/", TeamDetailView.as_view(), name="team-detail"),
    path("<uuid:team_id>/leave/", LeaveTeamView.as_view(), name="team-leave"),
    path("<uuid:team_id>/transfer/", TransferLeadershipView.as_view(), name="team-transfer"),
    path("<uuid:team_id>/members/<uuid:user_id>/", TeamMemberDetailView.as_view(), name="team-member-detail"),
    path("<uuid:team_id>/applications/", TeamApplicationsView.as_view(), name="team-applications"),
    path("<uuid:team_id>/invitations/", TeamInvitationsView.as_view(), name="team-invitations"),
]
