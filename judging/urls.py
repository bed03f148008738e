from django.urls import path

from .views import (
    EventJudgeDetailView,
    EventJudgesView,
    JudgeDetailView,
    JudgeListView,
    MyJudgingEventsView,
    ScorecardDetailView,
    ScorecardListCreateView,
    SubmissionScorecardsView,
    SubmitScorecardView,
)

urlpatterns = [
    path("judges/", JudgeListView.as_view(), name="judge-list"),
    path("judges/<uuid:judge_id>/", JudgeDetailView.as_view(), name="judge-detail"),
    path("events/<uuid:event_id>/judges/", EventJudgesView.as_view(), name="event-judges"),
    path("events/<uuid:event_id>/judges/<uuid:judge_id>/", EventJudgeDetailView.as_view(), name="event-judge-detail"),
    path("me/events/", MyJudgingEventsView.as_view(), name="judge-my-events"),
    path("scorecards/", ScorecardListCreateView.as_view(), name="scorecard-list"),
    path("scorecards/<uuid:scorecard_id>/", ScorecardDetailView.as_view(), name="scorecard-detail"),
    path("scorecards/<uuid:scorecard_id>/submit/", SubmitScorecardView.as_view(), name="scorecard-submit"),
    path("submissions/<uuid:submission_id>/scorecards/", SubmissionScorecardsView.as_view(), name="submission-scorecards"),
]
