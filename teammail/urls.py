from django.urls import path

from .views import (
    ArchiveMailView,
    DraftListView,
    MailDetailView,
    MarkReadView,
    StarMailView,
    TeamMailListView,
)

# Mounted under teams/<uuid:team_id>/mails/
urlpatterns = [
    path("", TeamMailListView.as_view(), name="team-mail-list"),
    path("read/", MarkReadView.as_view(), name="team-mail-read"),
    path("drafts/", DraftListView.as_view(), name="team-mail-drafts"),
    path("<uuid:mail_id>/", MailDetailView.as_view(), name="team-mail-detail"),
    path("<uuid:mail_id>/star/", StarMailView.as_view(), name="team-mail-star"),
    path("<uuid:mail_id>/archive/", ArchiveMailView.as_view(), name="team-mail-archive"),
]
