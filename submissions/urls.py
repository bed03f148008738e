from django.urls import path

from .views import (
    GalleryView,
    MySubmissionsView,
    SubmissionDetailView,
    SubmissionImagesView,
    SubmissionListCreateView,
    SubmitSubmissionView,
)

urlpatterns = [
    path("", SubmissionListCreateView.as_view(), name="submission-list"),
    path("gallery/", GalleryView.as_view(), name="submission-gallery"),
    path("me/", MySubmissionsView.as_view(), name="submission-mine"),
    path("<uuid:submission_id>/", SubmissionDetailView.as_view(), name="submission-detail"),
    path("<uuid:submission_id>/submit/", SubmitSubmissionView.as_view(), name="submission-submit"),
    path("<uuid:submission_id>/images/", SubmissionImagesView.as_view(), name="submission-images"),
]
