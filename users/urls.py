# users/urls.py

from django.urls import path

from .views import MeView, UserByUsernameView, UserDetailView, UserSearchView

urlpatterns = [
    path("", UserSearchView.as_view(), name="user-search"),
    path("me/", MeView.as_view(), name="user-me"),
    path("by-username/<str:username>/", UserByUsernameView.as_view(), name="user-by-username"),
    path("<uuid:user_id>/", UserDetailView.as_view(), name="user-detail"),
]
