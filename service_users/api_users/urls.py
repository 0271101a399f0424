from django.urls import path

from .views import (
    LoginView,
    ProfileView,
    RefreshTokenView,
    UserCreateView,
    UserDetailView,
    UserListView,
)

urlpatterns = [
    # Users
    path("signup", UserCreateView.as_view(), name="signup_user"),
    path("users", UserListView.as_view(), name="list_users"),
    path("users/<str:pk>", UserDetailView.as_view(), name="detail_user"),
    path("profile", ProfileView.as_view(), name="profile_user"),
    # Auth
    path("signin", LoginView.as_view(), name="signin_user"),
    path(
        "refresh",
        RefreshTokenView.as_view(),
        name="refresh_user_tokens",
    ),
]
