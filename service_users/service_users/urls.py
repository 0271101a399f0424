from django.urls import include, path

urlpatterns = [
    path("", include("api_users.urls")),
]
