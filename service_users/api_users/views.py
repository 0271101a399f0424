import logging

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from .models import User, UsersRole
from .permissions import BearerTokenPermission, IsSelfPermission
from .serializers import (
    LoginSerializer,
    UserCreateSerializer,
    UserSerializer,
    UserUpdateSerializer,
)
from .utils import Hasher
from .utils.custom_exception import InvalidCredentialsError, UserNotFoundError
from .utils.mixins import (
    AuthGateWorkMixin,
    TokenizerWorkMixin,
    UserStoreWorkMixin,
)

logger = logging.getLogger(__name__)


# --- User --- #
class UserCreateView(APIView, UserStoreWorkMixin):
    """View - регистрация Пользователя."""

    serializer_class = UserCreateSerializer
    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        serializer = self.serializer_class(
            data=request.data,
            context={"store": self.store},
        )
        serializer.is_valid(raise_exception=True)
        validated_data = serializer.validated_data

        user = self.store.insert(
            {
                "first_name": validated_data["first_name"],
                "last_name": validated_data["last_name"],
                "username": validated_data["username"],
                "password_hash": Hasher.hash_password(
                    validated_data["password"],
                ),
                "role": UsersRole.USER.value,
            }
        )
        logger.info(f"User registered: {user.username} ({user.id})")

        return Response(
            {
                "user": UserSerializer(user).data,
                "message": "User registered successfully",
            },
            status=status.HTTP_201_CREATED,
        )


class UserListView(APIView, UserStoreWorkMixin):
    """View - список Пользователей."""

    permission_classes = [BearerTokenPermission]

    def get(self, request: Request) -> Response:
        users = self.store.list_all()

        return Response({"users": UserSerializer(users, many=True).data})


class UserDetailView(APIView, UserStoreWorkMixin):
    """View - получение/обновление/удаление Пользователя."""

    serializer_class = UserUpdateSerializer

    def get_permissions(self):
        if self.request.method in ("PUT", "DELETE"):
            return [IsSelfPermission()]

        return [AllowAny()]

    def get(self, request: Request, pk: str) -> Response:
        user = self._get_user(pk)

        return Response({"user": UserSerializer(user).data})

    def put(self, request: Request, pk: str) -> Response:
        serializer = self.serializer_class(
            data=request.data,
            context={"store": self.store, "user_id": pk},
        )
        serializer.is_valid(raise_exception=True)

        if not self.store.update_fields(pk, dict(serializer.validated_data)):
            raise UserNotFoundError()

        logger.info(f"User updated: {pk}")

        return Response({"message": "User updated successfully"})

    def delete(self, request: Request, pk: str) -> Response:
        if not self.store.delete(pk):
            raise UserNotFoundError()

        logger.info(f"User deleted: {pk}")

        return Response({"message": "User deleted successfully"})


class ProfileView(APIView, AuthGateWorkMixin, UserStoreWorkMixin):
    """View - профиль текущего Пользователя."""

    permission_classes = [BearerTokenPermission]

    def get(self, request: Request) -> Response:
        user = self._get_user(self._get_subject_id(request))

        return Response({"profile": UserSerializer(user).data})


# --- Auth --- #
class LoginView(APIView, UserStoreWorkMixin, TokenizerWorkMixin):
    """View - авторизация Пользователя."""

    serializer_class = LoginSerializer
    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        serializer = self.serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)

        username = serializer.validated_data["username"]
        password = serializer.validated_data["password"]

        user = self._get_user_by_username(username, password)
        self._check_user_password(user, password)

        return self._issue_tokens(user)

    def _get_user_by_username(self, username: str, password: str) -> User:
        user = self.store.get_by_username(username)
        if user is None:
            # Время ответа как при проверке пароля
            Hasher.hash_password(password)
            raise InvalidCredentialsError()

        return user

    @staticmethod
    def _check_user_password(user: User, inc_password: str) -> None:
        if not Hasher.verify_password(inc_password, user.password_hash):
            raise InvalidCredentialsError()


class RefreshTokenView(
    APIView,
    AuthGateWorkMixin,
    UserStoreWorkMixin,
    TokenizerWorkMixin,
):
    """View - обновление токенов Пользователя."""

    permission_classes = [BearerTokenPermission]

    def post(self, request: Request) -> Response:
        user = self._get_user(self._get_subject_id(request))

        return self._issue_tokens(user, refresh=True)
