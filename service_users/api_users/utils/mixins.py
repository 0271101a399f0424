import logging
from uuid import UUID

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response

from ..database import UserStore
from ..models import User
from ..serializers import TokensSerializer
from .auth_gate import AuthGate
from .custom_exception import UserNotFoundError
from .session_issuer import SessionIssuer

logger = logging.getLogger(__name__)


class AuthGateWorkMixin:
    """Work - mixin по работе с AuthGate."""

    @staticmethod
    def _get_subject_id(request: Request) -> str:
        """
        ID аутентифицированного Пользователя из заголовка Authorization.

        Токен разбирается один раз за запрос (в permission), результат
        сохраняется в request.auth_subject.

        :param request:
        :type request: Request

        :return:
        :rtype: str
        """
        subject_id = getattr(request, "auth_subject", None)
        if subject_id is None:
            subject_id = AuthGate.authenticate(
                request.META.get("HTTP_AUTHORIZATION"),
            )
            request.auth_subject = subject_id

        return subject_id


class UserStoreWorkMixin:
    """Work - mixin по работе с хранилищем Пользователей."""

    store_class = UserStore

    @property
    def store(self) -> UserStore:
        if not hasattr(self, "_store"):
            self._store = self.store_class()

        return self._store

    def _get_user(self, user_id: str | UUID) -> User:
        """
        Получение Пользователя по ID.

        :param user_id:
        :type user_id: str | UUID

        :return:
        :rtype: User
        """
        user = self.store.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError()

        return user


class TokenizerWorkMixin:
    """Work - mixin по выпуску токенов Пользователя."""

    @staticmethod
    def _issue_tokens(user: User, refresh: bool = False) -> Response:
        """
        Выпуск пары токенов и формирование ответа.

        :param user:
        :type user: User
        :param refresh: Флаг - пара выпускается по refresh-запросу.
        :type refresh: bool

        :return:
        :rtype: Response
        """
        if refresh:
            tokens = SessionIssuer.refresh(sub=user.id)
        else:
            tokens = SessionIssuer.issue_pair(sub=user.id)

        logger.debug(f"Session issued for {user.username}")

        return Response(
            TokensSerializer(tokens).data,
            status=status.HTTP_200_OK,
        )
