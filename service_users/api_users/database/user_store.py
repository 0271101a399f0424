import logging
from contextlib import contextmanager
from typing import Any, Iterator
from uuid import UUID

from django.conf import settings
from django.db import DatabaseError, OperationalError, connections, transaction
from django.utils import timezone

from ..models import User
from ..utils.custom_exception import StoreError, StoreTimeoutError

logger = logging.getLogger(__name__)

# PostgreSQL: query_canceled (statement_timeout)
QUERY_CANCELED_SQLSTATE = "57014"


def to_uuid(value: str | UUID | Any) -> UUID | None:
    """ID Пользователя -> UUID (None, если строка не является UUID)."""

    if isinstance(value, UUID):
        return value

    try:
        return UUID(str(value))

    except ValueError:
        return None


def _is_query_canceled(ex: DatabaseError) -> bool:
    cause = ex.__cause__
    sqlstate = (
        getattr(cause, "sqlstate", None) or getattr(cause, "pgcode", None)
    )
    return sqlstate == QUERY_CANCELED_SQLSTATE


class UserStore:
    """
    Хранилище Пользователей.

    Каждая операция выполняется в отдельной транзакции с ограничением по
    времени: на PostgreSQL - statement_timeout на уровне транзакции.
    Отмена запроса по таймауту -> StoreTimeoutError, прочие ошибки БД ->
    StoreError.
    """

    editable_fields = ("first_name", "last_name", "username")

    def __init__(
        self,
        using: str = "default",
        timeout: float | None = None,
    ) -> None:
        self._using = using
        self._timeout = (
            settings.STORE_TIMEOUT_SEC if timeout is None else timeout
        )

    @contextmanager
    def _bounded(
        self,
        operation: str,
        timeout: float | None = None,
    ) -> Iterator[None]:
        """
        Транзакция с таймаутом для операции с хранилищем.

        :param operation: Название операции (для логов).
        :type operation: str
        :param timeout: Таймаут (сек.), по умолчанию - из конструктора.
        :type timeout: float | None

        :rtype: Iterator[None]
        """
        timeout = self._timeout if timeout is None else timeout
        connection = connections[self._using]

        try:
            with transaction.atomic(using=self._using):
                if connection.vendor == "postgresql":
                    with connection.cursor() as cursor:
                        cursor.execute(
                            "SELECT set_config('statement_timeout', %s, true)",
                            [str(max(1, int(timeout * 1000)))],
                        )
                yield

        except OperationalError as ex:
            if _is_query_canceled(ex):
                logger.error(
                    f"Store timeout ({timeout}s) on {operation}: {ex}"
                )
                raise StoreTimeoutError()

            logger.error(f"Error {operation} in store: {ex}")
            raise StoreError()

        except DatabaseError as ex:
            logger.error(f"Error {operation} in store: {ex}")
            raise StoreError()

    def ping(self, timeout: float | None = None) -> None:
        with self._bounded("ping", timeout):
            with connections[self._using].cursor() as cursor:
                cursor.execute("SELECT 1")

    def get_by_id(
        self,
        user_id: str | UUID,
        timeout: float | None = None,
    ) -> User | None:
        user_uuid = to_uuid(user_id)
        if user_uuid is None:
            return None

        with self._bounded("get_by_id", timeout):
            return User.objects.using(self._using).filter(pk=user_uuid).first()

    def get_by_username(
        self,
        username: str,
        timeout: float | None = None,
    ) -> User | None:
        with self._bounded("get_by_username", timeout):
            return (
                User.objects.using(self._using)
                .filter(username=username)
                .first()
            )

    def list_all(self, timeout: float | None = None) -> list[User]:
        with self._bounded("list_all", timeout):
            return list(
                User.objects.using(self._using).order_by(
                    "created_at",
                    "username",
                )
            )

    def username_taken(
        self,
        username: str,
        exclude_id: str | UUID | None = None,
        timeout: float | None = None,
    ) -> bool:
        with self._bounded("username_taken", timeout):
            users_qs = User.objects.using(self._using).filter(
                username=username,
            )
            if exclude_id is not None:
                users_qs = users_qs.exclude(pk=to_uuid(exclude_id))

            return users_qs.exists()

    def insert(
        self,
        fields: dict[str, Any],
        timeout: float | None = None,
    ) -> User:
        """
        Создание Пользователя.

        :param fields: Значения полей модели User.
        :type fields: dict[str, Any]
        :param timeout:
        :type timeout: float | None

        :return:
        :rtype: User
        """
        with self._bounded("insert", timeout):
            return User.objects.using(self._using).create(**fields)

    def update_fields(
        self,
        user_id: str | UUID,
        fields: dict[str, Any],
        timeout: float | None = None,
    ) -> bool:
        """
        Обновление полей Пользователя.

        :param user_id:
        :type user_id: str | UUID
        :param fields: Только поля из editable_fields.
        :type fields: dict[str, Any]
        :param timeout:
        :type timeout: float | None

        :return: False, если Пользователь не найден.
        :rtype: bool
        """
        unknown = set(fields) - set(self.editable_fields)
        if unknown:
            raise ValueError(f"Fields not editable: {sorted(unknown)}")

        user_uuid = to_uuid(user_id)
        if user_uuid is None:
            return False

        with self._bounded("update_fields", timeout):
            updated = User.objects.using(self._using).filter(
                pk=user_uuid,
            ).update(**fields, updated_at=timezone.now())

        return updated > 0

    def delete(
        self,
        user_id: str | UUID,
        timeout: float | None = None,
    ) -> bool:
        user_uuid = to_uuid(user_id)
        if user_uuid is None:
            return False

        with self._bounded("delete", timeout):
            deleted, _ = User.objects.using(self._using).filter(
                pk=user_uuid,
            ).delete()

        return deleted > 0
