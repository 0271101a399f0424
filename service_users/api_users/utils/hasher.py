import logging

from django.conf import settings
from django.contrib.auth.hashers import (
    PBKDF2PasswordHasher,
    check_password,
    make_password,
)

from .custom_exception import HashingFailureError

logger = logging.getLogger(__name__)


class ConfiguredPBKDF2PasswordHasher(PBKDF2PasswordHasher):
    """PBKDF2-SHA256 с числом итераций из настроек (HASHER_COUNT_ITER)."""

    @property
    def iterations(self) -> int:
        return settings.COUNT_HASH_ITER


class Hasher:
    """Utils - хеширование паролей."""

    @staticmethod
    def hash_password(password: str) -> str:
        """
        Хеширование пароля (соль генерируется на каждый вызов).

        :param password: Пароль в открытом виде.
        :type password: str

        :return: Хеш в формате "<algorithm>$<iterations>$<salt>$<hash>".
        :rtype: str
        """
        if not isinstance(password, str):
            logger.error(
                f"Error hash password: unsupported type {type(password)}"
            )
            raise HashingFailureError()

        try:
            return make_password(password)

        except Exception as ex:
            logger.error(f"Error hash password: {ex}")
            raise HashingFailureError()

    @staticmethod
    def verify_password(password: str, password_hash: str | None) -> bool:
        """
        Проверка пароля по хешу.

        Сравнение выполняет check_password (за константное время), при
        битом или отсутствующем хеше - False.

        :param password: Пароль в открытом виде.
        :type password: str
        :param password_hash:
        :type password_hash: str | None

        :return:
        :rtype: bool
        """
        if not isinstance(password, str) or not password_hash:
            return False

        try:
            return check_password(password, password_hash)

        except (ValueError, TypeError) as ex:
            logger.warning(f"Can't verify password, broken hash: {ex}")
            return False
