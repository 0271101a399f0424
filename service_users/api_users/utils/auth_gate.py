import logging

from .custom_exception import MalformedHeaderError, TokenDataInvalidError
from .header import AuthHeaderParser
from .tokenizer import Tokenizer

logger = logging.getLogger(__name__)


class AuthGate:
    """Utils - определение аутентифицированного Пользователя по запросу."""

    @staticmethod
    def authenticate(header_value: str | None) -> str:
        """
        Заголовок Authorization -> ID Пользователя из токена.

        Существование Пользователя не проверяется - это делает вызывающий
        код через хранилище.

        :param header_value: Значение заголовка Authorization.
        :type header_value: str | None

        :return:
        :rtype: str
        """
        try:
            token = AuthHeaderParser.extract_token(header_value)
            return Tokenizer.parse_subject(token)

        except (MalformedHeaderError, TokenDataInvalidError) as ex:
            logger.info(f"Request not authenticated: {ex.__class__.__name__}")
            raise
