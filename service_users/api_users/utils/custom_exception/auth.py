from rest_framework import status
from rest_framework.exceptions import APIException


class UserNotFoundError(APIException):
    """Обработчик ошибки - Пользователь не найден."""

    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "User not found"
    default_code = "user_not_found_error"


class InvalidCredentialsError(APIException):
    """
    Обработчик ошибки - данные для авторизации невалидны.

    Общая ошибка для "нет такого Пользователя" и "неверный пароль".
    """

    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Invalid login or password"
    default_code = "user_login_data_error"


class MalformedHeaderError(APIException):
    """Обработчик ошибки - заголовок Authorization невалиден."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Invalid authorization header"
    default_code = "authorization_header_error"


class TokenDataInvalidError(APIException):
    """Обработчик ошибки - данные токена невалидны."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Invalid token, please login again"
    default_code = "token_error"


class MalformedTokenError(TokenDataInvalidError):
    """Токен структурно невалиден."""


class InvalidSignatureError(TokenDataInvalidError):
    """Подпись токена не прошла проверку."""


class ExpiredTokenError(TokenDataInvalidError):
    """Срок действия токена истек."""


class SelfOnlyError(APIException):
    """Обработчик ошибки - операция разрешена только над своей записью."""

    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Operation allowed only on own account"
    default_code = "self_only_error"
