from rest_framework import status
from rest_framework.exceptions import APIException


class InternalServiceError(APIException):
    """Обработчик ошибки - внутренняя ошибка сервиса."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal server error"
    default_code = "internal_server_error"


class HashingFailureError(InternalServiceError):
    """Ошибка хеширования пароля."""


class SigningFailureError(InternalServiceError):
    """Ошибка подписи токена."""
