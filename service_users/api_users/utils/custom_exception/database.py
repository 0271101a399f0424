from rest_framework import status
from rest_framework.exceptions import APIException


class StoreError(APIException):
    """Обработчик ошибки - ошибка при работе с хранилищем Пользователей."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal server error"
    default_code = "internal_server_error"


class StoreTimeoutError(StoreError):
    """Обработчик ошибки - истек таймаут операции с хранилищем."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = "Store timeout, try again later"
    default_code = "store_timeout_error"
