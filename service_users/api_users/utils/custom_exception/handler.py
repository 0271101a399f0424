import logging
from typing import Any

from rest_framework import status
from rest_framework.exceptions import ParseError, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def error_exception_handler(exc: Exception, context: dict[str, Any]) -> Response:
    """
    Обработчик исключений DRF - ответ в формате {"error": ...}.

    Неожиданные исключения логируются и отдаются как 500, процесс
    продолжает обслуживать остальные запросы.

    :param exc:
    :type exc: Exception
    :param context:
    :type context: dict[str, Any]

    :return:
    :rtype: Response
    """
    response = exception_handler(exc, context)

    if response is None:
        view_name = context["view"].__class__.__name__
        logger.exception(f"Unhandled error in {view_name}: {exc}")

        return Response(
            {"error": "Internal server error"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    error = response.data
    if isinstance(exc, ValidationError):
        response.data = {"error": error, "message": "Invalid data"}
        return response

    if isinstance(error, dict) and "detail" in error:
        error = error["detail"]

    response.data = {"error": error}
    if isinstance(exc, ParseError):
        response.data["message"] = "Invalid data"

    return response
