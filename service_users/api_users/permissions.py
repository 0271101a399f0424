from rest_framework.permissions import BasePermission

from .database import to_uuid
from .utils.custom_exception import SelfOnlyError
from .utils.mixins import AuthGateWorkMixin


class BearerTokenPermission(BasePermission, AuthGateWorkMixin):
    """Permission - в заголовке Authorization валидный bearer-токен."""

    def has_permission(self, request, view) -> bool:
        self._get_subject_id(request)

        return True


class IsSelfPermission(BasePermission, AuthGateWorkMixin):
    """Permission - запрос совершает сам Пользователь над своей записью."""

    def has_permission(self, request, view) -> bool:
        subject_id = to_uuid(self._get_subject_id(request))
        target_id = to_uuid(view.kwargs.get("pk"))

        if target_id is None or subject_id != target_id:
            raise SelfOnlyError()

        return True
