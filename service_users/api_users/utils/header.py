from .custom_exception import MalformedHeaderError


class AuthHeaderParser:
    """Utils - разбор заголовка Authorization."""

    scheme = "bearer"

    @classmethod
    def extract_token(cls, header_value: str | None) -> str:
        """
        Получение bearer-токена из значения заголовка.

        Ожидается ровно два поля через пробельные символы: "Bearer <token>"
        (схема без учета регистра).

        :param header_value:
        :type header_value: str | None

        :return:
        :rtype: str
        """
        if not isinstance(header_value, str):
            raise MalformedHeaderError()

        fields = header_value.split()
        if len(fields) != 2:
            raise MalformedHeaderError()

        scheme, token = fields
        if scheme.lower() != cls.scheme:
            raise MalformedHeaderError()

        return token
