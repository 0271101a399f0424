import binascii
import logging
import math
import re
from dataclasses import asdict
from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID

from django.conf import settings
from jose import JWTError, jws, jwt
from jose.exceptions import JOSEError, JWSError
from jose.utils import base64url_decode, base64url_encode

from .custom_dataclasses import TokenPayload
from .custom_enum import TokenType
from .custom_exception import (
    ExpiredTokenError,
    InvalidSignatureError,
    MalformedTokenError,
    SigningFailureError,
)

logger = logging.getLogger(__name__)

# header.payload.signature, base64url без padding
TOKEN_SEGMENT_RE = re.compile(r"[A-Za-z0-9_-]+")


class Tokenizer:
    """
    Utils - работа с токенами Пользователя.

    Токен - JWT (HS256 по умолчанию), claims: sub, iat, exp, type.
    Секрет и алгоритм берутся из настроек и не меняются за время жизни
    процесса.
    """

    @staticmethod
    def _normalize_sub(sub: str | UUID) -> str:
        return str(UUID(str(sub)))

    @classmethod
    def build_payload(
        cls,
        sub: str | UUID,
        ttl: timedelta,
        type_: str = TokenType.access.value,
        now_: datetime | None = None,
    ) -> TokenPayload:
        """
        Формирование payload токена.

        iat/exp - целые секунды (NumericDate), TTL округляется вверх.

        :param sub: ID Пользователя (UUID), иначе - SigningFailureError.
        :type sub: str | UUID
        :param ttl: Время жизни токена (> 0).
        :type ttl: timedelta
        :param type_:
        :type type_: str
        :param now_: Момент выпуска (по умолчанию - текущее время UTC).
        :type now_: datetime | None

        :return:
        :rtype: TokenPayload
        """
        ttl_sec = math.ceil(ttl.total_seconds())
        if ttl_sec <= 0:
            raise ValueError(f"Token TTL must be positive, got {ttl}")

        try:
            sub = cls._normalize_sub(sub)

        except ValueError as ex:
            logger.error(f"Error sign token, invalid sub={sub!r}: {ex}")
            raise SigningFailureError()

        now_ = now_ or datetime.now(UTC)
        iat = int(now_.timestamp())

        return TokenPayload(type=type_, iat=iat, exp=iat + ttl_sec, sub=sub)

    @staticmethod
    def encode_payload(payload: TokenPayload) -> str | Any:
        try:
            return jwt.encode(
                claims=asdict(payload),
                key=settings.TOKEN_SECRET,
                algorithm=settings.TOKEN_ALGORITHM,
            )

        except JOSEError as ex:
            logger.error(f"Error sign token for sub={payload.sub}: {ex}")
            raise SigningFailureError()

    @classmethod
    def gen_token(
        cls,
        sub: str | UUID,
        ttl: timedelta,
        type_: str = TokenType.access.value,
        now_: datetime | None = None,
    ) -> str | Any:
        payload = cls.build_payload(sub=sub, ttl=ttl, type_=type_, now_=now_)
        return cls.encode_payload(payload)

    @classmethod
    def decode_token(
        cls,
        token: str,
        now_: datetime | None = None,
    ) -> TokenPayload:
        """
        Разбор и проверка токена.

        Порядок проверок: структура -> подпись -> срок действия. Токен,
        который и подделан, и просрочен, отклоняется как подделанный.

        :param token:
        :type token: str
        :param now_: Момент проверки (по умолчанию - текущее время UTC).
        :type now_: datetime | None

        :return:
        :rtype: TokenPayload
        """
        if not isinstance(token, str) or not token:
            raise MalformedTokenError()

        segments = token.split(".")
        if len(segments) != 3 or not all(
            TOKEN_SEGMENT_RE.fullmatch(segment) for segment in segments
        ):
            raise MalformedTokenError()

        try:
            claims: dict[str, Any] = jwt.get_unverified_claims(token)

        except JWTError as ex:
            logger.info(f"Malformed token: {ex}")
            raise MalformedTokenError()

        if not cls._is_canonical_segment(segments[2]):
            logger.info("Token signature rejected: non-canonical encoding")
            raise InvalidSignatureError()

        try:
            jws.verify(
                token,
                settings.TOKEN_SECRET,
                algorithms=[settings.TOKEN_ALGORITHM],
            )

        except JWSError as ex:
            logger.info(f"Token signature rejected: {ex}")
            raise InvalidSignatureError()

        payload = cls._payload_from_claims(claims)

        now_ = now_ or datetime.now(UTC)
        if now_.timestamp() >= payload.exp:
            raise ExpiredTokenError()

        return payload

    @staticmethod
    def _is_canonical_segment(segment: str) -> bool:
        """
        Сегмент закодирован однозначно: decode -> encode дает ту же строку.

        Неиспользуемые младшие биты последнего символа должны быть нулевыми.

        :param segment:
        :type segment: str

        :return:
        :rtype: bool
        """
        try:
            raw = base64url_decode(segment.encode())

        except (binascii.Error, ValueError):
            return False

        return base64url_encode(raw).decode() == segment

    @classmethod
    def parse_subject(cls, token: str, now_: datetime | None = None) -> str:
        return cls.decode_token(token, now_=now_).sub

    @classmethod
    def _payload_from_claims(cls, claims: dict[str, Any]) -> TokenPayload:
        try:
            sub, iat, exp = claims["sub"], claims["iat"], claims["exp"]
            type_ = claims["type"]

        except KeyError as ex:
            logger.info(f"Token claim missing: {ex}")
            raise MalformedTokenError()

        if not all(
            isinstance(value, int) and not isinstance(value, bool)
            for value in (iat, exp)
        ):
            raise MalformedTokenError()

        if not isinstance(sub, str) or not isinstance(type_, str):
            raise MalformedTokenError()

        try:
            sub = cls._normalize_sub(sub)

        except ValueError:
            raise MalformedTokenError()

        return TokenPayload(type=type_, iat=iat, exp=exp, sub=sub)
