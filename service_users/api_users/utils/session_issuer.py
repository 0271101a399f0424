import logging
from datetime import UTC, datetime, timedelta
from uuid import UUID

from django.conf import settings

from .custom_dataclasses import TokenInfo, Tokens
from .custom_enum import TokenType
from .tokenizer import Tokenizer

logger = logging.getLogger(__name__)


class SessionIssuer:
    """
    Utils - выпуск пары access/refresh токенов.

    Refresh живет REFRESH_TOKEN_TTL_RATIO * access. Выпуск новой пары не
    отзывает предыдущую: оба набора действуют до своего exp.
    """

    @staticmethod
    def _access_ttl() -> timedelta:
        return timedelta(minutes=settings.ACCESS_TOKEN_EXP_MIN)

    @staticmethod
    def _gen_token_info(
        sub: str | UUID,
        ttl: timedelta,
        type_: TokenType,
        now_: datetime,
    ) -> TokenInfo:
        payload = Tokenizer.build_payload(
            sub=sub,
            ttl=ttl,
            type_=type_.value,
            now_=now_,
        )

        return TokenInfo(
            type=type_.value,
            ttl=payload.exp - payload.iat,
            token=Tokenizer.encode_payload(payload),
            issued_at=datetime.fromtimestamp(payload.iat, UTC),
            expires_at=datetime.fromtimestamp(payload.exp, UTC),
        )

    @classmethod
    def issue_pair(
        cls,
        sub: str | UUID,
        now_: datetime | None = None,
    ) -> Tokens:
        """
        Выпуск пары токенов для Пользователя.

        :param sub: ID Пользователя.
        :type sub: str | UUID
        :param now_: Момент выпуска (общий для обоих токенов).
        :type now_: datetime | None

        :return:
        :rtype: Tokens
        """
        now_ = now_ or datetime.now(UTC)
        access_ttl = cls._access_ttl()

        tokens = Tokens(
            access_token=cls._gen_token_info(
                sub=sub,
                ttl=access_ttl,
                type_=TokenType.access,
                now_=now_,
            ),
            refresh_token=cls._gen_token_info(
                sub=sub,
                ttl=access_ttl * settings.REFRESH_TOKEN_TTL_RATIO,
                type_=TokenType.refresh,
                now_=now_,
            ),
        )
        logger.debug(f"Tokens issued for {sub}")

        return tokens

    @classmethod
    def refresh(cls, sub: str | UUID, now_: datetime | None = None) -> Tokens:
        return cls.issue_pair(sub=sub, now_=now_)
