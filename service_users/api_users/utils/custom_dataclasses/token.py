from dataclasses import dataclass
from datetime import datetime


@dataclass
class TokenPayload:
    """Модель данных - payload формируемого токена."""

    type: str
    iat: int
    exp: int
    sub: str


@dataclass
class TokenInfo:
    """Модель данных - token + meta-информация по нему."""

    type: str
    ttl: int
    token: str
    issued_at: datetime
    expires_at: datetime


@dataclass
class Tokens:
    """Модель данных - token-ы."""

    access_token: TokenInfo
    refresh_token: TokenInfo
