from .auth import (
    ExpiredTokenError,
    InvalidCredentialsError,
    InvalidSignatureError,
    MalformedHeaderError,
    MalformedTokenError,
    SelfOnlyError,
    TokenDataInvalidError,
    UserNotFoundError,
)
from .base import HashingFailureError, InternalServiceError, SigningFailureError
from .database import StoreError, StoreTimeoutError

__all__ = [
    "StoreError",
    "StoreTimeoutError",
    "UserNotFoundError",
    "InvalidCredentialsError",
    "MalformedHeaderError",
    "TokenDataInvalidError",
    "MalformedTokenError",
    "InvalidSignatureError",
    "ExpiredTokenError",
    "SelfOnlyError",
    "InternalServiceError",
    "HashingFailureError",
    "SigningFailureError",
]
