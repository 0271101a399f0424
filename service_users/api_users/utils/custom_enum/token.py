from enum import Enum


class TokenType(Enum):
    """Типы токенов."""

    access = "access"
    refresh = "refresh"
