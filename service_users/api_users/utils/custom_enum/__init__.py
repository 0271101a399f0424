from .token import TokenType

__all__ = ["TokenType"]
