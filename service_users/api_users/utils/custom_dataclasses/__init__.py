from .token import TokenInfo, TokenPayload, Tokens

__all__ = ["TokenPayload", "TokenInfo", "Tokens"]
