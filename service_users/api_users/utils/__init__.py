from .auth_gate import AuthGate
from .hasher import Hasher
from .header import AuthHeaderParser
from .session_issuer import SessionIssuer
from .tokenizer import Tokenizer

__all__ = [
    "Hasher",
    "Tokenizer",
    "AuthHeaderParser",
    "AuthGate",
    "SessionIssuer",
]
