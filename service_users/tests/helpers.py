from api_users.models import User
from api_users.utils import SessionIssuer

PASSWORD = "p@ss"


def bearer(user_or_token: User | str) -> str:
    """Заголовок Authorization с access-токеном Пользователя (или токеном)."""

    if isinstance(user_or_token, str):
        return f"Bearer {user_or_token}"

    tokens = SessionIssuer.issue_pair(sub=user_or_token.id)
    return f"Bearer {tokens.access_token.token}"
