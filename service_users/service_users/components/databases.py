import os
from urllib.parse import unquote, urlsplit

import dotenv
from django.core.exceptions import ImproperlyConfigured

dotenv.load_dotenv()

# Store timeouts (seconds)
STORE_TIMEOUT_SEC = float(os.environ.get("STORE_TIMEOUT_SEC", 30))
STORE_PING_TIMEOUT_SEC = float(os.environ.get("STORE_PING_TIMEOUT_SEC", 10))
STORE_CONNECT_TIMEOUT_SEC = int(
    os.environ.get("STORE_CONNECT_TIMEOUT_SEC", 10)
)
STORE_PING_RETRIES = int(os.environ.get("STORE_PING_RETRIES", 5))
STORE_PING_DELAY_SEC = float(os.environ.get("STORE_PING_DELAY_SEC", 2))


def database_from_url(url: str, connect_timeout: int = 10) -> dict:
    """
    Формирование настроек БД Django из строки подключения.

    Поддерживаются: postgres://, postgresql://, sqlite:///<path>,
    sqlite://:memory:.

    :param url: Строка подключения.
    :type url: str
    :param connect_timeout: Таймаут установки соединения (сек.).
    :type connect_timeout: int

    :return:
    :rtype: dict
    """
    parts = urlsplit(url)

    if parts.scheme == "sqlite":
        # sqlite:///relative.db, sqlite:////abs/path.db
        name = parts.netloc or parts.path[1:] or ":memory:"
        return {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": name,
        }

    if parts.scheme in ("postgres", "postgresql"):
        return {
            "ENGINE": "django.db.backends.postgresql",
            "NAME": unquote(parts.path.lstrip("/")),
            "USER": unquote(parts.username or ""),
            "PASSWORD": unquote(parts.password or ""),
            "HOST": parts.hostname or "127.0.0.1",
            "PORT": parts.port or 5432,
            "OPTIONS": {"connect_timeout": connect_timeout},
        }

    raise ImproperlyConfigured(
        f"Unsupported database scheme: {parts.scheme!r}"
    )


USERS_DATABASE_URL = os.environ.get("USERS_DATABASE_URL")
if not USERS_DATABASE_URL:
    raise ImproperlyConfigured("USERS_DATABASE_URL is not set")

DATABASES = {
    "default": database_from_url(
        USERS_DATABASE_URL,
        connect_timeout=STORE_CONNECT_TIMEOUT_SEC,
    ),
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'
