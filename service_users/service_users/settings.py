import os

from pathlib import Path

import dotenv
from django.core.exceptions import ImproperlyConfigured
from split_settings.tools import include

dotenv.load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("USERS_SECRET_KEY")
if not SECRET_KEY:
    raise ImproperlyConfigured("USERS_SECRET_KEY is not set")

DEBUG = os.environ.get("USERS_DEBUG", False) == "True"

ALLOWED_HOSTS = os.environ.get(
    "USERS_ALLOWED_HOSTS",
    "localhost,127.0.0.1",
).split(",")

ROOT_URLCONF = 'service_users.urls'

WSGI_APPLICATION = 'service_users.wsgi.application'

LANGUAGE_CODE = 'en-us'

TIME_ZONE = 'UTC'

USE_I18N = True

USE_TZ = True

# Components configs
include(
    "components/databases.py",
    "components/installed_apps.py",
    "components/middleware.py",
    "components/auth.py",
    "components/rest_framework.py",
    "components/hasher.py",
    "components/logging_format.py",
)
