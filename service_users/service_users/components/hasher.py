import os

import dotenv

dotenv.load_dotenv()

# Хеширование
PASSWORD_HASHERS = [
    "api_users.utils.hasher.ConfiguredPBKDF2PasswordHasher",
    "django.contrib.auth.hashers.PBKDF2PasswordHasher",
    "django.contrib.auth.hashers.PBKDF2SHA1PasswordHasher",
]
COUNT_HASH_ITER = int(os.environ.get("HASHER_COUNT_ITER", 600_000))
