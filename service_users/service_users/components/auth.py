import os

import dotenv

dotenv.load_dotenv()

# Token
TOKEN_ALGORITHM = os.environ.get("AUTH_TOKEN_ALGORITHM", "HS256")
TOKEN_SECRET = os.environ.get("AUTH_TOKEN_SECRET") or SECRET_KEY  # noqa: F821
ACCESS_TOKEN_EXP_MIN = int(os.environ.get("AUTH_ACCESS_TOKEN_EXP_MIN", 60))

# Refresh TTL = ACCESS TTL * ratio
REFRESH_TOKEN_TTL_RATIO = 3
