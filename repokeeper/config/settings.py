import os
from dotenv import load_dotenv

load_dotenv()

APP_ENV = os.getenv("APP_ENV", "production").lower()
DEBUG_MODE = os.getenv("DEBUG_MODE", "false").lower() == "true"
STATELESS_MODE = os.getenv("STATELESS_MODE", "false").lower() == "true"

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./repokeeper.db")

LOG_DRIVER: str = os.getenv("LOG_DRIVER", "console")
LOG_FILE: str = os.getenv("LOG_FILE", "repokeeper.log")

# RSA modulus size for the per-repository deploy keys.
SSH_KEY_BITS = int(os.getenv("SSH_KEY_BITS", 2048))
if SSH_KEY_BITS < 2048:
    raise ValueError(f"Invalid SSH_KEY_BITS: {SSH_KEY_BITS}. Must be at least 2048")

DEFAULT_BUILD_TIMEOUT = int(os.getenv("DEFAULT_BUILD_TIMEOUT", 900))
