"""Settings shared by every environment; the per-environment modules override them."""

import os
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]


def env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


def db_config_from_env(*, default_password: str = "") -> dict:
    return {
        "host": os.getenv("DB_HOST", "localhost"),
        "port": int(os.getenv("DB_PORT", "3306")),
        "user": os.getenv("DB_USER", "root"),
        "password": os.getenv("DB_PASS", os.getenv("DB_PASSWORD", default_password)),
        "database": os.getenv("DB_NAME", "fieldforce"),
    }


PORT = int(os.getenv("PORT", "5000"))

DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "10"))
DB_POOL_TIMEOUT = float(os.getenv("DB_POOL_TIMEOUT", "5"))

UPLOAD_DIR = os.getenv("UPLOAD_DIR", str(REPO_ROOT / "uploads"))
MAX_CONTENT_LENGTH = 10 * 1024 * 1024

# Off keeps the historical behaviour: any authenticated role may call any endpoint.
ENFORCE_ROLES = env_flag("ENFORCE_ROLES")

ADMIN_USER_ID = os.getenv("ADMIN_USER_ID")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
