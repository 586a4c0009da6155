import os

from .config import *  # noqa: F401,F403
from .config import db_config_from_env, env_flag

SECRET_KEY = os.getenv("JWT_SECRET", os.getenv("SECRET_KEY", ""))
if not SECRET_KEY:
    raise RuntimeError("JWT_SECRET must be set in production")

DB_CONFIG = db_config_from_env()

DEBUG = False

AUTO_INIT_DB = env_flag("AUTO_INIT_DB")
