import os

from .config import *  # noqa: F401,F403
from .config import db_config_from_env

SECRET_KEY = "test-secret"

DB_CONFIG = db_config_from_env()

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
ADMIN_USER_ID = None
ADMIN_PASSWORD = None
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
