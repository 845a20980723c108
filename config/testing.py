import os

from .config import *  # noqa: F401,F403
from .config import db_config, env_bool

SECRET_KEY = "test-secret"

DB_CONFIG = db_config(default_password="12345")

DEBUG = False
TESTING = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

AUTO_INIT_DB = env_bool("AUTO_INIT_DB", False)
# tests never wait for a real finger
CONFIRMATION_PAUSE_MS = 0
USE_DB_LOCKS = False
