from config.config import *  # noqa: F401,F403
from config.config import db_config_from_env

SECRET_KEY = "test-secret"

DB_CONFIG = db_config_from_env(default_password="")

DEBUG = False
TESTING = True

TOKEN_TTL_SECONDS = 3600
API_PREFIX = "/api"

AUTO_INIT_DB = False
AUTO_SEED_DB = False
