import os

from config.config import *  # noqa: F401,F403
from config.config import db_config_from_env, env_flag

# JWT_SECRET is accepted for older deployments
SECRET_KEY = os.getenv("SECRET_KEY", os.getenv("JWT_SECRET", "dev-secret-key"))

DB_CONFIG = db_config_from_env(default_password="")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "1")
# Optional: also create the admin account on startup
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", "0")
