import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "personnel_db"),
}

DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo employees and deposits on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))

# Saved export templates (JSON file)
TEMPLATE_STORE_PATH = os.getenv("TEMPLATE_STORE_PATH", "instance/export_templates.json")
# Image placed next to the table when "include logo" is ticked
EXPORT_LOGO_PATH = os.getenv("EXPORT_LOGO_PATH") or None

BANNER_TIMEOUT_MS = int(os.getenv("BANNER_TIMEOUT_MS", "3000"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_FORMAT = os.getenv("LOG_FORMAT", "text")
