import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./scroll_summons.db")
    # Seconds the sqlite driver waits on a locked database before failing
    DB_LOCK_TIMEOUT = float(data.get("DB_LOCK_TIMEOUT", 10))
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    # Deployment-specific values, overridable from the process environment
    SITE_URL = os.getenv("SITE_URL", data.get("SITE_URL", "http://localhost:5173"))
    NOTIFIER_URL = os.getenv("NOTIFIER_URL", data.get("NOTIFIER_URL", ""))
    NOTIFIER_API_KEY = os.getenv("NOTIFIER_API_KEY", data.get("NOTIFIER_API_KEY", ""))
    NOTIFIER_TIMEOUT = float(data.get("NOTIFIER_TIMEOUT", 10))
