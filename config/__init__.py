import os


def get_settings_module() -> str:
    # APP_ENV picks the settings module; anything unknown falls back to development.
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "config.production"

    if env in {"test", "testing"}:
        return "config.testing"

    return "config.development"


def resolve_database_url() -> str:
    """First non-empty connection URL among the env keys hosts commonly use."""
    for key in ("DATABASE_URL", "MYSQL_URL", "JAWSDB_URL"):
        value = os.getenv(key, "").strip()
        if value:
            return value
    return ""
