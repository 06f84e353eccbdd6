import os

_MODULES = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
}


def get_settings_module(env: str | None = None) -> str:
    """Settings module for APP_ENV (or `env`); anything unknown means development."""
    env = (env or os.getenv("APP_ENV") or "development").strip().lower()
    return _MODULES.get(env, "config.development")
