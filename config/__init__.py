import os


def get_settings_module() -> str:
    # APP_ENV selects the settings module, 'development' by default
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "config.production"

    if env in {"test", "testing"}:
        return "config.testing"

    return "config.development"


def missing_required_env(settings) -> list:
    """Names listed in ``settings.REQUIRED_ENV`` that are not set in the environment."""
    return [name for name in getattr(settings, "REQUIRED_ENV", ()) if not os.getenv(name)]
