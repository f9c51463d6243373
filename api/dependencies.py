"""
FastAPI dependency injection.

How this works:
- An endpoint declares `config: Settings = Depends(get_settings)`
- FastAPI calls get_settings() before your endpoint runs
- Tests swap it out with app.dependency_overrides[get_settings]

Endpoints never import the settings singleton directly, so a test can run
the API with a different aging threshold without touching the environment.
"""

from config.settings import Settings, settings


def get_settings() -> Settings:
    """Returns the process-wide settings loaded at import time."""
    return settings
