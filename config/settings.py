"""
Centralized configuration using pydantic-settings.

How it works:
- Reads environment variables automatically (e.g., MAX_WAIT_TIME env var → Settings.MAX_WAIT_TIME)
- Falls back to defaults defined here if env vars are not set
- Rejects bad values (negative wait, unknown pool) at load time
- Can also read from a .env file in the project root

Every module imports `settings` from here instead of hardcoding values.
"""

from pydantic import Field
from pydantic_settings import BaseSettings

from models.enums import ReadyPoolKind


class Settings(BaseSettings):
    # ── Scheduler ───────────────────────────────────────────────
    MAX_WAIT_TIME: int = Field(30, ge=0)                  # ticks a job may wait before aging kicks in
    READY_POOL: ReadyPoolKind = ReadyPoolKind.INDEXED     # ready pool structure: indexed | linear

    # ── Workload files ──────────────────────────────────────────
    INPUT_FILE: str = "process_scheduling_input.txt"
    OUTPUT_FILE: str = "process_scheduling_output.txt"

    # ── App ─────────────────────────────────────────────────────
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


# Singleton: import this everywhere
settings = Settings()
