import os
from functools import lru_cache

from dotenv import load_dotenv


class Settings:
    """Simple settings loaded from environment.

    Reads a local .env first and falls back to sensible defaults.
    """

    def __init__(self) -> None:
        load_dotenv()

        # checked where the policy is applied
        self.EXTRA_FIELDS: str = os.getenv("BCSCHEMA_EXTRA_FIELDS", "ignore").strip().lower()
        self.METADATA_PATH: str | None = os.getenv("BCSCHEMA_METADATA_PATH") or None
        self.LOG_LEVEL: str = os.getenv("BCSCHEMA_LOG_LEVEL", "WARNING").upper()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
