"""Settings from environment variables (optionally from a .env file) and logging setup."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATA_FILE = "data/hubhealth.json"
DEFAULT_LOG_LEVEL = "INFO"


def load_env() -> None:
    """Load .env from repo root, else from the current directory."""
    for path in (
        Path(__file__).resolve().parent.parent.parent / ".env",
        Path.cwd() / ".env",
    ):
        if path.exists():
            load_dotenv(path)
            break


@dataclass(frozen=True)
class Settings:
    data_file: Path
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "Settings":
        data_file = os.environ.get("HUBHEALTH_DATA_FILE", "").strip() or DEFAULT_DATA_FILE
        log_level = os.environ.get("HUBHEALTH_LOG_LEVEL", "").strip().upper() or DEFAULT_LOG_LEVEL
        return cls(data_file=Path(data_file), log_level=log_level)


def get_settings() -> Settings:
    load_env()
    return Settings.from_env()


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    logging.basicConfig(format=LOG_FORMAT, level=numeric_level)
