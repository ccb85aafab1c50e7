"""Runtime configuration and logging setup."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Default data directory (repository root / data)
DEFAULT_DATA_DIR = Path(__file__).parent.parent.parent / "data"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_data_dir() -> Path:
    """Data directory, overridable with FITSPEC_DATA_DIR."""
    env_dir = os.getenv("FITSPEC_DATA_DIR")
    return Path(env_dir) if env_dir else DEFAULT_DATA_DIR


def get_log_level() -> str:
    return os.getenv("FITSPEC_LOG_LEVEL", "WARNING").upper()


def configure_logging(level: str | int | None = None) -> None:
    """Configure root logging for the CLI and web server."""
    logging.basicConfig(
        level=level if level is not None else get_log_level(),
        format=LOG_FORMAT,
    )
