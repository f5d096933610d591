"""Application configuration read from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


@dataclass(frozen=True)
class Config:
    """Settings the application needs at start-up."""

    postgres_uri: str = ""


def load_config(logger: logging.Logger) -> Config:
    """Load ``.env`` from the working directory if present, then read the environment."""
    dotenv_path = Path.cwd() / ".env"
    if dotenv_path.is_file():
        load_dotenv(dotenv_path)
    else:
        logger.warning(
            "no .env found, using default envvar...",
            extra={"error": f"open {dotenv_path}: no such file"},
        )
    return Config(postgres_uri=os.environ.get("POSTGRES_URI", ""))