"""Runtime configuration and logging setup."""

from __future__ import annotations
import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    log_level: str
    log_history: int


def load_settings() -> Settings:
    return Settings(
        log_level=os.getenv("WARBUFFS_LOG_LEVEL", "WARNING").upper(),
        log_history=int(os.getenv("WARBUFFS_LOG_HISTORY", "10")),
    )


def setup_logging(settings: Settings) -> None:
    """Configure root logging from settings."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
