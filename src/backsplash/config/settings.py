"""
Environment settings.

Values are read from the process environment, after loading any `.env` file
found from the working directory upwards:

- BACKSPLASH_LOG_LEVEL: logging level name for the command line (default INFO)
- BACKSPLASH_MAGNIFICATION: display magnification percentage (default 100)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from backsplash.config.defaults import DEFAULT_MAGNIFICATION, clamp_magnification

LOG_LEVEL_VAR = "BACKSPLASH_LOG_LEVEL"
MAGNIFICATION_VAR = "BACKSPLASH_MAGNIFICATION"


@dataclass(frozen=True)
class Settings:
  """Runtime settings for the command line."""

  log_level: int = logging.INFO
  magnification: int = DEFAULT_MAGNIFICATION


def parse_log_level(name: str | None) -> int:
  """Map a level name such as 'debug' to its logging constant."""
  if not name:
    return logging.INFO
  level = logging.getLevelName(name.strip().upper())
  if not isinstance(level, int):
    raise ValueError(f"Unknown log level: {name}")
  return level


def load_settings(use_dotenv: bool = True) -> Settings:
  """Read settings from the environment."""
  if use_dotenv:
    load_dotenv(find_dotenv(usecwd=True))

  return Settings(
    log_level=parse_log_level(os.getenv(LOG_LEVEL_VAR)),
    magnification=clamp_magnification(os.getenv(MAGNIFICATION_VAR, DEFAULT_MAGNIFICATION)),
  )
