"""
Tests for settings.py and the magnification defaults
"""

import logging
import math
import os
from pathlib import Path

import pytest

from backsplash.config.defaults import clamp_magnification
from backsplash.config.settings import (
  LOG_LEVEL_VAR,
  MAGNIFICATION_VAR,
  Settings,
  load_settings,
  parse_log_level,
)


class TestParseLogLevel:
  @pytest.mark.parametrize(
    "name, expected",
    [
      ("debug", logging.DEBUG),
      ("INFO", logging.INFO),
      (" warning ", logging.WARNING),
      ("", logging.INFO),
      (None, logging.INFO),
    ],
  )
  def test_known_levels(self, name, expected: int) -> None:
    assert parse_log_level(name) == expected

  def test_unknown_level(self) -> None:
    with pytest.raises(ValueError):
      parse_log_level("chatty")


class TestClampMagnification:
  @pytest.mark.parametrize(
    "value, expected",
    [
      (100, 100),
      ("250", 250),
      (12.2, 13),
      (0, 1),
      (-50, 1),
      (5000, 4000),
      ("abc", 100),
      (None, 100),
      (math.nan, 100),
    ],
  )
  def test_clamp(self, value, expected: int) -> None:
    assert clamp_magnification(value) == expected


class TestLoadSettings:
  def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(LOG_LEVEL_VAR, raising=False)
    monkeypatch.delenv(MAGNIFICATION_VAR, raising=False)
    assert load_settings(use_dotenv=False) == Settings()

  def test_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_VAR, "debug")
    monkeypatch.setenv(MAGNIFICATION_VAR, "9999")
    settings = load_settings(use_dotenv=False)
    assert settings.log_level == logging.DEBUG
    assert settings.magnification == 4000

  def test_bad_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_VAR, "chatty")
    with pytest.raises(ValueError):
      load_settings(use_dotenv=False)


class TestDotenv:
  @pytest.fixture
  def environ(self, monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    env = {
      name: value
      for name, value in os.environ.items()
      if name not in (LOG_LEVEL_VAR, MAGNIFICATION_VAR)
    }
    monkeypatch.setattr(os, "environ", env)
    return env

  def test_reads_dotenv_from_working_directory(
    self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, environ: dict[str, str]
  ) -> None:
    (tmp_path / ".env").write_text(f"{MAGNIFICATION_VAR}=250\n{LOG_LEVEL_VAR}=warning\n")
    monkeypatch.chdir(tmp_path)

    settings = load_settings()
    assert settings.magnification == 250
    assert settings.log_level == logging.WARNING

  def test_environment_wins_over_dotenv(
    self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, environ: dict[str, str]
  ) -> None:
    (tmp_path / ".env").write_text(f"{MAGNIFICATION_VAR}=250\n")
    environ[MAGNIFICATION_VAR] = "300"
    monkeypatch.chdir(tmp_path)

    assert load_settings().magnification == 300
