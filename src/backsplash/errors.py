"""Errors raised by the pattern engine."""

from __future__ import annotations

from typing import TypeVar

T = TypeVar("T")


class BacksplashError(Exception):
  """Base class for engine errors."""


class MissingValueError(BacksplashError):
  """A value the engine relies on internally does not exist."""


def assert_exists(value: T | None, name: str = "value") -> T:
  """Return `value`, raising MissingValueError if it is None."""
  if value is None:
    raise MissingValueError(f"{name} does not exist")
  return value
