"""
Tests for the backsplash command line
"""

import json

import pytest

from backsplash.cli import build_parser, main, params_from_args
from backsplash.config.settings import LOG_LEVEL_VAR, MAGNIFICATION_VAR
from backsplash.model.parameters import Region


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
  monkeypatch.delenv(LOG_LEVEL_VAR, raising=False)
  monkeypatch.delenv(MAGNIFICATION_VAR, raising=False)


# =============================================================================
# Argument Parsing
# =============================================================================


class TestParamsFromArgs:
  def test_defaults(self) -> None:
    params = params_from_args(build_parser().parse_args([]))
    assert params.seed == "Oceani"
    assert (params.row_count, params.column_count) == (8, 34)
    assert params.group_size == 4
    assert params.step_alternate is True
    assert params.holes == ()

  def test_options(self) -> None:
    args = build_parser().parse_args(
      [
        "--seed",
        "Lagoon",
        "--offset",
        "3",
        "--no-step-alternate",
        "--step-direction",
        "left",
        "--group-size",
        "3",
        "--hole",
        "2,5:3,7",
        "--hole",
        "1,1",
      ]
    )
    params = params_from_args(args)
    assert params.seed == "Lagoon"
    assert params.offset == 3
    assert params.step_alternate is False
    assert params.step_direction == "left"
    assert params.group_size == 3
    assert params.holes == (Region.from_string("2,5:3,7"), Region.from_string("1,1"))

  def test_invalid_hole(self) -> None:
    with pytest.raises(ValueError):
      params_from_args(build_parser().parse_args(["--hole", "2-5"]))


# =============================================================================
# Main
# =============================================================================


class TestMain:
  def test_text_output(self, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--rows", "3", "--columns", "5"]) == 0

    out = capsys.readouterr().out
    assert "Seed: Oceani" in out
    assert "Canvas:" in out

    map_lines = out.rstrip("\n").split("\n")[-3:]
    assert len(map_lines) == 3
    for line in map_lines:
      assert len(line) == 5
      assert set(line) <= set("CJSP")

  def test_text_output_with_hole(self, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--rows", "2", "--columns", "4", "--hole", "1,1:2,2"]) == 0

    map_lines = capsys.readouterr().out.rstrip("\n").split("\n")[-2:]
    assert all(line.startswith("..") for line in map_lines)

  def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--rows", "3", "--columns", "5", "--format", "json"]) == 0

    rows = json.loads(capsys.readouterr().out)
    assert [row["key"] for row in rows] == [1, 2, 3]
    assert all(len(row["columns"]) == 5 for row in rows)
    assert rows[0]["columns"][0].keys() == {"key", "row", "colour"}

  def test_json_output_is_deterministic(self, capsys: pytest.CaptureFixture[str]) -> None:
    main(["--seed", "Tide", "--format", "json"])
    first = capsys.readouterr().out
    main(["--seed", "Tide", "--format", "json"])
    assert capsys.readouterr().out == first

  def test_invalid_aspect_ratio(self, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--aspect-ratio", "0"]) == 1
    assert "Error" in capsys.readouterr().out

  def test_group_size_too_large(self, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--group-size", "5"]) == 1
    assert "exceeds" in capsys.readouterr().out

  def test_bad_log_level(
    self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
  ) -> None:
    monkeypatch.setenv(LOG_LEVEL_VAR, "chatty")
    assert main([]) == 1
    assert "Unknown log level" in capsys.readouterr().out
