"""
Tests for summary.py

These tests use hand-built rows so that the expected counts and maps do not
depend on the random stream.
"""

import pytest

from backsplash.export.summary import (
  HOLE_CODE,
  colour_codes,
  legend,
  map_basis_factor,
  parameter_table,
  pattern_map,
  tile_counts,
)
from backsplash.generation.tile_generator import Tile, TileRow
from backsplash.model.parameters import Region, TileParameters, add_hole, default_parameters


def make_rows(*lines: str) -> list[TileRow]:
  """Rows from lines of colour names separated by spaces, top row first."""
  rows = []
  for row_key, line in enumerate(lines, start=1):
    columns = tuple(
      Tile(key=key, row=row_key, colour=name) for key, name in enumerate(line.split(), start=1)
    )
    rows.append(TileRow(key=row_key, columns=columns))
  return rows


ROWS = make_rows(
  "cherry jeans smoke pearl",
  "pearl cherry jeans pearl",
  "smoke pearl cherry jeans",
)


# =============================================================================
# Legend and Counts
# =============================================================================


class TestLegend:
  def test_colour_codes(self) -> None:
    codes = colour_codes(default_parameters())
    assert codes["cherry"] == "C"
    assert codes["pink"] == "I"
    assert codes["black"] == "K"
    assert len(codes) == 11

  def test_legend_lists_enabled_colours_in_order(self) -> None:
    names = [colour.name for colour in legend(default_parameters())]
    assert names == ["cherry", "jeans", "smoke", "pearl"]


class TestTileCounts:
  def test_counts_sorted_by_name(self) -> None:
    counts = tile_counts(default_parameters(), ROWS)
    assert counts == {"cherry": 3, "jeans": 3, "pearl": 4, "smoke": 2}
    assert list(counts) == ["cherry", "jeans", "pearl", "smoke"]

  def test_counts_exclude_holes(self) -> None:
    params = add_hole(default_parameters(), Region.from_string("2,1:2,2"))
    counts = tile_counts(params, ROWS)
    assert counts == {"cherry": 2, "jeans": 3, "pearl": 3, "smoke": 2}

  def test_empty_pattern(self) -> None:
    assert tile_counts(default_parameters(), []) == {}


# =============================================================================
# Parameter Table
# =============================================================================


class TestParameterTable:
  def test_defaults(self) -> None:
    table = parameter_table(default_parameters())
    assert table["Seed"] == "Oceani"
    assert table["Rows"] == "8"
    assert table["Columns"] == "34"
    assert table["Group Size"] == "4"
    assert table["Offset"] == "1/2"
    assert table["Step Direction"] == "Right"
    assert table["Alternating?"] == "N/A"

  def test_no_offset(self) -> None:
    assert parameter_table(TileParameters(offset=1))["Offset"] == "None"

  @pytest.mark.parametrize("alternate, expected", [(True, "Yes"), (False, "No")])
  def test_alternating(self, alternate: bool, expected: str) -> None:
    params = TileParameters(offset=3, step_alternate=alternate, step_direction="left")
    table = parameter_table(params)
    assert table["Offset"] == "1/3"
    assert table["Alternating?"] == expected
    assert table["Step Direction"] == "Left"


# =============================================================================
# Map
# =============================================================================


class TestMap:
  @pytest.mark.parametrize(
    "ratio, expected",
    [(4, 1.6667 / 4), (-4, 1.6667 / 4), (2, 1.6667 / 2), (1, 1)],
  )
  def test_map_basis_factor(self, ratio: int, expected: float) -> None:
    assert map_basis_factor(ratio) == pytest.approx(expected)

  def test_pattern_map(self) -> None:
    assert pattern_map(default_parameters(), ROWS) == "CJSP\nPCJP\nSPCJ"

  def test_pattern_map_marks_holes(self) -> None:
    params = add_hole(default_parameters(), Region.from_string("3,4:1,3"))
    assert HOLE_CODE == "."
    assert pattern_map(params, ROWS) == "CJ..\nPC..\nSP.."
