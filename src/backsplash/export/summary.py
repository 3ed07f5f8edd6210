"""
Pattern summaries.

Pure functions that describe a generated pattern the way the designer's
export view presents it: legend, tiles needed per colour, the parameter
table and a text map of colour codes.
"""

from __future__ import annotations

from typing import Sequence

from backsplash.config.defaults import MAP_BASIS_SCALE
from backsplash.generation.tile_generator import TileRow
from backsplash.model.colour_model import ColourSpec
from backsplash.model.parameters import TileParameters, is_in_hole


HOLE_CODE = "."


def colour_codes(params: TileParameters) -> dict[str, str]:
  """Map each colour name to its one-character code."""
  return {colour.name: colour.code for colour in params.colour_model}


def legend(params: TileParameters) -> list[ColourSpec]:
  """The enabled colours, in colour model order."""
  return params.enabled_colours


def tile_counts(params: TileParameters, rows: Sequence[TileRow]) -> dict[str, int]:
  """Count the tiles needed of each colour, leaving out tiles in holes."""
  counts: dict[str, int] = {}
  for row in rows:
    for tile in row.columns:
      if is_in_hole(tile.row, tile.key, params):
        continue
      counts[tile.colour] = counts.get(tile.colour, 0) + 1
  return dict(sorted(counts.items()))


def parameter_table(params: TileParameters) -> dict[str, str]:
  """Parameters as display strings."""
  if params.offset > 2:
    alternating = "Yes" if params.step_alternate else "No"
  else:
    alternating = "N/A"

  return {
    "Seed": params.seed,
    "Rows": str(params.row_count),
    "Columns": str(params.column_count),
    "Group Size": str(params.group_size),
    "Complexity": str(params.complexity),
    "Offset": "None" if params.offset == 1 else f"1/{params.offset}",
    "Step Direction": "Left" if params.step_direction == "left" else "Right",
    "Alternating?": alternating,
    "Rotation": str(params.rotation),
  }


def map_basis_factor(aspect_ratio: int) -> float:
  """
  Basis factor for a labelled map of the pattern.

  Elongated tiles are drawn shorter on the map so that the codes printed on
  them stay legible without the map becoming very wide or tall.
  """
  if aspect_ratio > 1:
    return MAP_BASIS_SCALE / aspect_ratio
  if aspect_ratio < -1:
    return -MAP_BASIS_SCALE / aspect_ratio
  return 1


def pattern_map(params: TileParameters, rows: Sequence[TileRow]) -> str:
  """One line of colour codes per row, with HOLE_CODE for tiles in holes."""
  codes = colour_codes(params)
  lines = []
  for row in rows:
    lines.append(
      "".join(
        HOLE_CODE if is_in_hole(tile.row, tile.key, params) else codes[tile.colour]
        for tile in row.columns
      )
    )
  return "\n".join(lines)
