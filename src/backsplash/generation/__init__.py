"""
Pattern generation.

Turns a TileParameters record into rows of coloured tiles. Generation is a
pure function of the record: the same seed and parameters always produce the
same rows, and growing the row count only adds rows at the top.
"""

from backsplash.generation.randomizer import Randomizer
from backsplash.generation.tile_generator import (
  ColourDispenser,
  RowGenerator,
  Tile,
  TileRow,
  generate_rows,
)

__all__ = [
  "ColourDispenser",
  "Randomizer",
  "RowGenerator",
  "Tile",
  "TileRow",
  "generate_rows",
]
