"""
Pattern parameter records.

Immutable, validated descriptions of a backsplash design: the colour palette,
the grid and stepping parameters, and the holes cut out of the pattern. Every
update goes through a copy-on-write function that returns a new record.
"""

from backsplash.model.colour_model import (
  ColourPalette,
  ColourSpec,
  default_palette,
  enabled_count,
)
from backsplash.model.parameters import (
  Region,
  TileParameters,
  default_parameters,
  is_in_hole,
)

__all__ = [
  "ColourPalette",
  "ColourSpec",
  "Region",
  "TileParameters",
  "default_palette",
  "default_parameters",
  "enabled_count",
  "is_in_hole",
]
