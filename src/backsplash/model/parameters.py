"""
Tile parameters record and its copy-on-write updates.

TileParameters is the single input to both the pattern generator and the
layout engine. It is frozen: the functions in this module never modify a
record, they return a new one (or the same object when nothing changes).
"""

from __future__ import annotations

import logging
from typing import Annotated, Any, Iterable, Literal, Mapping

from pydantic import Field, field_validator

from backsplash.config.defaults import DEFAULT_COLOUR_MODEL, DEFAULT_GROUT, DEFAULT_PARAMS
from backsplash.model.colour_model import (
  ColourModel,
  ColourPalette,
  ColourSpec,
  HexColour,
  Record,
  check_unique_names,
  enabled_count,
)

logger = logging.getLogger(__name__)

Orientation = Literal["horizontal", "vertical"]
StepDirection = Literal["left", "right"]

GridIndex = Annotated[int, Field(ge=0)]
PositiveInt = Annotated[int, Field(gt=0)]


class Region(Record):
  """
  An inclusive rectangle of grid cells in 1-based coordinates.

  The end corner may lie above or left of the start corner; use
  `normalized()` before treating the corners as ordered.
  """

  start_row: GridIndex
  start_column: GridIndex
  end_row: GridIndex
  end_column: GridIndex

  def normalized(self) -> Region:
    """The same region with start <= end on both axes."""
    if self.start_row <= self.end_row and self.start_column <= self.end_column:
      return self
    return Region(
      start_row=min(self.start_row, self.end_row),
      start_column=min(self.start_column, self.end_column),
      end_row=max(self.start_row, self.end_row),
      end_column=max(self.start_column, self.end_column),
    )

  def contains(self, row: int, column: int) -> bool:
    """Check if a cell lies within the region."""
    region = self.normalized()
    return (
      region.start_row <= row <= region.end_row
      and region.start_column <= column <= region.end_column
    )

  @classmethod
  def from_string(cls, s: str) -> Region:
    """Parse 'r1,c1:r2,c2' (or a single cell 'r,c') into a Region."""
    corners = s.replace(" ", "").split(":")
    if len(corners) not in (1, 2):
      raise ValueError(f"Invalid region format: {s}")

    cells = []
    for corner in corners:
      parts = corner.split(",")
      if len(parts) != 2:
        raise ValueError(f"Invalid region format: {s}")
      cells.append((int(parts[0]), int(parts[1])))

    (start_row, start_column), (end_row, end_column) = cells[0], cells[-1]
    return cls(
      start_row=start_row,
      start_column=start_column,
      end_row=end_row,
      end_column=end_column,
    )


class TileParameters(Record):
  """Everything that determines a backsplash pattern and its geometry."""

  seed: str = DEFAULT_PARAMS["seed"]
  orientation: Orientation = DEFAULT_PARAMS["orientation"]
  row_count: PositiveInt = DEFAULT_PARAMS["row_count"]
  column_count: PositiveInt = DEFAULT_PARAMS["column_count"]
  complexity: Annotated[int, Field(ge=0)] = DEFAULT_PARAMS["complexity"]
  aspect_ratio: Annotated[int, Field(ge=-10, le=10)] = DEFAULT_PARAMS["aspect_ratio"]
  offset: Annotated[int, Field(ge=1, le=10)] = DEFAULT_PARAMS["offset"]
  step_direction: StepDirection = DEFAULT_PARAMS["step_direction"]
  step_alternate: bool = DEFAULT_PARAMS["step_alternate"]
  group_size: PositiveInt = DEFAULT_PARAMS["group_size"]
  rotation: Annotated[int, Field(ge=0)] = DEFAULT_PARAMS["rotation"]
  holes: tuple[Region, ...] = ()
  grout: HexColour = DEFAULT_GROUT
  colour_model: ColourModel = Field(
    default_factory=lambda: tuple(ColourSpec(**colour) for colour in DEFAULT_COLOUR_MODEL)
  )

  @field_validator("aspect_ratio")
  @classmethod
  def _valid_ratio(cls, value: int) -> int:
    # -1 would describe the same tile shape as 1
    if value in (0, -1):
      raise ValueError(f"Aspect ratio must not be 0 or -1, got {value}")
    return value

  @field_validator("colour_model")
  @classmethod
  def _unique_names(cls, value: ColourModel) -> ColourModel:
    return check_unique_names(value)

  @property
  def palette(self) -> ColourPalette:
    return ColourPalette(grout=self.grout, colour_model=self.colour_model)

  @property
  def enabled_colours(self) -> list[ColourSpec]:
    return [colour for colour in self.colour_model if colour.enabled]


def default_parameters() -> TileParameters:
  """The documented application default design."""
  return TileParameters()


def is_in_hole(row: int, column: int, params: TileParameters) -> bool:
  """Check if a grid cell is excluded by any of the holes."""
  return any(hole.contains(row, column) for hole in params.holes)


# =============================================================================
# Copy-on-write updates
# =============================================================================


def _rebuild(params: TileParameters, **changes: Any) -> TileParameters:
  """Validate a copy of `params` with `changes` applied."""
  return TileParameters.model_validate({**dict(params), **changes})


def set_param(params: TileParameters, name: str, value: Any) -> TileParameters:
  """
  Set a single parameter.

  Setting the colour model while the group size equals the number of
  enabled colours keeps the group size tracking the enabled count.
  """
  if name not in TileParameters.model_fields:
    raise ValueError(f"Unknown parameter: {name}")

  updated = _rebuild(params, **{name: value})
  if getattr(updated, name) == getattr(params, name):
    return params

  if name == "colour_model" and enabled_count(params.colour_model) == params.group_size:
    updated = _rebuild(updated, group_size=max(1, enabled_count(updated.colour_model)))

  logger.debug("Setting %s", name)
  return updated


def set_colour_palette(params: TileParameters, palette: ColourPalette) -> TileParameters:
  """Replace the grout colour and colour model together."""
  if palette.grout == params.grout and palette.colour_model == params.colour_model:
    return params
  return _rebuild(params, grout=palette.grout, colour_model=palette.colour_model)


def load_state(
  params: TileParameters, state: TileParameters | Mapping[str, Any]
) -> TileParameters:
  """Replace the whole record, e.g. with a saved snapshot."""
  if isinstance(state, TileParameters):
    return state
  return TileParameters.model_validate(state)


def add_hole(params: TileParameters, hole: Region | Mapping[str, Any]) -> TileParameters:
  if not isinstance(hole, Region):
    hole = Region.model_validate(hole)
  return _rebuild(params, holes=(*params.holes, hole))


def remove_hole(params: TileParameters, row: int, column: int) -> TileParameters:
  """Remove every hole that contains the given cell."""
  holes = tuple(hole for hole in params.holes if not hole.contains(row, column))
  if len(holes) == len(params.holes):
    return params
  return _rebuild(params, holes=holes)


def add_holes(params: TileParameters, holes: Iterable[Region]) -> TileParameters:
  for hole in holes:
    params = add_hole(params, hole)
  return params
