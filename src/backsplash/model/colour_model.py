"""
Colour model for tile patterns.

A colour model is an ordered tuple of ColourSpec records. Together with the
grout colour it forms a ColourPalette. All records are frozen; the update
functions at the bottom of this module return new palettes.
"""

from __future__ import annotations

from typing import Annotated, Any, Iterable, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from backsplash.config.defaults import DEFAULT_COLOUR_MODEL, DEFAULT_GROUT


MIN_WEIGHT = 1
MAX_WEIGHT = 9

HexColour = Annotated[str, Field(pattern=r"^#[0-9a-fA-F]{6}$")]
ColourWeight = Annotated[int, Field(ge=MIN_WEIGHT, le=MAX_WEIGHT)]


class Record(BaseModel):
  """Base for immutable records that also accept the camelCase field names."""

  model_config = ConfigDict(
    frozen=True,
    extra="forbid",
    alias_generator=to_camel,
    populate_by_name=True,
  )


class ColourSpec(Record):
  """A tile colour. The name is its unique key."""

  name: str
  hexcode: HexColour
  code: Annotated[str, Field(min_length=1, max_length=1)]
  enabled: bool = True
  weight: ColourWeight = 5
  favourite: bool = False


ColourModel = tuple[ColourSpec, ...]


def check_unique_names(colours: ColourModel) -> ColourModel:
  """Reject a colour model that uses any colour name twice."""
  seen: set[str] = set()
  for colour in colours:
    if colour.name in seen:
      raise ValueError(f"Duplicate colour name: {colour.name}")
    seen.add(colour.name)
  return colours


class ColourPalette(Record):
  """Grout colour plus the tile colour model."""

  grout: HexColour = DEFAULT_GROUT
  colour_model: ColourModel = Field(
    default_factory=lambda: tuple(ColourSpec(**colour) for colour in DEFAULT_COLOUR_MODEL)
  )

  @field_validator("colour_model")
  @classmethod
  def _unique_names(cls, value: ColourModel) -> ColourModel:
    return check_unique_names(value)


def default_palette() -> ColourPalette:
  """The default 11-colour palette."""
  return ColourPalette()


def enabled_count(colour_model: Iterable[ColourSpec]) -> int:
  """Number of colours in the model that take part in generation."""
  return sum(1 for colour in colour_model if colour.enabled)


def as_colour_spec(colour: ColourSpec | Mapping[str, Any]) -> ColourSpec:
  if isinstance(colour, ColourSpec):
    return colour
  return ColourSpec.model_validate(colour)


# =============================================================================
# Palette updates
# =============================================================================


def set_grout(palette: ColourPalette, colour: str) -> ColourPalette:
  if colour == palette.grout:
    return palette
  return ColourPalette(grout=colour, colour_model=palette.colour_model)


def set_colour_model(
  palette: ColourPalette, model: Iterable[ColourSpec | Mapping[str, Any]]
) -> ColourPalette:
  colour_model = tuple(as_colour_spec(colour) for colour in model)
  if colour_model == palette.colour_model:
    return palette
  return ColourPalette(grout=palette.grout, colour_model=colour_model)


def _update_colour(palette: ColourPalette, colour_name: str, **changes: Any) -> ColourPalette:
  """Apply `changes` to the named colour, validating the result."""
  updated = []
  for colour in palette.colour_model:
    if colour.name == colour_name:
      colour = ColourSpec.model_validate({**dict(colour), **changes})
    updated.append(colour)
  return set_colour_model(palette, updated)


def add_colour(palette: ColourPalette, colour: ColourSpec | Mapping[str, Any]) -> ColourPalette:
  return set_colour_model(palette, [*palette.colour_model, as_colour_spec(colour)])


def delete_colour(palette: ColourPalette, colour_name: str) -> ColourPalette:
  return set_colour_model(
    palette, [colour for colour in palette.colour_model if colour.name != colour_name]
  )


def change_colour(palette: ColourPalette, colour_name: str, hexcode: str) -> ColourPalette:
  return _update_colour(palette, colour_name, hexcode=hexcode)


def toggle_colour(palette: ColourPalette, colour_name: str) -> ColourPalette:
  """Enable or disable the named colour."""
  for colour in palette.colour_model:
    if colour.name == colour_name:
      return _update_colour(palette, colour_name, enabled=not colour.enabled)
  return palette


def toggle_favourite(palette: ColourPalette, colour_name: str) -> ColourPalette:
  for colour in palette.colour_model:
    if colour.name == colour_name:
      return _update_colour(palette, colour_name, favourite=not colour.favourite)
  return palette


def weight_colour(palette: ColourPalette, colour_name: str, delta: int) -> ColourPalette:
  """
  Nudge the weight of the named colour by `delta`.

  The result is clamped to the valid weight range rather than rejected.
  """
  if delta not in (-1, 1):
    raise ValueError(f"Weight delta must be -1 or 1, got {delta}")

  for colour in palette.colour_model:
    if colour.name == colour_name:
      weight = min(MAX_WEIGHT, max(MIN_WEIGHT, colour.weight + delta))
      return _update_colour(palette, colour_name, weight=weight)
  return palette
