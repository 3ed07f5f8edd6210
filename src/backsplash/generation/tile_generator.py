"""
Tile pattern generator.

Creates the rows of a backsplash pattern from a TileParameters record.

Algorithm:
1. Each row draws a base palette: the favourite colours then the other
   enabled colours, each shuffled, truncated to the group size.
2. With complexity > 0, a few weight-biased duplicates are appended to it.
3. A ColourDispenser deals the palette out in shuffled groups, never
   repeating a colour across the seam between two groups.
4. The row is rotated right by the rotation parameter.

Rows are generated bottom to top from a single Randomizer, so a pattern of
N+k rows has exactly the same bottom N rows as a pattern of N rows.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Sequence, TypeVar

from backsplash.errors import assert_exists
from backsplash.generation.randomizer import Randomizer
from backsplash.model.parameters import TileParameters

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Tile:
  """A tile at 1-based column `key` of 1-based `row`."""

  key: int
  row: int
  colour: str

  def to_dict(self) -> dict[str, int | str]:
    """Convert to JSON-serializable dict."""
    return {"key": self.key, "row": self.row, "colour": self.colour}


@dataclass(frozen=True)
class TileRow:
  """A row of tiles, ordered left to right."""

  key: int
  columns: tuple[Tile, ...]

  def __len__(self) -> int:
    return len(self.columns)

  def __iter__(self) -> Iterator[Tile]:
    return iter(self.columns)

  @property
  def colours(self) -> list[str]:
    return [tile.colour for tile in self.columns]

  def to_dict(self) -> dict:
    """Convert to JSON-serializable dict."""
    return {"key": self.key, "columns": [tile.to_dict() for tile in self.columns]}


# =============================================================================
# Colour Dispenser
# =============================================================================


class ColourDispenser:
  """
  Endlessly dispense `colours` in random orderings of the whole set.

  Each run of len(colours) consecutive colours is one shuffled group. A group
  never starts with the colour that ended the previous group; if the shuffle
  puts it first, it is moved to the back of the group.

  A dispenser is single-pass: a fresh dispenser over a fresh Randomizer with
  the same seed repeats the same sequence.
  """

  def __init__(self, colours: Sequence[str], rnd: Randomizer):
    self._colours = list(colours)
    self._rnd = rnd
    self._group: list[str] = []
    self._dispensed = 0
    self.last_colour: str | None = None

  def __iter__(self) -> ColourDispenser:
    return self

  def __next__(self) -> str:
    return self.next_colour()

  def next_colour(self) -> str:
    if not self._colours or self._dispensed % len(self._colours) == 0:
      self._start_group()

    colour = self._group.pop(0) if self._group else None
    self.last_colour = assert_exists(colour, "dispensed colour")
    self._dispensed += 1
    return self.last_colour

  def _start_group(self) -> None:
    group = self._rnd.shuffle(self._colours)
    if group and group[0] == self.last_colour:
      group.append(group.pop(0))
    self._group = group


def rotate(items: Sequence[T], places: int) -> list[T]:
  """Rotate some `items` to the right by some number of `places`."""
  if places == 0:
    return list(items)
  return [*items[len(items) - places :], *items[: len(items) - places]]


# =============================================================================
# Row Generation
# =============================================================================


class RowGenerator:
  """A generator of randomized rows of tiles."""

  def __init__(
    self,
    params: TileParameters,
    colour_weights: dict[str, int],
    favourites: list[str],
  ):
    """
    Args:
        params: The pattern parameters
        colour_weights: Weight of each enabled colour, in colour model order
        favourites: Names of the enabled favourite colours
    """
    self.params = params
    self.colour_weights = colour_weights
    self.favourites = favourites
    self.others = [colour for colour in colour_weights if colour not in favourites]

  def base_palette(self, rnd: Randomizer) -> list[str]:
    """Draw the group of colours for one row, favourites first."""
    colours = [*rnd.shuffle(self.favourites), *rnd.shuffle(self.others)]
    return colours[: self.params.group_size]

  def palette(self, rnd: Randomizer) -> list[str]:
    """Draw the base palette plus any weight-biased duplicates."""
    result = self.base_palette(rnd)

    complexity = self.params.complexity
    if complexity > 0:
      dupe_count = (rnd.next_int() % complexity) % self.params.group_size
      weighted = rnd.weighted_shuffle(result, self.colour_weights)
      result.extend(weighted[:dupe_count])

    return result

  def generate_rows(self) -> Iterator[TileRow]:
    """Generate the rows from the bottom (row_count) up to the top (1)."""
    rnd = Randomizer(self.params.seed)
    for row_key in range(self.params.row_count, 0, -1):
      yield self.generate_row(row_key, rnd)

  def generate_row(self, row_key: int, rnd: Randomizer) -> TileRow:
    column_count = self.params.column_count
    rotation = self.params.rotation

    dispenser = ColourDispenser(self.palette(rnd), rnd)
    tiles = [
      Tile(key=((i + rotation) % column_count) + 1, row=row_key, colour=dispenser.next_colour())
      for i in range(column_count)
    ]
    # Every row draws one colour past its last tile, starting a new group
    # when the row ends on a group boundary.
    dispenser.next_colour()

    return TileRow(key=row_key, columns=tuple(rotate(tiles, rotation)))


# =============================================================================
# Pattern Generation
# =============================================================================


class TileGenerator:
  """A generator of a randomized tile backsplash pattern."""

  def __init__(self, params: TileParameters):
    colour_weights: dict[str, int] = {}
    favourites: list[str] = []

    for colour in params.enabled_colours:
      colour_weights[colour.name] = colour.weight
      if colour.favourite:
        favourites.append(colour.name)

    self.row_generator = RowGenerator(params, colour_weights, favourites)

  def generate(self) -> list[TileRow]:
    """
    Generate the pattern as rows from top to bottom.

    Rows are produced bottom-up and each is put in front of the ones before
    it.
    """
    result: list[TileRow] = []
    for row in self.row_generator.generate_rows():
      result.insert(0, row)
    return result


def generate_rows(params: TileParameters) -> list[TileRow]:
  """
  Generate the backsplash pattern as a list of rows from top to bottom.

  The bottom N rows of an (N+k)-row pattern have the same colours as an N-row
  pattern with the same seed and other parameters. Row keys count from the
  top, so theirs are k higher.
  """
  rows = TileGenerator(params).generate()
  logger.debug(
    "Generated %d x %d pattern for seed %r",
    params.row_count,
    params.column_count,
    params.seed,
  )
  return rows
