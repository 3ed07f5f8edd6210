"""
Layout engine.

Maps the 1-based grid of a pattern onto pixels. Cells are `cell_size` apart
with grout lines between them; the aspect ratio stretches cells into wide or
tall tiles, and an offset greater than 1 steps alternate (or successive)
rows or columns by a fraction of a tile, brick fashion.

Offset stepping leaves a ragged edge. The canvas is trimmed to the tightest
straight edge and the trimmed strips are kept as crop rectangles that every
tile is cut against in `intersect_with_holes`, along with the holes.
"""

from __future__ import annotations

import logging
from typing import Iterator, Sequence

from backsplash.config.defaults import BASIS_PX_AT_100, GROUT_PX
from backsplash.errors import assert_exists
from backsplash.generation.tile_generator import Tile, TileRow
from backsplash.layout.geometry import Rect, Size
from backsplash.model.parameters import Region, TileParameters

logger = logging.getLogger(__name__)


class TileLayout:
  """Pixel geometry of one pattern at one magnification."""

  def __init__(
    self,
    basis_factor: float,
    magnification: float,
    params: TileParameters,
    rows: Sequence[TileRow],
  ):
    """
    Args:
        basis_factor: Scale applied to the long side of elongated tiles
        magnification: Display magnification in percent
        params: The pattern parameters
        rows: The generated rows, top to bottom
    """
    self.basis_factor = basis_factor
    self.magnification = magnification
    self.params = params

    self.basis_px = BASIS_PX_AT_100 * magnification / 100
    self.grout_px = GROUT_PX
    self.cell_size = self.measure(1, 1, inside=True)

    self._hole_rects: dict[Region, Rect] = {}
    self.canvas_size, self.canvas_crop = self._trim_canvas(rows)
    logger.debug(
      "Canvas %s x %s with %d crop strip(s)",
      self.canvas_size.width,
      self.canvas_size.height,
      len(self.canvas_crop),
    )

  def measure(self, rows: int, columns: int, inside: bool = False) -> Size:
    """
    Measure a block of cells.

    A negative aspect ratio makes tall tiles (rows are stretched), a positive
    one wide tiles (columns are stretched). The block includes the grout
    around it, or only the grout between its cells when `inside` is set.
    """
    aspect_ratio = self.params.aspect_ratio
    grout_x = (columns + (-1 if inside else 1)) * self.grout_px
    grout_y = (rows + (-1 if inside else 1)) * self.grout_px

    if aspect_ratio < 0:
      width = columns * self.basis_px
    else:
      width = columns * self.basis_px * aspect_ratio * self.basis_factor
    if aspect_ratio > 0:
      height = rows * self.basis_px
    else:
      height = -rows * self.basis_px * aspect_ratio * self.basis_factor

    return Size(width + grout_x, height + grout_y)

  def locate_cell(self, row: int, column: int, inside: bool = True) -> Rect:
    """
    Locate a single cell.

    With `inside` the rectangle is the tile face; otherwise it also takes in
    the grout around the tile. Cells stepped past the left or top of the
    canvas are clipped at it.
    """
    params = self.params
    grout_px = self.grout_px
    cell_size = self.cell_size

    tile_x = column - 1
    tile_y = row - 1
    width = cell_size.width + (0 if inside else 2 * grout_px)
    height = cell_size.height + (0 if inside else 2 * grout_px)
    x = tile_x * cell_size.width + (column if inside else tile_x) * grout_px
    y = tile_y * cell_size.height + (row if inside else tile_y) * grout_px

    offset = params.offset
    if offset > 1:
      aspect_ratio = params.aspect_ratio
      horizontal = params.orientation == "horizontal"
      if horizontal:
        amount = aspect_ratio * self.basis_factor if aspect_ratio > 0 else 1
        index = tile_y
      else:
        amount = 1 if aspect_ratio > 0 else -aspect_ratio * self.basis_factor
        index = tile_x

      # In vertical orientation, "left" is "down"
      direction = -1 if params.step_direction == "right" or offset <= 2 else 1

      if params.step_alternate or offset <= 2:
        shift = direction * self.basis_px * amount / offset if index % 2 == 1 else 0
      else:
        modular_offset = (index % offset) - (0 if params.step_direction == "right" else offset - 1)
        shift = direction * self.basis_px * amount * modular_offset / offset

      if horizontal:
        x += shift
        if x < grout_px:
          width -= grout_px - x if inside else -x
          x = grout_px if inside else 0
      else:
        y += shift
        if y < grout_px:
          height -= grout_px - y if inside else -y
          y = grout_px if inside else 0

    return Rect(x, y, width, height)

  def locate(
    self,
    row: int,
    column: int,
    to_row: int | None = None,
    to_column: int | None = None,
    inside: bool = True,
  ) -> Rect:
    """Locate a cell, or the block of cells between two corner cells."""
    start = self.locate_cell(row, column, inside)
    end = self.locate_cell(
      row if to_row is None else to_row,
      column if to_column is None else to_column,
      inside,
    )
    return start.union(end)

  def locate_hole(self, hole: Region) -> Rect:
    rect = self._hole_rects.get(hole)
    if rect is None:
      region = hole.normalized()
      rect = self.locate(region.start_row, region.start_column, region.end_row, region.end_column)
      self._hole_rects[hole] = rect
    return rect

  def intersect_with_holes(self, tile: Rect) -> Rect | None:
    """
    Cut a tile rectangle against the canvas crop strips and every hole.

    Returns:
        None if nothing of the tile remains, the same rectangle if nothing
        cut it, otherwise what is left of it.
    """
    result: Rect | None = tile
    for crop in self.canvas_crop:
      result = result.intersect(crop)
      if result is None:
        return None

    for hole in self.params.holes:
      result = result.intersect(self.locate_hole(hole))
      if result is None:
        return None

    return result

  def tile_regions(self, rows: Sequence[TileRow]) -> Iterator[tuple[Tile, Rect | None]]:
    """Pair each tile with the part of it that should be painted."""
    for row in rows:
      for tile in row.columns:
        yield tile, self.intersect_with_holes(self.locate(row.key, tile.key))

  def _trim_canvas(self, rows: Sequence[TileRow]) -> tuple[Size, tuple[Rect, ...]]:
    """Size the canvas, trimming the ragged edge left by offset stepping."""
    params = self.params
    full_canvas = self.measure(params.row_count, params.column_count)
    if params.offset <= 1:
      return full_canvas, ()

    crop: list[Rect] = []
    if params.orientation == "horizontal":
      first_tiles = [
        assert_exists(row.columns[0] if row.columns else None, "first tile") for row in rows
      ]
      last_tiles = [
        assert_exists(row.columns[-1] if row.columns else None, "last tile") for row in rows
      ]

      left = max([self.locate_cell(tile.row, tile.key, False).left for tile in first_tiles] + [0])
      right = min(
        [self.locate_cell(tile.row, tile.key, False).right for tile in last_tiles]
        + [full_canvas.width]
      )
      canvas_size = full_canvas.with_width(right - left)

      if left > 0:
        crop.append(Rect(0, 0, left, full_canvas.height))
      if right < full_canvas.width:
        crop.append(Rect(right, 0, full_canvas.width - right, canvas_size.height))
    else:
      top_row = assert_exists(rows[0] if rows else None, "top row")
      bottom_row = assert_exists(rows[-1] if rows else None, "bottom row")

      top = max([self.locate_cell(tile.row, tile.key, False).top for tile in top_row.columns] + [0])
      bottom = min(
        [self.locate_cell(tile.row, tile.key, False).bottom for tile in bottom_row.columns]
        + [full_canvas.height]
      )
      canvas_size = full_canvas.with_height(bottom - top)

      if top > 0:
        crop.append(Rect(0, 0, full_canvas.width, top))
      if bottom < full_canvas.height:
        crop.append(Rect(0, bottom, full_canvas.width, full_canvas.height - bottom))

    return canvas_size, tuple(crop)


def layout(
  basis_factor: float,
  magnification: float,
  params: TileParameters,
  rows: Sequence[TileRow],
) -> TileLayout:
  """Compute the pixel layout of a generated pattern."""
  return TileLayout(basis_factor, magnification, params, rows)
