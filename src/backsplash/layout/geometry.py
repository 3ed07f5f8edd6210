"""
Geometry value types for tile layout.

Point, Rect and Size are frozen; every operation returns a new value.
Coordinates are pixels with the origin at the top left and y growing down.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator


@dataclass(frozen=True)
class Point:
  """A 2D point."""

  x: float
  y: float

  def __iter__(self) -> Iterator[float]:
    return iter((self.x, self.y))

  def with_x(self, x: float) -> Point:
    return replace(self, x=x)

  def with_y(self, y: float) -> Point:
    return replace(self, y=y)


@dataclass(frozen=True)
class Size:
  """A width and height."""

  width: float
  height: float

  def __iter__(self) -> Iterator[float]:
    return iter((self.width, self.height))

  def with_width(self, width: float) -> Size:
    return replace(self, width=width)

  def with_height(self, height: float) -> Size:
    return replace(self, height=height)

  def to_rect(self) -> Rect:
    """A rectangle of this size at the origin."""
    return Rect(0, 0, self.width, self.height)


@dataclass(frozen=True)
class Rect:
  """An axis-aligned rectangle."""

  x: float
  y: float
  width: float
  height: float

  def __iter__(self) -> Iterator[float]:
    return iter((self.x, self.y, self.width, self.height))

  @property
  def left(self) -> float:
    return self.x

  @property
  def top(self) -> float:
    return self.y

  @property
  def right(self) -> float:
    return self.x + self.width

  @property
  def bottom(self) -> float:
    return self.y + self.height

  @property
  def centre(self) -> Point:
    return Point(self.x + self.width / 2, self.y + self.height / 2)

  @property
  def left_middle(self) -> Point:
    return Point(self.left, self.top + self.height / 2)

  @property
  def top_middle(self) -> Point:
    return Point(self.left + self.width / 2, self.top)

  @property
  def right_middle(self) -> Point:
    return Point(self.right, self.top + self.height / 2)

  @property
  def bottom_middle(self) -> Point:
    return Point(self.left + self.width / 2, self.bottom)

  @property
  def size(self) -> Size:
    return Size(self.width, self.height)

  def with_left(self, left: float) -> Rect:
    """Move the left edge, keeping the right edge where it is."""
    return Rect(left, self.y, self.right - left, self.height)

  def with_top(self, top: float) -> Rect:
    """Move the top edge, keeping the bottom edge where it is."""
    return Rect(self.x, top, self.width, self.bottom - top)

  def with_right(self, right: float) -> Rect:
    return Rect(self.x, self.y, right - self.left, self.height)

  def with_bottom(self, bottom: float) -> Rect:
    return Rect(self.x, self.y, self.width, bottom - self.top)

  def contains(self, point: Point) -> bool:
    """Check if a point is within the rectangle, edges included."""
    return self.left <= point.x <= self.right and self.top <= point.y <= self.bottom

  def union(self, other: Rect) -> Rect:
    """The smallest rectangle enclosing both rectangles."""
    left = min(self.left, other.left)
    top = min(self.top, other.top)
    right = max(self.right, other.right)
    bottom = max(self.bottom, other.bottom)
    return Rect(left, top, right - left, bottom - top)

  def intersect(self, other: Rect) -> Rect | None:
    """
    Trim away the part of this rectangle that `other` covers.

    An edge is pulled in past `other` only when `other` contains that edge's
    midpoint and the midpoints of both adjacent edges, i.e. when `other`
    covers a full-width band along that edge. Any other overlap leaves the
    edge alone.

    Returns:
        None if nothing remains, this same rectangle if nothing was trimmed,
        otherwise the trimmed rectangle.
    """
    contains = other.contains
    left_middle = contains(self.left_middle)
    top_middle = contains(self.top_middle)
    right_middle = contains(self.right_middle)
    bottom_middle = contains(self.bottom_middle)

    left = self.left
    if left_middle and top_middle and bottom_middle:
      left = max(self.left, other.right)

    top = self.top
    if top_middle and left_middle and right_middle:
      top = max(self.top, other.bottom)

    right = self.right
    if right_middle and top_middle and bottom_middle:
      right = min(self.right, other.left)

    bottom = self.bottom
    if bottom_middle and left_middle and right_middle:
      bottom = min(self.bottom, other.top)

    if left >= right or top >= bottom:
      return None
    if left == self.left and top == self.top and right == self.right and bottom == self.bottom:
      return self
    return Rect(left, top, right - left, bottom - top)
