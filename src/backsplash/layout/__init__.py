"""
Pixel layout of a tile pattern.

Geometry value types and the layout engine that places every tile, hole and
selection on the drawing surface.
"""

from backsplash.layout.geometry import Point, Rect, Size
from backsplash.layout.layout_engine import TileLayout, layout

__all__ = ["Point", "Rect", "Size", "TileLayout", "layout"]
