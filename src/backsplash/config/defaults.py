"""Documented application defaults for a backsplash pattern"""
import math
from typing import Any, Dict, List

# Default grout line colour
DEFAULT_GROUT: str = "#e8ece4"

# Default tile colours. Only enabled colours take part in generation.
DEFAULT_COLOUR_MODEL: List[Dict[str, Any]] = [
  {"name": "cherry", "hexcode": "#8b314d", "code": "C", "enabled": True, "weight": 5, "favourite": False},
  {"name": "pink", "hexcode": "#a9929d", "code": "I", "enabled": False, "weight": 5, "favourite": False},
  {"name": "jeans", "hexcode": "#90a5bc", "code": "J", "enabled": True, "weight": 5, "favourite": False},
  {"name": "smoke", "hexcode": "#91949b", "code": "S", "enabled": True, "weight": 5, "favourite": False},
  {"name": "pearl", "hexcode": "#c5c9cc", "code": "P", "enabled": True, "weight": 5, "favourite": True},
  {"name": "emerald", "hexcode": "#2c6278", "code": "E", "enabled": False, "weight": 5, "favourite": False},
  {"name": "maldive", "hexcode": "#478fa9", "code": "M", "enabled": False, "weight": 5, "favourite": False},
  {"name": "aequa", "hexcode": "#6d9da0", "code": "A", "enabled": False, "weight": 5, "favourite": False},
  {"name": "green", "hexcode": "#314d50", "code": "G", "enabled": False, "weight": 5, "favourite": False},
  {"name": "blue", "hexcode": "#2f657c", "code": "B", "enabled": False, "weight": 5, "favourite": False},
  {"name": "black", "hexcode": "#1d2322", "code": "K", "enabled": False, "weight": 5, "favourite": False},
]

# Pattern parameters, excluding the colour palette
DEFAULT_PARAMS: Dict[str, Any] = {
  "seed": "Oceani",
  "orientation": "horizontal",
  "row_count": 8,
  "column_count": 34,
  "complexity": 1,
  "aspect_ratio": 4,
  "offset": 2,
  "step_direction": "right",
  "step_alternate": True,
  "group_size": sum(1 for colour in DEFAULT_COLOUR_MODEL if colour["enabled"]),
  "rotation": 0,
}

# Display geometry
BASIS_PX_AT_100: int = 16  # size of one tile unit at 100% magnification
GROUT_PX: int = 2
DEFAULT_MAGNIFICATION: int = 100
MIN_MAGNIFICATION_PCT: int = 1
MAX_MAGNIFICATION_PCT: int = 4000

# Export map scaling for elongated tiles
MAP_BASIS_SCALE: float = 1.6667


def clamp_magnification(magnification: Any) -> int:
  """Clamp a magnification percentage into the supported range, rounding up"""
  try:
    value = float(magnification)
  except (TypeError, ValueError):
    return DEFAULT_MAGNIFICATION

  if math.isnan(value):
    return DEFAULT_MAGNIFICATION

  return math.ceil(min(max(value, MIN_MAGNIFICATION_PCT), MAX_MAGNIFICATION_PCT))
