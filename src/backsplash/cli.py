"""
Print a backsplash pattern.

Generates the pattern for the given parameters and prints a summary for the
installer: the parameters, the colour legend, the tiles needed of each
colour, the canvas size and a map of colour codes (holes shown as '.').

Usage:
  backsplash --seed Oceani --rows 8 --columns 34
  backsplash --offset 3 --no-step-alternate --hole 2,5:3,7
  backsplash --format json > pattern.json
"""

from __future__ import annotations

import argparse
import json
import logging
from typing import Sequence

from backsplash.config.defaults import DEFAULT_PARAMS, clamp_magnification
from backsplash.config.settings import load_settings
from backsplash.errors import BacksplashError
from backsplash.export.summary import (
  legend,
  map_basis_factor,
  parameter_table,
  pattern_map,
  tile_counts,
)
from backsplash.generation.tile_generator import TileRow, generate_rows
from backsplash.layout.layout_engine import layout
from backsplash.model.parameters import Region, TileParameters, add_holes

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
  parser = argparse.ArgumentParser(
    description="Generate a seeded tile backsplash pattern.",
    formatter_class=argparse.RawDescriptionHelpFormatter,
    epilog=__doc__,
  )
  parser.add_argument("--seed", default=DEFAULT_PARAMS["seed"], help="Pattern seed")
  parser.add_argument("--rows", type=int, default=DEFAULT_PARAMS["row_count"], help="Row count")
  parser.add_argument(
    "--columns", type=int, default=DEFAULT_PARAMS["column_count"], help="Column count"
  )
  parser.add_argument(
    "--complexity",
    type=int,
    default=DEFAULT_PARAMS["complexity"],
    help="Upper bound on extra weighted duplicate colours per row",
  )
  parser.add_argument(
    "--group-size",
    type=int,
    default=None,
    help="Colours per group (default: number of enabled colours)",
  )
  parser.add_argument("--rotation", type=int, default=DEFAULT_PARAMS["rotation"])
  parser.add_argument(
    "--orientation",
    choices=["horizontal", "vertical"],
    default=DEFAULT_PARAMS["orientation"],
  )
  parser.add_argument(
    "--aspect-ratio",
    type=int,
    default=DEFAULT_PARAMS["aspect_ratio"],
    help="Tile elongation, -10..10 excluding 0 and -1. Negative for tall tiles",
  )
  parser.add_argument(
    "--offset", type=int, default=DEFAULT_PARAMS["offset"], help="Step tiles by 1/OFFSET"
  )
  parser.add_argument(
    "--step-direction", choices=["left", "right"], default=DEFAULT_PARAMS["step_direction"]
  )
  parser.add_argument(
    "--no-step-alternate",
    dest="step_alternate",
    action="store_false",
    help="Step in a staircase instead of alternating (offsets above 2)",
  )
  parser.add_argument(
    "--hole",
    dest="holes",
    action="append",
    default=[],
    metavar="R1,C1:R2,C2",
    help="Exclude a rectangle of tiles. May be repeated",
  )
  parser.add_argument("--format", choices=["text", "json"], default="text")
  parser.add_argument(
    "--magnification",
    type=float,
    default=None,
    help="Magnification percent for the canvas size (default from BACKSPLASH_MAGNIFICATION)",
  )
  return parser


def params_from_args(args: argparse.Namespace) -> TileParameters:
  """Build the parameters record. Raises ValueError for invalid values."""
  values = {
    "seed": args.seed,
    "orientation": args.orientation,
    "row_count": args.rows,
    "column_count": args.columns,
    "complexity": args.complexity,
    "aspect_ratio": args.aspect_ratio,
    "offset": args.offset,
    "step_direction": args.step_direction,
    "step_alternate": args.step_alternate,
    "rotation": args.rotation,
  }
  if args.group_size is not None:
    values["group_size"] = args.group_size

  params = TileParameters.model_validate(values)
  return add_holes(params, [Region.from_string(hole) for hole in args.holes])


def print_summary(params: TileParameters, rows: Sequence[TileRow], magnification: float) -> None:
  print("📋 Parameters:")
  for name, value in parameter_table(params).items():
    print(f"   {name}: {value}")

  print("\n🎨 Legend:")
  for colour in legend(params):
    favourite = " (favourite)" if colour.favourite else ""
    print(f"   {colour.code}  {colour.name}  weight {colour.weight}{favourite}")

  print("\n📊 Tiles needed:")
  for colour, count in tile_counts(params, rows).items():
    print(f"   {colour}: {count}")

  geometry = layout(1, magnification, params, rows)
  width, height = geometry.canvas_size
  print(f"\n📏 Canvas: {width:g} x {height:g} px at {magnification:g}%")

  map_geometry = layout(map_basis_factor(params.aspect_ratio), magnification, params, rows)
  cell_width, cell_height = map_geometry.cell_size
  print(f"   Map cell: {cell_width:g} x {cell_height:g} px")

  print("\n🗺️  Map:")
  print(pattern_map(params, rows))


def main(argv: Sequence[str] | None = None) -> int:
  args = build_parser().parse_args(argv)

  try:
    settings = load_settings()
  except ValueError as e:
    print(f"❌ Error: {e}")
    return 1

  logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
  )

  magnification = settings.magnification
  if args.magnification is not None:
    magnification = clamp_magnification(args.magnification)

  try:
    params = params_from_args(args)
    if params.group_size > len(params.enabled_colours):
      raise ValueError(
        f"Group size {params.group_size} exceeds the {len(params.enabled_colours)} enabled colours"
      )
    rows = generate_rows(params)
  except (ValueError, BacksplashError) as e:
    print(f"❌ Error: {e}")
    return 1

  logger.info("Generated %d rows for seed %r", len(rows), params.seed)

  if args.format == "json":
    print(json.dumps([row.to_dict() for row in rows], indent=2))
  else:
    print_summary(params, rows, magnification)

  return 0


if __name__ == "__main__":
  exit(main())
