"""
Backsplash tile pattern engine.

Generates a seed-reproducible mosaic of coloured tiles and computes the pixel
geometry needed to draw it, including excluded hole regions and the ragged
edges produced by offset stepping.
"""

__version__ = "0.1.0"
