"""
Expose the public board classes.
"""
from .light_board import LightBoard, coord_key, parse_coord, fit_cell_size

__all__ = ["LightBoard", "coord_key", "parse_coord", "fit_cell_size"]
