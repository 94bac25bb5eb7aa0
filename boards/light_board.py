"""
LightBoard – geometry & drawing for a Lights Out grid.

The board does *no* game rules; it only:
    1. Converts between (row, col) <‑‑> pixel coordinates.
    2. Draws a board (list of rows of booleans) as lit / unlit squares.

String keys ("row-col") are offered for widgets that want an id per cell;
the engine itself only deals in integer pairs.
"""
from __future__ import annotations
from typing import Tuple, List
import pygame

from constants import (GRID_BG_COLOR, GRID_BORDER_COLOR, LIGHT_ON_COLOR,
                       LIGHT_OFF_COLOR, LIGHT_HOVER_COLOR, MAX_CELL_SIZE)


def coord_key(row: int, col: int) -> str:
    return f"{row}-{col}"


def parse_coord(key: str) -> Tuple[int, int]:
    """'2-3' -> (2, 3).  Raises ValueError for anything else."""
    parts = key.split("-")
    if len(parts) != 2 or not all(p.isdigit() for p in parts):
        raise ValueError(f"Bad cell key: {key!r}")
    return int(parts[0]), int(parts[1])


def fit_cell_size(rows: int, cols: int, area: Tuple[int, int],
                  gap: int = 0, max_size: int = MAX_CELL_SIZE) -> int:
    """Largest square cell (including its gap) that fits *area*."""
    w, h = area
    return max(1, min(max_size, (w + gap) // cols, (h + gap) // rows))


class LightBoard:
    def __init__(
        self,
        rows: int,
        cols: int,
        cell_size: int = 64,
        origin: Tuple[int, int] = (0, 0),
        gap: int = 0,
    ):
        self.rows      = rows
        self.cols      = cols
        self.cell_size = cell_size      # pitch: light + gap
        self.origin    = origin
        self.gap       = gap

    @property
    def size(self) -> Tuple[int, int]:
        return (self.cols * self.cell_size - self.gap,
                self.rows * self.cell_size - self.gap)

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(self.origin, self.size)

    # ───────────────────────────── geometry ──────────────────────────
    def cell_to_pixel(self, row: int, col: int) -> Tuple[int, int]:
        ox, oy = self.origin
        return ox + col * self.cell_size, oy + row * self.cell_size

    def cell_rect(self, row: int, col: int) -> pygame.Rect:
        side = self.cell_size - self.gap
        return pygame.Rect(self.cell_to_pixel(row, col), (side, side))

    def pixel_to_cell(self, x: int, y: int) -> Tuple[int, int] | None:
        ox, oy = self.origin
        if x < ox or y < oy:
            return None
        col, dx = divmod(x - ox, self.cell_size)
        row, dy = divmod(y - oy, self.cell_size)
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            return None
        # clicks in the gutter between lights don't count
        side = self.cell_size - self.gap
        if dx >= side or dy >= side:
            return None
        return row, col

    # ─────────────────────────── rendering ───────────────────────────
    def draw(self, target: pygame.Surface, board: List[List[bool]],
             hover: Tuple[int, int] | None = None) -> None:
        outer = self.rect.inflate(2 * self.gap, 2 * self.gap)
        pygame.draw.rect(target, GRID_BG_COLOR, outer)
        pygame.draw.rect(target, GRID_BORDER_COLOR, outer, 3)
        radius = max(2, (self.cell_size - self.gap) // 8)
        for r, row in enumerate(board):
            for c, lit in enumerate(row):
                rect = self.cell_rect(r, c)
                colour = LIGHT_ON_COLOR if lit else LIGHT_OFF_COLOR
                pygame.draw.rect(target, colour, rect, border_radius=radius)
                if hover == (r, c):
                    pygame.draw.rect(target, LIGHT_HOVER_COLOR, rect, 2,
                                     border_radius=radius)
