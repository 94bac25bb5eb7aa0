"""
core/lights_out.py

Board engine for Lights Out.

A board is a list of rows of booleans (True = lit).  Every move returns a
*new* board so the scene can tell that something changed; nothing in here
touches pygame.

    .  .  .
    O  O  .     ->  [[False, False, False],
    .  .  .          [True,  True,  False],
                     [False, False, False]]
"""
from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from constants import DEFAULT_ROWS, DEFAULT_COLS, DEFAULT_START_LIT, DEFAULT_SCRAMBLE

log = logging.getLogger(__name__)

Board = List[List[bool]]

# centre + up, down, left, right
_FLIP_OFFSETS = ((0, 0), (-1, 0), (1, 0), (0, -1), (0, 1))


class ConfigError(ValueError):
    """Raised for a board configuration that can't be played."""


@dataclass(frozen=True)
class GameConfig:
    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    start_lit_probability: float = DEFAULT_START_LIT

    def __post_init__(self):
        for name in ("rows", "cols"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{name} must be an integer, got {value!r}")
            if value < 1:
                raise ConfigError(f"{name} must be at least 1, got {value}")
        p = self.start_lit_probability
        if isinstance(p, bool) or not isinstance(p, (int, float)) or not 0 <= p <= 1:
            raise ConfigError(
                f"start_lit_probability must be within [0, 1], got {p!r}")


class GameState(Enum):
    PLAYING = "playing"
    WON     = "won"


def check_scramble(scramble: int) -> None:
    if isinstance(scramble, bool) or not isinstance(scramble, int) or scramble < 0:
        raise ConfigError(f"scramble must be a non-negative integer, got {scramble!r}")


# ───────────────────────────── board ops ─────────────────────────────
def create_board(config: GameConfig, rng: random.Random | None = None) -> Board:
    """Fill a rows × cols board, each cell lit with the configured chance."""
    draw = (rng or random).random
    board = [[draw() < config.start_lit_probability for _ in range(config.cols)]
             for _ in range(config.rows)]
    log.debug("Created %dx%d board with %d lit",
              config.rows, config.cols, lit_count(board))
    return board


def create_solvable_board(config: GameConfig, scramble: int = DEFAULT_SCRAMBLE,
                          rng: random.Random | None = None) -> Board:
    """
    Start from the solved board and apply *scramble* random flips.

    Every flip is its own inverse, so replaying the same clicks turns the
    board off again.  The configured start-lit probability is not used.
    """
    check_scramble(scramble)
    rng = rng or random
    board = [[False] * config.cols for _ in range(config.rows)]
    for _ in range(scramble):
        board = flip(board, rng.randrange(config.rows), rng.randrange(config.cols))
    log.debug("Scrambled %dx%d board with %d flips", config.rows, config.cols, scramble)
    return board


def in_bounds(board: Board, row: int, col: int) -> bool:
    return 0 <= row < len(board) and 0 <= col < len(board[0])


def flip(board: Board, row: int, col: int) -> Board:
    """
    Toggle (row, col) and its orthogonal neighbours on a copy of *board*.

    Coordinates that fall off the grid are skipped one by one; the rest
    still flip.
    """
    new = [list(r) for r in board]
    for dr, dc in _FLIP_OFFSETS:
        r, c = row + dr, col + dc
        if in_bounds(new, r, c):
            new[r][c] = not new[r][c]
    return new


def lit_count(board: Board) -> int:
    return sum(cell for row in board for cell in row)


def has_won(board: Board) -> bool:
    return all(not cell for row in board for cell in row)


# ───────────────────────────── session ───────────────────────────────
class LightsOutGame:
    """
    One game session: the active board plus the PLAYING → WON machine.

    Once won, moves are refused until new_board() deals again.
    """

    def __init__(self, config: Optional[GameConfig] = None,
                 rng: random.Random | None = None,
                 solvable: bool = False, scramble: int = DEFAULT_SCRAMBLE):
        check_scramble(scramble)
        self.config   = config or GameConfig()
        self.solvable = solvable
        self.scramble = scramble
        self._rng     = rng
        self.board: Board = []
        self.new_board()

    @property
    def state(self) -> GameState:
        return GameState.WON if has_won(self.board) else GameState.PLAYING

    @property
    def won(self) -> bool:
        return self.state is GameState.WON

    def new_board(self) -> Board:
        if self.solvable:
            self.board = create_solvable_board(self.config, self.scramble, self._rng)
        else:
            self.board = create_board(self.config, self._rng)
        if self.won:
            log.info("Dealt a board that is already solved")
        return self.board

    def flip(self, row: int, col: int) -> bool:
        """Apply a move; returns False if it was refused."""
        if self.won:
            log.debug("Ignoring flip at (%d, %d): game already won", row, col)
            return False
        if not in_bounds(self.board, row, col):
            log.debug("Ignoring flip at (%d, %d): off the board", row, col)
            return False
        self.board = flip(self.board, row, col)
        if self.won:
            log.info("Board solved")
        return True
