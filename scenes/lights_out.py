# scenes/lights_out.py
from __future__ import annotations
import logging
import pygame

from boards.light_board import LightBoard, fit_cell_size
from config             import WIDTH, HEIGHT
from constants          import (MENU_BG_COLOR, TITLE_COLOR, HUD_COLOR, WIN_COLOR,
                                BUTTON_ALT_BG_COLOR, CELL_GAP, GRID_TOP,
                                GRID_BOTTOM_MARGIN, MIN_LIGHT_SIZE,
                                DEFAULT_ROWS, DEFAULT_COLS,
                                DEFAULT_START_LIT, DEFAULT_SCRAMBLE)
from core.lights_out    import ConfigError, GameConfig, LightsOutGame, lit_count
from ui.widgets         import Button

log = logging.getLogger(__name__)

GAME_NAME = "Lights Out"

# ───── board presets (sizes, not difficulty levels) ─────────────────
PRESETS = {
    "Classic 5x5":  {"rows": 5, "cols": 5, "start_lit_probability": 0.5},
    "Small 3x3":    {"rows": 3, "cols": 3, "start_lit_probability": 0.5},
    "Large 7x7":    {"rows": 7, "cols": 7, "start_lit_probability": 0.5},
    "Solvable 5x5": {"rows": 5, "cols": 5, "start_lit_probability": 0.5,
                     "solvable": True, "scramble": DEFAULT_SCRAMBLE},
}


class LightsOutScene:
    def __init__(self, screen: pygame.Surface,
                 rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS,
                 start_lit_probability: float = DEFAULT_START_LIT,
                 preset_name: str = "Classic 5x5",
                 solvable: bool = False, scramble: int = DEFAULT_SCRAMBLE,
                 rng=None):
        self.screen = screen
        self.preset = preset_name
        # bad sizes / probabilities raise ConfigError here, as do boards
        # too big for the window (below)
        self.game = LightsOutGame(GameConfig(rows, cols, start_lit_probability),
                                  rng=rng, solvable=solvable, scramble=scramble)

        # centre the grid in the play area
        area = (WIDTH - 40, HEIGHT - GRID_TOP - GRID_BOTTOM_MARGIN)
        cs = fit_cell_size(rows, cols, area, gap=CELL_GAP)
        if cs - CELL_GAP < MIN_LIGHT_SIZE:
            raise ConfigError(f"{rows}x{cols} board does not fit the window")
        self.board = LightBoard(rows, cols, cs, (0, 0), CELL_GAP)
        gw, gh = self.board.size
        self.board.origin = ((WIDTH - gw) // 2, GRID_TOP + (area[1] - gh) // 2)

        self.title_font = pygame.font.Font(None, 48)
        self.hud_font   = pygame.font.Font(None, 32)
        self.hover: tuple[int, int] | None = None

        mid, y = WIDTH // 2, HEIGHT - 70
        self.restart_btn = Button(pygame.Rect(mid - 170, y, 150, 40), "Restart")
        self.back_btn    = Button(pygame.Rect(mid + 20, y, 180, 40), "Back to Menu",
                                  bg=BUTTON_ALT_BG_COLOR)

    @property
    def won(self) -> bool:
        return self.game.won

    def restart(self) -> None:
        self.game.new_board()
        self.hover = None

    # ───────── event handling ──────────────────────────────────────
    def handle_event(self, ev: pygame.event.Event):
        if ev.type == pygame.KEYDOWN:
            if ev.key == pygame.K_ESCAPE:
                return "menu"
            if ev.key == pygame.K_r:
                self.restart()
            return None

        if ev.type == pygame.MOUSEMOTION:
            self.hover = None if self.won else self.board.pixel_to_cell(*ev.pos)
            return None

        if ev.type != pygame.MOUSEBUTTONDOWN or ev.button != 1:
            return None

        if self.won:
            if self.restart_btn.hovered(ev.pos):
                self.restart()
            elif self.back_btn.hovered(ev.pos):
                return "menu"
            return None

        cell = self.board.pixel_to_cell(*ev.pos)
        if cell:
            self.game.flip(*cell)
        return None

    # ───────── update & draw ───────────────────────────────────────
    def update(self, dt: float) -> None:
        pass

    def draw(self) -> None:
        self.screen.fill(MENU_BG_COLOR)

        title = self.title_font.render(GAME_NAME, True, TITLE_COLOR)
        self.screen.blit(title, title.get_rect(midtop=(WIDTH // 2, 10)))
        p_lbl = self.hud_font.render(self.preset, True, HUD_COLOR)
        self.screen.blit(p_lbl, p_lbl.get_rect(topright=(WIDTH - 10, 15)))

        # a solved board is not drawn, only the message
        if self.won:
            msg = self.title_font.render("You Won!", True, WIN_COLOR)
            self.screen.blit(msg, msg.get_rect(center=(WIDTH // 2, HEIGHT // 2)))
            self.restart_btn.draw(self.screen)
            self.back_btn.draw(self.screen)
            return

        self.board.draw(self.screen, self.game.board, self.hover)
        lit = lit_count(self.game.board)
        l_lbl = self.hud_font.render(f"Lights on: {lit}", True, HUD_COLOR)
        self.screen.blit(l_lbl, (10, HEIGHT - 40))
        h_lbl = self.hud_font.render("R: new board   Esc: menu", True, HUD_COLOR)
        self.screen.blit(h_lbl, h_lbl.get_rect(bottomright=(WIDTH - 10, HEIGHT - 10)))


# ───── register with GameRegistry ──────────────────────────────────
def register(registry):
    def launch(scr: pygame.Surface, **kw):
        return LightsOutScene(scr, **kw)
    presets = {n: {**v, "preset_name": n} for n, v in PRESETS.items()}
    registry.register(GAME_NAME, launcher=launch, presets=presets)
