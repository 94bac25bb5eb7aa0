"""
ui/menu.py

Main menu with:
 - Title banner
 - Game dropdown (every registered game)
 - Board preset dropdown (per-game)
 - PLAY button
"""

from __future__ import annotations
import pygame
from typing import Any

from config              import WIDTH, HEIGHT, FONT_NAME
from constants           import MENU_BG_COLOR, TITLE_COLOR, HUD_COLOR, TITLE_MARGIN_TOP
from ui.widgets          import Button, Dropdown
from core.game_registry  import GameRegistry

DROPDOWN_W, DROPDOWN_H = 220, 36


class MenuUI:
    def __init__(self, screen: pygame.Surface, registry: GameRegistry):
        self.screen   = screen
        self.registry = registry

        self.title_font = pygame.font.Font(FONT_NAME, 64)
        self.font       = pygame.font.Font(FONT_NAME, 20)

        mid, y = WIDTH // 2, HEIGHT // 2 - 60
        self.game_dd = Dropdown(
            pygame.Rect(mid - DROPDOWN_W - 10, y, DROPDOWN_W, DROPDOWN_H),
            registry.all_games(), self.font)
        self._preset_rect = pygame.Rect(mid + 10, y, DROPDOWN_W, DROPDOWN_H)
        self.preset_dd: Dropdown | None = None
        self.play_btn = Button(pygame.Rect(mid - 80, HEIGHT - 160, 160, 50), "PLAY",
                               font_size=28)
        self._rebuild_presets()

    # ───────────────────────────── helpers ───────────────────────────
    def _rebuild_presets(self) -> None:
        name = self.game_dd.selected
        presets = list(self.registry.presets(name)) if name else []
        self.preset_dd = Dropdown(self._preset_rect, presets, self.font) if presets else None

    def selection(self) -> tuple[str, dict] | None:
        """(game name, launcher kwargs) for the current choices."""
        name = self.game_dd.selected
        if not name:
            return None
        params: dict = {}
        if self.preset_dd:
            params = self.registry.presets(name).get(self.preset_dd.selected, {})
        return name, params

    # ───────────────────────────── events ────────────────────────────
    def handle_event(self, ev: pygame.event.Event) -> tuple[str, Any] | None:
        before   = self.game_dd.selected
        was_open = self.game_dd.open
        if self.game_dd.handle_event(ev):
            if self.game_dd.selected != before:
                self._rebuild_presets()
            return None
        # a click that folds the game list must not also open the presets
        if self.preset_dd and not was_open and self.preset_dd.handle_event(ev):
            return None

        pressed_enter = ev.type == pygame.KEYDOWN and ev.key == pygame.K_RETURN
        if pressed_enter or self.play_btn.clicked(ev):
            choice = self.selection()
            if choice:
                return ("play", choice)
        return None

    def update(self, dt: float) -> None:
        pass

    def draw(self) -> None:
        self.screen.fill(MENU_BG_COLOR)

        title = self.title_font.render("Lights Out", True, TITLE_COLOR)
        self.screen.blit(title, title.get_rect(midtop=(WIDTH // 2, TITLE_MARGIN_TOP + 60)))

        for text, rect in (("Game", self.game_dd.rect), ("Board", self._preset_rect)):
            lbl = self.font.render(text, True, HUD_COLOR)
            self.screen.blit(lbl, lbl.get_rect(bottomleft=(rect.x, rect.y - 6)))

        self.play_btn.draw(self.screen)
        # dropdowns last so open lists sit on top
        if self.preset_dd:
            self.preset_dd.draw(self.screen)
        self.game_dd.draw(self.screen)
