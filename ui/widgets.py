"""
Reusable UI widgets (buttons & dropdowns).
"""
from __future__ import annotations
import pygame
from config    import FONT_NAME
from constants import BUTTON_BG_COLOR, BUTTON_FG_COLOR

# --------------------------------------------------------------------
class Button:
    def __init__(self, rect: pygame.Rect, text: str,
                 bg=BUTTON_BG_COLOR, fg=BUTTON_FG_COLOR, font_size: int = 20):
        self.rect = rect
        self.text = text

        font = pygame.font.Font(FONT_NAME, font_size)
        self.surface = pygame.Surface(rect.size, pygame.SRCALPHA)
        self.surface.fill(bg)
        lbl = font.render(text, True, fg)
        self.surface.blit(lbl, lbl.get_rect(center=self.surface.get_rect().center))

    def draw(self, screen):  screen.blit(self.surface, self.rect.topleft)
    def hovered(self, pos):  return self.rect.collidepoint(pos)

    def clicked(self, event) -> bool:
        return (event.type == pygame.MOUSEBUTTONDOWN and event.button == 1
                and self.hovered(event.pos))

# --------------------------------------------------------------------
class Dropdown:
    """
    A simple dropdown: click to open/close, click an option to select it.

    Options open *below* the header; handle_event() returns True when it
    consumed the click.
    """
    def __init__(
        self,
        rect: pygame.Rect,
        options: list[str],
        font: pygame.font.Font,
        bg=(60,60,60),
        fg=(220,220,220),
        highlight=(100,100,100),
    ):
        self.rect      = rect
        self.options   = options
        self.font      = font
        self.bg        = bg
        self.fg        = fg
        self.hl        = highlight
        self.open      = False
        self.selected  = options[0] if options else ""
        # pre-render labels
        self._labels = [self.font.render(opt, True, fg) for opt in options]

    def option_rect(self, idx: int) -> pygame.Rect:
        return pygame.Rect(self.rect.x,
                           self.rect.y + (idx+1)*self.rect.height,
                           self.rect.width,
                           self.rect.height)

    def handle_event(self, event) -> bool:
        if not self.options:
            return False
        if event.type != pygame.MOUSEBUTTONDOWN or event.button != 1:
            return False
        if self.open:
            for idx, opt in enumerate(self.options):
                if self.option_rect(idx).collidepoint(event.pos):
                    self.selected = opt
                    self.open = False
                    return True
            # clicking the header again just folds the list
            self.open = False
            return self.rect.collidepoint(event.pos)
        if self.rect.collidepoint(event.pos):
            self.open = True
            return True
        return False

    def draw(self, screen):
        # draw current
        pygame.draw.rect(screen, self.bg, self.rect)
        lbl = self.font.render(self.selected, True, self.fg)
        screen.blit(lbl, lbl.get_rect(center=self.rect.center))
        # draw arrow
        pygame.draw.polygon(
            screen,
            self.fg,
            [
                (self.rect.right - 12, self.rect.centery - 4),
                (self.rect.right - 4, self.rect.centery - 4),
                (self.rect.right - 8, self.rect.centery + 4),
            ],
        )
        if self.open:
            for idx, label in enumerate(self._labels):
                opt_rect = self.option_rect(idx)
                bg_color = self.hl if self.options[idx] == self.selected else self.bg
                pygame.draw.rect(screen, bg_color, opt_rect)
                screen.blit(label, label.get_rect(center=opt_rect.center))
