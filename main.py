"""
main.py

Entry point.  Builds registry via auto-discovery, launches menu, and
runs a generic loop that swaps into any Scene returned by registry.launch_game.
"""

import logging
import sys
import pygame

from config              import WIDTH, HEIGHT, FPS, TITLE, LOG_LEVEL, LOG_FORMAT
from core.game_registry  import GameRegistry
from scenes.loader       import register_all
from ui.menu             import MenuUI

log = logging.getLogger(__name__)


def build_registry() -> GameRegistry:
    reg = GameRegistry()
    register_all(reg)
    return reg


def main() -> None:
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    pygame.init()
    pygame.display.set_caption(TITLE)
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    clock  = pygame.time.Clock()

    registry = build_registry()
    log.info("Games available: %s", registry.all_games())

    menu    = MenuUI(screen, registry)
    current = menu

    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0

        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
                break

            result = current.handle_event(ev)

            # Menu PLAY
            if current is menu and isinstance(result, tuple):
                cmd, payload = result
                if cmd == "play":
                    name, params = payload
                    scene = registry.launch_game(name, screen, **params)
                    if scene:
                        current = scene
                continue

            # Game scene → back to menu
            if current is not menu and result == "menu":
                current = menu
                continue

        current.update(dt)
        current.draw()
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
