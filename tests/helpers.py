from __future__ import annotations

from typing import Sequence

import pygame


def click(pos, button: int = 1) -> pygame.event.Event:
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=button)


def motion(pos) -> pygame.event.Event:
    return pygame.event.Event(pygame.MOUSEMOTION, pos=pos, rel=(0, 0), buttons=(0, 0, 0))


def key(k: int) -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYDOWN, key=k, mod=0, unicode="")


def board_from(rows: Sequence[str]) -> list[list[bool]]:
    """['O..', '.O.'] -> [[True, False, False], [False, True, False]]"""
    return [[ch == "O" for ch in row] for row in rows]
