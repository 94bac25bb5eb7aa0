"""
Global constants shared across modules.
"""
import logging

# Window ---------------------------------------------------------------
WIDTH, HEIGHT = 900, 640
FPS           = 60
TITLE         = "Lights Out"

# Fonts / sizes --------------------------------------------------------
import pygame  # only to query default font
FONT_NAME  = pygame.font.get_default_font()

# Logging --------------------------------------------------------------
LOG_LEVEL  = logging.INFO
LOG_FORMAT = "[%(name)s] %(levelname)s: %(message)s"
