"""
Values you can freely tinker with without touching the logic.
"""

# ── Board defaults ────────────────────────────────────────────────────
DEFAULT_ROWS           = 5
DEFAULT_COLS           = 5
DEFAULT_START_LIT      = 0.5               # chance a cell starts lit
DEFAULT_SCRAMBLE       = 15                # random flips for solvable boards

# ── Colours ───────────────────────────────────────────────────────────
MENU_BG_COLOR          = (40, 40, 48)      # overall background
GRID_BG_COLOR          = (20, 20, 24)      # shows through the cell gaps
GRID_BORDER_COLOR      = (90, 90, 90)

LIGHT_ON_COLOR         = (255, 214, 70)    # lit cell
LIGHT_OFF_COLOR        = (55, 60, 75)      # unlit cell
LIGHT_HOVER_COLOR      = (230, 230, 230)   # outline under the mouse

TITLE_COLOR            = (255, 255, 255)
HUD_COLOR              = (220, 220, 220)
WIN_COLOR              = (120, 230, 120)

BUTTON_FG_COLOR        = (240, 240, 240)
BUTTON_BG_COLOR        = (70, 120, 70)     # PLAY / Restart
BUTTON_ALT_BG_COLOR    = (90, 90, 120)     # Back to Menu

# ── Layout / sizes ────────────────────────────────────────────────────
MAX_CELL_SIZE          = 96
MIN_LIGHT_SIZE         = 8                 # smallest clickable light
CELL_GAP               = 6                 # px between lights
GRID_TOP               = 80                # below the title
GRID_BOTTOM_MARGIN     = 100               # room for HUD & buttons

TITLE_MARGIN_TOP       = 12
