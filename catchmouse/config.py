from pathlib import Path

WIDTH = 600
HEIGHT = 600
TITLE = "Catch the Mouse"
FPS = 120

# Score bar across the top, the board takes the rest of the window.
MENU_HEIGHT = 50
MENU_BORDER = 1

MENU_COLOR = (244, 185, 184)  # F4B9B8
MENU_BORDER_COLOR = (136, 123, 176)  # 887BB0
BOARD_COLOR = (255, 244, 189)  # FFF4BD
SCORE_COLOR = (52, 25, 72)  # 341948
BANNER_COLOR = (52, 25, 72, 190)
BANNER_TEXT_COLOR = (255, 244, 189)

FONT_NAME = "consolas"
FONT_SIZE = 40
BANNER_FONT_SIZE = 28

MOUSE_WIDTH = 50.0
MOUSE_HEIGHT = 50.0

# Milliseconds per move, and the near-instant move used after a catch.
ANIMATION_DURATION = 1000.0
TELEPORT_DURATION = 1.0

SESSION_LENGTH = 30000.0  # ms
POLL_INTERVAL = 0.05  # seconds

ASSETS_PATH = Path(__file__).with_name("assets")
MOUSE_SPRITE_PATH = ASSETS_PATH / "mouse.png"
