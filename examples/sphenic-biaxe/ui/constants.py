"""Layout constants and color definitions."""

# Timing
FPS = 60

# Layout dimensions
SCREEN_W = 900
SCREEN_H = 560
STATUS_H = 36
PAD = 24

# Pointer travel (pixels) before a press becomes a drag
DRAG_THRESHOLD = 6

# Size limits for +/- resizing
RESIZE_STEP = 1

# Colors
BG_DARK = (20, 20, 30)
BG_LIGHT = (235, 235, 240)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
OUTLINE_DARK = (10, 10, 15)
OUTLINE_LIGHT = (60, 60, 70)
HOVER_RING = (255, 255, 255)
LABEL_DARK = (20, 20, 20)
WIN_COLOR = (255, 215, 80)

OUTLINE_W = 2
