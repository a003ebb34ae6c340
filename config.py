FRAME_SLEEP = 0.05  # seconds between animation frames

DROPLET_MIN_LENGTH = 2
DROPLET_MAX_LENGTH = 20

DROPLET_MIN_SPEED = 0.2  # rows per tick
DROPLET_MAX_SPEED = 1.0

BASE_COLOR = (170, 255, 170)

# Half-width katakana 'ｦ' up to (not including) 'ﾝ'
GLYPH_START = 0xFF66
GLYPH_END = 0xFF9D

QUIT_KEY = "q"

BACKGROUND_COLOR = (0, 0, 0)
