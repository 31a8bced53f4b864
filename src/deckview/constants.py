WINDOW_WIDTH = 960
WINDOW_HEIGHT = 600
WINDOW_TITLE = "Deck Viewer"

# Card geometry as a share of the window; cards never grow past CARD_MAX_WIDTH.
CARD_ASPECT = 1.45          # height / width
CARD_MAX_WIDTH = 260
CARD_MIN_WIDTH = 80
CARD_GAP = 24
CARD_ROW_MAX_WIDTH_PCT = 0.90
CARD_ROW_MAX_HEIGHT_PCT = 0.62
CARD_TEXT_BAND = 58         # space under the image for title + subtitle

HEADER_HEIGHT = 64
HEADER_TOP_MARGIN = 16

ADVANCE_BUTTON_WIDTH = 140
ADVANCE_BUTTON_HEIGHT = 48
ADVANCE_BUTTON_MARGIN = 24

# arcade.key.RIGHT; kept numeric so input handling does not import arcade.
KEY_RIGHT = 65363
MOUSE_BUTTON_LEFT = 1
