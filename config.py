"""
Configuration for the gesture menu and the falling-word game.
All adjustable parameters live here.
"""

# ===============================
# SENSOR
# ===============================

# Camera indices probed in order; the first one that opens is used
CAMERA_INDICES = (0, 1, 2)

# Color stream format (640x480 @ 30fps)
COLOR_WIDTH = 640
COLOR_HEIGHT = 480
COLOR_FPS = 30

# Pose tracker confidence
POSE_DETECTION_CONFIDENCE = 0.5
POSE_TRACKING_CONFIDENCE = 0.5

# Minimum left hand visibility for a skeleton to count as "tracked"
MIN_JOINT_VISIBILITY = 0.5

# ===============================
# WINDOW
# ===============================

MENU_WINDOW_NAME = 'Gesture Menu'
GAME_WINDOW_NAME = 'Word Catcher'

# ===============================
# MENU
# ===============================

MENU_ITEMS = ("Start Game", "Options", "Exit")

# Distances in normalized window units
MENU_HOVER_RADIUS = 0.2
MENU_ACTIVATE_RADIUS = 0.05

# Button size and vertical centers (normalized)
MENU_BUTTON_SIZE = (0.3, 0.12)
MENU_BUTTON_CENTERS = ((0.5, 0.3), (0.5, 0.5), (0.5, 0.7))

# Fire the activation every frame while the hand stays inside the
# activate radius instead of once per dwell
REFIRE_WHILE_DWELLING = False

# ===============================
# WORD GAME
# ===============================

DESCENT_INTERVAL_MS = 50
SPAWN_INTERVAL_MS = 1000

# Pixels a word drops per descent tick
DESCENT_STEP = 5

# Words spawn at x in [0, width - SPAWN_MARGIN)
SPAWN_MARGIN = 100

# Half side of the hand catch box in pixels
CATCH_BOX = 50

SCORE_INCREMENT = 10

WORD_FONT_SIZE = 24

# Word -> meanings. The first meaning is the correct one, the rest are decoys.
WORD_MEANINGS = {
    "Apple": ["사과", "바나나", "오렌지"],
    "Banana": ["바나나", "사과", "포도"],
    "Cherry": ["체리", "수박", "레몬"],
    "Date": ["대추야자", "복숭아", "배"],
    "Grape": ["포도", "딸기", "블루베리"],
}

# Sound effects (optional, game runs silently if missing)
SOUND_DIR = 'assets/sounds'
SOUND_FILES = {
    'catch': 'catch.mp3',
    'correct': 'correct.mp3',
    'wrong': 'wrong.mp3',
}

# ===============================
# DIALOGS
# ===============================

# Seconds a message stays on screen unless dismissed
DIALOG_DURATION = 1.5

# ===============================
# LOOK
# ===============================

# (B, G, R)
UI_COLORS = {
    "background": (25, 25, 25),
    "button": (70, 70, 70),
    "button_border": (200, 200, 200),
    "highlight": (0, 255, 255),
    "text_white": (255, 255, 255),
    "text_dark": (20, 20, 20),
    "panel": (40, 40, 40),
    "dialog": (60, 60, 60),
    "cursor": (0, 200, 255),
    "score": (255, 255, 255),
}

# Fonts able to draw Hangul, first existing one wins
FONT_CANDIDATES = (
    # Windows
    "C:/Windows/Fonts/malgun.ttf",
    "C:/Windows/Fonts/gulim.ttc",
    # macOS
    "/System/Library/Fonts/AppleSDGothicNeo.ttc",
    "/Library/Fonts/Arial Unicode.ttf",
    # Linux
    "/usr/share/fonts/truetype/noto/NotoSansCJK-Regular.ttc",
    "/usr/share/fonts/opentype/noto/NotoSansCJK-Regular.ttc",
    "/usr/share/fonts/truetype/nanum/NanumGothic.ttf",
    "/usr/share/fonts/truetype/droid/DroidSansFallbackFull.ttf",
)
