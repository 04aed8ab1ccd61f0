"""Layout constants and color definitions."""

# Timing
FPS = 60
TPS = 1000  # one tick per millisecond

# Layout dimensions
DIAL_W = 360
STATUS_H = 36
SIDEBAR_W = 180

SCREEN_W = DIAL_W + SIDEBAR_W
DIAL_H = DIAL_W + 56  # measure() adds the car icon size below the ring
SCREEN_H = DIAL_H + STATUS_H

# Dial style handed to Configuration.from_style
DIAL_STYLE = {
    "car_icon_size": 56,
    "car_icon_bg_radius": 24,
    "center_point_radius": 5,
    "progress_bar_radius": 130,
    "progress_bar_width": 8,
    "arrow_distance": 64,
}

# Progress keys
PROGRESS_STEP = 0.05

# Colors
BG_COLOR = (20, 20, 30)
SIDEBAR_BG = (25, 25, 38)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
LABEL_COLOR = (180, 180, 200)
CAR_COLOR = (250, 250, 255)
ARROW_COLOR = (60, 220, 80)
SECTOR_COLOR = (59, 130, 246)

# State name -> label color
STATE_COLORS: dict[str, tuple[int, int, int]] = {
    "SearchState": (0, 220, 220),
    "AtFrontState": (60, 220, 80),
    "NearbyState": (255, 160, 40),
}
