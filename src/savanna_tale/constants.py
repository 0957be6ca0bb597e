"""Global constants for the application."""

# Animation settings
DEFAULT_FPS = 30  # Default frames per second for exported animations
TOTAL_DURATION = 20.0  # Seconds per story loop

# Logical canvas dimensions (all drawing happens in this space)
WIDTH = 960
HEIGHT = 540

# Story beats in seconds
WARNING_START = 6.0  # Lion starts to bristle
POUNCE_START = 10.0  # Lion lunges, dust starts rising
AFTERMATH_START = 14.0  # Monkey starts fading out

# Stage window widths in seconds
PLAY_DURATION = 6.0
ANGER_RAMP = 8.0  # Anger keeps building through the pounce
WARNING_DURATION = 4.0
POUNCE_DURATION = 4.0
AFTERMATH_DURATION = 6.0
DUST_DURATION = 6.0

# Colors
BACKGROUND_COLOR = (255, 255, 255)
SKY_GRADIENT_STOPS = (
    (0.0, "#f8e4b9"),
    (0.65, "#f7c47a"),
    (1.0, "#f29c54"),
)
SUN_COLOR = "#ffe7a9"
GROUND_COLOR = "#e3b35d"
GROUND_WAVE_COLOR = (205, 142, 54, 153)  # 60% alpha
DUST_COLOR = (219, 170, 92)

LION_BODY_COLOR = "#c67828"
LION_HEAD_COLOR = "#d8872f"
LION_MANE_COLOR = "#8c3f1a"
LION_FACE_COLOR = "#e3a651"
LION_FEATURE_COLOR = "#3a1f06"
LION_MUZZLE_COLOR = "#f8d8a2"
LION_FANG_COLOR = "#fff7e1"
LION_TAIL_COLOR = "#d08938"
LION_LEG_COLOR = "#bf7127"

MONKEY_BODY_COLOR = "#8d5a2b"
MONKEY_HEAD_COLOR = "#6f4520"
MONKEY_FACE_COLOR = "#ba8654"
MONKEY_FEATURE_COLOR = "#3f2711"

# Caption overlay
CAPTION_TEXT_COLOR = (255, 255, 255)
CAPTION_BAND_COLOR = (58, 31, 6, 150)  # Translucent dark brown
