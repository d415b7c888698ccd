"""
constants.py: Centralized configuration for game, physics and display settings.
"""

# -------- Screen Config (character cells) --------
SCREEN_WIDTH = 80
SCREEN_HEIGHT = 50
WINDOW_TITLE = "Flappy Bird"
CELL_SIZE = 12                  # Pixels per character cell in the pygame window

# Time synchronization
FRAME_DURATION = 75.0           # Milliseconds between physics ticks
RENDER_FPS = 60                 # Render frames per second (faster than physics)

# -------- Player Config --------
PLAYER_START_X = 5
PLAYER_START_Y = 25

# -------- Physics Config (cells / tick) --------
GRAVITY_STEP = 0.2              # Velocity added per tick while below the cap
MAX_FALL_VELOCITY = 2.0         # Passive accumulation stops at this velocity
FLAP_VELOCITY = -2.0            # Absolute velocity assigned by a flap
MAX_FLAP_VELOCITY = 5.0         # Above this the player falls too fast to flap

# -------- Obstacle Config --------
GAP_Y_RANGE = (10, 40)          # Gap center, half-open range
GAP_SIZE_RANGE = (10, 20)       # Gap height, half-open range
INITIAL_OBSTACLES = 3
OBSTACLE_SPACING = SCREEN_WIDTH // 2
OBSTACLE_INTERVAL = 1.5         # Seconds between generated obstacles
CULL_MARGIN = 20                # Cells behind the player before an obstacle is dropped

# -------- Colors (RGB) --------
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
YELLOW = (255, 255, 0)
RED = (255, 0, 0)
LIGHT_BLUE = (173, 216, 230)

# -------- Glyphs --------
PLAYER_GLYPH = "@"
WALL_GLYPH = "|"
