import math

# Window
WIDTH, HEIGHT = 800, 600
FPS = 60

# Entities (pixels, pixels/sec)
PADDLE_WIDTH = 20.0
PADDLE_HEIGHT = 100.0
BALL_SIZE = 15.0
PADDLE_SPEED = 500.0
BALL_SPEED = 400.0
WALL_THICKNESS = 10.0

# Paddles spawn this far inside the side edges
PADDLE_INSET = 30.0

# Paddle hits
SPEED_INCREASE = 1.05
MAX_BOUNCE_ANGLE = math.pi / 4

# Opening serve, normalized at startup
INITIAL_DIRECTION = (0.7, 0.3)

# Colors
BG_COLOR = (0, 0, 0)
PADDLE_COLOR = (255, 255, 255)
BALL_COLOR = (255, 255, 255)
WALL_COLOR = (77, 77, 77)
TEXT_COLOR = (255, 255, 255)

# HUD
SCORE_FONT_SIZE = 60
SCORE_OFFSET_X = 50
SCORE_OFFSET_Y = 60
DASH_COUNT = 20
DASH_WIDTH = 2
