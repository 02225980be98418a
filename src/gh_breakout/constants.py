"""Global constants for the application."""

import math

# Canvas layout (pixels)
PADDING = 15  # Padding around the canvas
NUM_DAYS = 7  # Number of days in a week (Sun-Sat), one brick row per day

# Bricks
BRICK_SIZE = 12
BRICK_GAP = 3
BRICK_RADIUS = 3  # Corner radius of a brick

# Paddle
PADDLE_WIDTH = 75
PADDLE_HEIGHT = 10
PADDLE_RADIUS = 5
PADDLE_BRICK_GAP = 100  # Gap between the last brick row and the paddle

# Ball (speeds in pixels per frame)
BALL_RADIUS = 8
BALL_SPEED = 10
BALL_LAUNCH_ANGLE = -math.pi / 4  # Up and to the right
BALL_START_OFFSET = 30  # Distance of the ball's start above the canvas bottom

# Simulation / playback
CAPTURE_STRIDE = 1  # Record a snapshot every Nth frame
SECONDS_PER_FRAME = 1 / 30  # Fixed playback rate (30 FPS)
MAX_FRAMES = 30000  # Hard cap on simulated frames

# Output number formatting
VALUE_PRECISION = 1  # Decimals for ball/paddle positions
KEY_TIME_PRECISION = 4  # Decimals for normalized key times

# Colors
BALL_COLOR = "#1F6FEB"
PADDLE_COLOR = "#1F6FEB"

# GitHub contribution graph green palette (dark theme), darkest first
GITHUB_GREENS_DARK = (
    "#151B23",
    "#033A16",
    "#196C2E",
    "#2EA043",
    "#56D364",
)

# The GraphQL API only returns light theme colors
LIGHT_TO_DARK_COLOR_MAP = {
    "#ebedf0": "#151B23",
    "#9be9a8": "#033A16",
    "#40c463": "#196C2E",
    "#30a14e": "#2EA043",
    "#216e39": "#56D364",
}
