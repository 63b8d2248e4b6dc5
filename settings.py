WIDTH = 1600
HEIGHT = 900
FPS = 144
FPS_SAMPLES = 60

BACKGROUND_COLOR = (0, 0, 0)
HUD_TEXT_COLOR = (255, 255, 255)

# Base movement (px/s) and rotation (deg/s) speed
SPEED = 100

# Long enough to leave the canvas from any point on it
MAX_RAY_LENGTH = WIDTH * HEIGHT

# How close a wall angle must be to a stop angle to halt movement
ANGLE_TOLERANCE = 1e-6

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
