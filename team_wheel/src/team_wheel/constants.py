import math

TAU = 2 * math.pi

# Drawing convention: angle 0 is 3 o'clock and positive angles sweep clockwise
# on screen (canvas y axis points down), so a pointer at 12 o'clock sits at -pi/2.
POINTER_ANGLE_TOP = -math.pi / 2

SWEEP_CLOCKWISE = "clockwise"
SWEEP_COUNTERCLOCKWISE = "counterclockwise"

# Full turns added after a stop request before the wheel lands on its target.
DEFAULT_EXTRA_SPINS = 3
