# Color tolerances (Manhattan distance over RGBA, strict "<")
DISTINCT_TOLERANCE = 16
BODY_TOLERANCE = 8
VISOR_TOLERANCE = 8
BACKGROUND_TOLERANCE = 6

# Unclaimed pixels keep 1/DIM_DIVISOR of their RGB intensity
DIM_DIVISOR = 4

# Output
DEFAULT_OUTPUT_PATH = "output.png"
OUTPUT_EXTENSION = ".png"

# Overlap policy: only the origin pixel is checked for an existing claim
FULL_FOOTPRINT_CHECK = False
