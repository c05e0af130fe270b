from __future__ import annotations

import math

TAU = 2.0 * math.pi
HALF_PI = math.pi / 2.0
DEG2RAD = math.pi / 180.0
RAD2DEG = 180.0 / math.pi

TILE_SIZE = 256

# zoom range z0..z24
MIN_Z = 0.0
MAX_Z = 24.0
MIN_K = TILE_SIZE * 2.0 ** MIN_Z / TAU
MAX_K = TILE_SIZE * 2.0 ** MAX_Z / TAU
DEFAULT_K = TILE_SIZE * 2.0 / TAU  # z1

# latitude where mercator y reaches +-pi (~85.0511287798 degrees)
MAX_PHI = 2.0 * math.atan(math.exp(math.pi)) - HALF_PI
MIN_PHI = -MAX_PHI

EQUATORIAL_RADIUS = 6378137.0
POLAR_RADIUS = 6356752.314245179

# top, right, bottom, left (pixels)
NUDGE_PADDING = (80.0, 20.0, 50.0, 20.0)
NUDGE_STEP = 10.0
