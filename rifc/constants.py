"""
RIFC Constants
Numeric defaults and reference key material used throughout the cipher
"""

import numpy as np

# Full turn, used for branch angle offsets
TWO_PI = 2.0 * np.pi

# Reference alphabet (hexadecimal, supports bases up to 16)
DEFAULT_SYMBOLS = "0123456789ABCDEF"

# Smallest usable branch count
MIN_BASE = 2

# Tolerance for the general root search during decode
DEFAULT_EPSILON = 0.0001

# Reference secret key (Julia constant) and origin
DEFAULT_KEY = complex(-0.75, 0.09)
DEFAULT_ORIGIN = complex(0.0, 0.0)

# Digits printed per coordinate component in trace lines
TRACE_PRECISION = 15

# Reference demonstration sequence (256 bits, base 2)
DEMO_BITS = (
    "11011111011111110111111111111111"
    "11101111101110111111111111111111"
    "11111101111111111111110111111111"
    "11111111111101111111111111111111"
    "11111111111111111111111111111111"
    "11111111111111011111111111111111"
    "11111111111111111111101111111111"
    "11111111111111111111111111111100"
)

# Prefix of DEMO_BITS round-tripped by default; decode error roughly doubles
# per base-2 step, so the full sequence exceeds double precision
DEMO_DEPTH = 34
