"""Constants shared across steprange.

Default bound types, the floating-point tolerance used by membership tests,
and the signed widths of the fixed-size integer domains.
"""

from steprange.endpoint import BoundType

# Endpoints given as raw values are taken as closed on both sides
DEFAULT_LEFT_BOUND_TYPE = BoundType.CLOSED
DEFAULT_RIGHT_BOUND_TYPE = BoundType.CLOSED

# Largest distance from a whole number at which (value - first) / step
# still counts as a multiple of the step in floating domains
FLOAT_TOLERANCE = 1e-9
SINGLE_FLOAT_TOLERANCE = 1e-4

# Signed integer widths in bits
BYTE_BITS = 8
SHORT_BITS = 16
INTEGER_BITS = 32
LONG_BITS = 64
