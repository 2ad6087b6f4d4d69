"""
Limits and shape tables for curve evaluation.
"""

import numpy as np

# Combinatorics limits
UINT64_MAX = 2**64 - 1  # Coefficient tables are stored as uint64
MAX_ORDER = 21  # Highest curve order accepted by the evaluators

# Shapes generated by nbez.fixed
FIXED_ORDERS = (2, 3, 4, 5, 6)
FIXED_DIMENSIONS = (2, 3, 4)
AXES = ('x', 'y', 'z', 'w')  # Named axes for 2D..4D points

# Numerics
DEFAULT_DTYPE = np.float64
ATOL = 1e-9  # Absolute tolerance for float64 comparisons

# Plotting
DEFAULT_SAMPLES = 100
