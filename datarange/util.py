"""Utility constants for datarange.

The nice-number ladder drives automatic stepsize selection.
The infinite-steps sentinel is what an unstepped range reports as its step count.
"""

import sys

# Multipliers of a power of ten, tried in ascending order
NICE_STEPS = (1.0, 2.5, 5.0, 10.0, 25.0, 50.0)

# Step count of a range without stepsize
INFINITE_STEPS = sys.maxsize
