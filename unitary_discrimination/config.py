"""
Configuration and default parameters for discrimination protocols.
"""

import numpy as np

# Default execution parameters
DEFAULT_SHOTS = 1
DEFAULT_OPTIMIZATION_LEVEL = 1

# Simulator seed (None = fresh randomness on every run)
SEED_SIMULATOR = None

# Overlap estimation (statistical threshold discrimination)
# Rz(θ) and Ry(θ) coincide only at isolated angles; at θ = 0.01π the SWAP test
# reports a "1" with probability ~1.2e-4, so 10^6 trials leave ~e^-120 miss odds.
DEFAULT_OVERLAP_TRIALS = 1_000_000
DEFAULT_CONFIDENCE = 0.99

# Recommended angle range for fixed-angle discrimination
# θ ∈ [0.01π, 0.99π] keeps the two output-state overlaps bounded away from 1
ANGLE_MIN = 0.01 * np.pi
ANGLE_MAX = 0.99 * np.pi

# Angle handed to the arbitrary-angle Rz/R1 oracle: U(π)·U(-π)† = U(2π)
# Rz(2π) = -I, R1(2π) = I
KICKBACK_ANGLE = np.pi

# Numerical tolerances
ZERO_STATE_TOLERANCE = 1e-9
