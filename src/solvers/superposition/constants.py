"""
Physical constants for field superposition (SI units).
"""

import math
from scipy.constants import c as SPEED_OF_LIGHT

# Classical defined value, not the CODATA 2018 measurement.
MU_0 = 4e-7 * math.pi
EPSILON_0 = 1.0 / (MU_0 * SPEED_OF_LIGHT ** 2)

# Coulomb constant 1 / (4 pi eps0)
K_E = 1.0 / (4.0 * math.pi * EPSILON_0)

# Biot-Savart prefactor mu0 / (4 pi)
K_M = MU_0 / (4.0 * math.pi)

DEFAULT_STEP_SIZE = 1e-1
