PROGRAMNAME = 'ImpedPy'

import numpy as np
TWOPI = 2.0 * np.pi

# Fixed phase of the purely reactive elements [rad]
PHASE_CAPACITIVE = -np.pi / 2
PHASE_INDUCTIVE  = np.pi / 2
