"""
Default configuration constants for PyNoiseGraph.

Every tunable exposed by the noise functions falls back to one of the values
below when the caller does not provide it. Nodes never read these values after
construction, so changing them at runtime only affects nodes built afterwards.

Author: B.G.
"""

import math

# Seeds
DEFAULT_SEED = 0
# Seed of the first fractal layer stack. Chosen by fair dice roll.
DEFAULT_FRACTAL_SEED = 0xD0786B3E
SEED_MASK = 0xFFFFFFFF

# Permutation table
PERMUTATION_SIZE = 256

# Fractal engine
DEFAULT_LAYERS = 6
DEFAULT_FRACTAL_FREQUENCY = 1.0
DEFAULT_LACUNARITY = math.pi * 2.0 / 3.0
DEFAULT_PERSISTENCE = 0.5
DEFAULT_ATTENUATION = 2.0

# Turbulence
DEFAULT_TURBULENCE_SEED = 0
DEFAULT_TURBULENCE_FREQUENCY = 1.0
DEFAULT_TURBULENCE_POWER = 1.0
DEFAULT_TURBULENCE_ROUGHNESS = 3

# Generators
DEFAULT_CHECKERBOARD_SIZE = 0
DEFAULT_CYLINDERS_FREQUENCY = 1.0
DEFAULT_WORLEY_FREQUENCY = 1.0
DEFAULT_WORLEY_RETURN_TYPE = "value"
DEFAULT_WORLEY_DISTANCE = "euclidean"

# Modifiers and selectors
DEFAULT_CLAMP_BOUNDS = (-1.0, 1.0)
DEFAULT_EXPONENT = 1.0
DEFAULT_SCALE = 1.0
DEFAULT_BIAS = 0.0
DEFAULT_SELECT_BOUNDS = (0.0, 1.0)
DEFAULT_FALLOFF = 0.0

# Output scaling of the lattice generators. Perlin and the simplex variants
# typically stay within [-1, 1]. PerlinSurflet uses the published factors and
# leaves that range on a few percent of points, with peaks near 1.75 in 4D.
PERLIN_SCALE = {2: 1.0, 3: 1.0 / math.sqrt(1.5), 4: 1.0 / math.sqrt(3.0)}
SURFLET_SCALE = {2: 3.160493827160493, 3: 3.889855325553107, 4: 4.424369240215691}
OPEN_SIMPLEX_RADIUS_SQ = 0.5
OPEN_SIMPLEX_SCALE = {2: 70.0, 3: 70.0, 4: 62.0}
SUPER_SIMPLEX_RADIUS_SQ = {2: 2.0, 3: 1.5}
SUPER_SIMPLEX_SCALE = {2: 1.0 / 12.0, 3: 1.0 / 3.5}
