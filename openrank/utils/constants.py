"""mathematical constants and model defaults computed once here to avoid recomputation"""
import math

# general math constants
SQRT_2 = math.sqrt(2.0)
INV_SQRT_2 = 1.0 / SQRT_2
INV_SQRT_2PI = 1.0 / math.sqrt(2.0 * math.pi)

# smallest positive (subnormal) double, anything below it has underflowed to zero
SMALLEST_POSITIVE = math.ulp(0.0)

# v_tie falls back to its linear form when the truncation mass is below this
V_TIE_DENOM_THRESHOLD = 1e-5

# weight normalization substitutes this range when all weights are equal
ZERO_RANGE_SUBSTITUTE = 0.0001

# weight rows are rescaled onto this range before being applied
WEIGHT_MIN = 1.0
WEIGHT_MAX = 2.0

# weng lin model defaults
DEFAULT_MU = 25.0
DEFAULT_SIGMA = DEFAULT_MU / 3.0
DEFAULT_BETA = DEFAULT_SIGMA / 2.0
DEFAULT_KAPPA = 0.0001
DEFAULT_TAU = DEFAULT_MU / 300.0
DEFAULT_EPSILON = 0.1

# number of standard deviations subtracted from mu for the conservative ordinal
ORDINAL_Z = 3.0

# chance_of_ranks compares probabilities rounded to this many decimals
RANK_PROBABILITY_DECIMALS = 6
