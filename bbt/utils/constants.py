"""constants computed once here to avoid recomputation"""
import math

# default rating scale, TrueSkill's 0 to 50 convention
DEFAULT_MU = 25.0
DEFAULT_SIGMA = DEFAULT_MU / 3.0
DEFAULT_BETA = DEFAULT_MU / 6.0
CONSERVATIVE_K = 3.0

# variance multiplier floor so sigma never collapses to zero
KAPPA = 0.0001

# share of a decisive result's variance shrink that a draw carries
DRAW_INFORMATION = 0.5

# numeric guards
MIN_COMBINED_DEV = 1e-6
CDF_FLOOR = 2.222758749e-162
DRAW_DENOM_FLOOR = 1e-5

SQRT_2 = math.sqrt(2.0)
