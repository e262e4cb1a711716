"""
Planform stimulus generator: sums of 4 or 6 sine-wave gratings under a Gaussian
window, used as symmetry stimuli in perception experiments.

Typical use:

    pf = make_planform()                  # all defaults, square lattice
    pf.phase_offset = math.pi             # super-square
    pf = make_planform(pf)
    pf.images["P1234"]
"""

from .errors import PlanformError, TooManyArgumentsError, InvalidInputError, UnsupportedTopologyError
from .params import Planform, PlanformDefaults, default_params, default_config, make_gaussian_mask, make_grid, resolve
from .synth import grating, normalize, generate, make_planform, to_uint8

__all__ = [
    "PlanformError",
    "TooManyArgumentsError",
    "InvalidInputError",
    "UnsupportedTopologyError",
    "Planform",
    "PlanformDefaults",
    "default_params",
    "default_config",
    "make_gaussian_mask",
    "make_grid",
    "resolve",
    "grating",
    "normalize",
    "generate",
    "make_planform",
    "to_uint8",
]
