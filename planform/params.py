"""
Planform parameter record and the resolver that fills it in.

A Planform starts out partial (any user-facing field may be None), and
resolve() turns it into a complete record: missing fields get their defaults
(with a printed notice per field), then the pixel grid, cycles-per-pixel and
Gaussian mask are recomputed from scratch.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from collections.abc import Mapping
from typing import Any, Dict, Optional
import math
import numpy as np

from .errors import InvalidInputError, TooManyArgumentsError

# User-facing fields, in the order their defaults are assigned
PARAM_FIELDS = (
    "image_size_px",
    "cycles_per_image",
    "gaussian_space_constant",
    "gray_scale",
    "amplitude",
    "base_angle_offset",
    "lattice_angle",
    "phase_offset",
    "component_count",
)


@dataclass(frozen=True)
class PlanformDefaults:
    image_size_px: int = 600
    cycles_per_image: float = 12
    gaussian_space_constant: float = 3 * 600  # no visible edge attenuation
    gray_scale: float = 255
    amplitude: float = 1
    base_angle_offset: float = 0
    lattice_angle: float = math.atan2(1, 3)  # 3:1 lattice
    phase_offset: float = 0  # square; pi gives super-square
    component_count: int = 4


@dataclass
class Planform:
    # user-facing parameters; None means "use the default"
    image_size_px: Optional[int] = None
    cycles_per_image: Optional[float] = None
    gaussian_space_constant: Optional[float] = None
    gray_scale: Optional[float] = None
    amplitude: Optional[float] = None
    base_angle_offset: Optional[float] = None
    lattice_angle: Optional[float] = None
    phase_offset: Optional[float] = None
    component_count: Optional[int] = None

    # derived by resolve()
    coord_grid_x: Optional[np.ndarray] = field(default=None, repr=False)
    coord_grid_y: Optional[np.ndarray] = field(default=None, repr=False)
    cycles_per_pixel: Optional[float] = None
    gaussian_mask: Optional[np.ndarray] = field(default=None, repr=False)

    # set by generate()
    images: Optional[Dict[str, np.ndarray]] = field(default=None, repr=False)

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> Planform:
        # Unknown keys (including derived fields) are ignored
        return cls(**{k: v for k, v in d.items() if k in PARAM_FIELDS})

    def params(self) -> Dict[str, Any]:
        """Scalar user-facing parameters as a plain dict."""
        return {name: getattr(self, name) for name in PARAM_FIELDS}


def default_params(image_size_px: int | None = None) -> PlanformDefaults:
    """
    Immutable default table. The Gaussian space constant scales with the image
    size (3x the side length); pass the resolved size to get the matching value.
    """
    if image_size_px is None:
        return PlanformDefaults()
    return PlanformDefaults(image_size_px=image_size_px,
                            gaussian_space_constant=3 * image_size_px)


def default_config() -> Dict[str, Any]:
    return asdict(default_params())


def _format_value(value: Any) -> str:
    # Integral values print as integers, everything else in exponent form
    if isinstance(value, (int, np.integer)):
        return str(int(value))
    v = float(value)
    if v.is_integer():
        return str(int(v))
    return "%e" % v


def make_grid(image_size_px: int):
    """Pixel coordinate grids: x runs along columns, y along rows, both 0..n-1."""
    ax = np.arange(image_size_px, dtype=np.float64)
    return np.meshgrid(ax, ax)


def _centered_axis(n: int) -> np.ndarray:
    if n == 1:
        # a single sample sits on the image center
        return np.zeros(1, dtype=np.float64)
    return np.linspace(-n / 2.0, n / 2.0, n)


def make_gaussian_mask(image_size_px: int, gaussian_space_constant: float) -> np.ndarray:
    """Isotropic Gaussian centered on the image, values in (0, 1]."""
    ax = _centered_axis(int(image_size_px))
    x, y = np.meshgrid(ax, ax)
    return np.exp(-((x ** 2) + (y ** 2)) / (float(gaussian_space_constant) ** 2))


def resolve(*args) -> Planform:
    """
    Complete a partial planform. Accepts nothing, None, a Planform (completed in
    place and returned) or a mapping of parameter names to values.

    A missing gaussian_space_constant defaults to 3 * image_size_px of the
    resolved size, so only the default 600 px image gets 1800. Pass it
    explicitly to keep a fixed envelope across sizes.
    """
    if len(args) > 1:
        raise TooManyArgumentsError(f"Too many input arguments: expected at most 1, got {len(args)}.")

    arg = args[0] if args else None
    if arg is None:
        pf = Planform()
    elif isinstance(arg, Planform):
        pf = arg
    elif isinstance(arg, Mapping):
        pf = Planform.from_dict(arg)
    else:
        raise InvalidInputError(f"Input not a planform record or mapping: {type(arg).__name__}")

    d = default_params(pf.image_size_px)
    for name in PARAM_FIELDS:
        if getattr(pf, name) is None:
            value = getattr(d, name)
            setattr(pf, name, value)
            print(f"Assigning default value of {name} = {_format_value(value)}")

    n = int(pf.image_size_px)
    pf.coord_grid_x, pf.coord_grid_y = make_grid(n)
    pf.cycles_per_pixel = pf.cycles_per_image / pf.image_size_px
    pf.gaussian_mask = make_gaussian_mask(n, pf.gaussian_space_constant)
    return pf
