"""
Planform synthesis: sums of 4 or 6 sine-wave gratings, Gaussian-windowed and
mapped onto a gray scale.

4 components give the square lattice (or super-square when the second pair is
phase-shifted by pi); 6 components give the hexagonal lattice. Every output is
a float array in [0, gray_scale] for unit amplitude.

Note: for 6 components the images stored under "C5" and "C6" are built from
C3 and C4. The true C5/C6 gratings only feed P56 and P123456. Downstream
stimulus sets depend on this, so it is kept as-is.
"""

from __future__ import annotations

from typing import Dict, List, Tuple
import math
import numpy as np

from .errors import UnsupportedTopologyError
from .params import Planform, resolve

SUPPORTED_COMPONENT_COUNTS = (4, 6)


def grating(coord_x: np.ndarray, coord_y: np.ndarray, amplitude: float, phase: float,
            angle: float, cycles_per_pixel: float) -> np.ndarray:
    """Plane sine wave: angle sets the direction, phase shifts it."""
    f = cycles_per_pixel * 2 * math.pi
    a = math.cos(angle) * f
    b = math.sin(angle) * f
    return amplitude * np.cos(a * coord_x + b * coord_y + phase)


def normalize(raw: np.ndarray, gray_scale: float) -> np.ndarray:
    # [-1, 1] -> [0, gray_scale]
    return raw * gray_scale / 2 + gray_scale / 2


def component_layout(component_count: int, lattice_angle: float, phase_offset: float) -> List[Tuple[float, float]]:
    """
    (angle offset, phase) for each component, relative to the base angle.
    Angle offsets alternate +/- lattice_angle around each pair axis.
    """
    L = lattice_angle
    if component_count == 4:
        pair = math.pi / 2
        return [
            (L, 0.0),
            (pair + L, 0.0),
            (pair - L, phase_offset),
            (-L, phase_offset),
        ]
    if component_count == 6:
        pair = 2 * math.pi / 3
        # phase_offset has no meaning for the hexagonal lattice
        return [
            (L, 0.0),
            (pair + L, 0.0),
            (pair - L, 0.0),
            (-L, 0.0),
            (2 * pair + L, 0.0),
            (2 * pair - L, 0.0),
        ]
    raise UnsupportedTopologyError(
        f"Planform component_count not allowed: {component_count!r} (expected one of {SUPPORTED_COMPONENT_COUNTS})")


def make_components(pf: Planform) -> List[np.ndarray]:
    layout = component_layout(pf.component_count, pf.lattice_angle, pf.phase_offset)
    return [
        grating(pf.coord_grid_x, pf.coord_grid_y, pf.amplitude, phase,
                pf.base_angle_offset + offset, pf.cycles_per_pixel)
        for offset, phase in layout
    ]


def generate(pf: Planform) -> Dict[str, np.ndarray]:
    """
    Build the image set for a resolved planform and attach it as pf.images.
    Nothing is attached if the component count is unsupported.
    """
    comps = make_components(pf)
    mask = pf.gaussian_mask
    gs = pf.gray_scale

    def _masked(raw):
        return normalize(raw * mask, gs)

    C1, C2, C3, C4 = comps[:4]
    img: Dict[str, np.ndarray] = {}
    if pf.component_count == 4:
        img["P1234"] = _masked((C1 + C2 + C3 + C4) / 4)
        img["P12"] = _masked((C1 + C2) / 2)
        img["P34"] = _masked((C3 + C4) / 2)
    else:
        C5, C6 = comps[4:]
        img["P123456"] = _masked((C1 + C2 + C3 + C4 + C5 + C6) / 6)
        img["P12"] = _masked((C1 + C2) / 2)
        img["P34"] = _masked((C3 + C4) / 2)
        img["P56"] = _masked((C5 + C6) / 2)
        img["C5"] = _masked(C3)
        img["C6"] = _masked(C4)

    # C1..C4 are shared by both topologies
    img["C1"] = _masked(C1)
    img["C2"] = _masked(C2)
    img["C3"] = _masked(C3)
    img["C4"] = _masked(C4)

    pf.images = img
    return img


def make_planform(*args) -> Planform:
    """Resolve the given (optional) parameters and generate the images in one call."""
    pf = resolve(*args)
    generate(pf)
    return pf


def to_uint8(image: np.ndarray, gray_scale: float) -> np.ndarray:
    """Map [0, gray_scale] onto 8-bit gray levels for export."""
    scaled = np.asarray(image, dtype=np.float64) * 255.0 / float(gray_scale)
    return np.clip(np.rint(scaled), 0, 255).astype(np.uint8)
