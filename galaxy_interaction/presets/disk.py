"""Thin rotating disk galaxy generator."""

import warnings
from typing import Optional, Sequence
import numpy as np
from galaxy_interaction.physics.galaxy import Galaxy
from galaxy_interaction.utils.reproducibility import make_rng


def generate_galaxy(
    center: Sequence[float],
    n_stars: int,
    invert_rotation: bool = False,
    color: Sequence[float] = (1.0, 1.0, 1.0, 1.0),
    rng: Optional[np.random.Generator] = None,
    dtype=np.float64
) -> Galaxy:
    """Sample a disk of stars on circular-ish orbits around ``center``.
    
    Per star:
        m = (1 + U) / 2                          in [0.5, 1.0]
        r = 0.01 + U^2                           concentrated toward the core
        w = U * 2pi
        h = U * (0.01 + 0.2 * sin(a) / a),  a = 4pi*r, random sign
        v = s * sqrt(m / sqrt(r^2 + h^2)),  s = +1 if inverted else -1
    
    The velocity is tangential in the xy-plane, along (cos(w - pi/2),
    sin(w - pi/2)), with no z component.
    
    Args:
        center: Galaxy center (x, y, z)
        n_stars: Number of stars; zero or negative gives an empty galaxy
        invert_rotation: Reverse the sense of rotation
        color: RGB or RGBA display color
        rng: Random generator (a fresh unseeded one if None)
        dtype: Floating point type of the star arrays
        
    Returns:
        New Galaxy owning freshly allocated arrays
    """
    if rng is None:
        rng = make_rng()
    n = max(int(n_stars), 0)
    if n == 0:
        warnings.warn(f"Generating galaxy with n_stars={n_stars}; galaxy will be empty.", UserWarning)
    
    masses = (1.0 + rng.random(n)) / 2
    
    w = rng.random(n) * 2 * np.pi
    r = 0.01 + rng.random(n) ** 2
    a = 4 * np.pi * r
    h = rng.random(n) * (0.01 + 0.2 * np.sin(a) / a)
    side = np.where(rng.random(n) < 0.5, -1.0, 1.0)
    
    actual_r = np.sqrt(r * r + h * h)
    tangent_v = (1.0 if invert_rotation else -1.0) * np.sqrt(masses / actual_r)
    
    center = np.asarray(center, dtype=np.float64)
    positions = np.empty((n, 4), dtype=dtype)
    positions[:, 0] = center[0] + r * np.cos(w)
    positions[:, 1] = center[1] + r * np.sin(w)
    positions[:, 2] = center[2] + h * side
    positions[:, 3] = masses
    
    velocities = np.zeros((n, 3), dtype=dtype)
    velocities[:, 0] = tangent_v * np.cos(w - np.pi / 2)
    velocities[:, 1] = tangent_v * np.sin(w - np.pi / 2)
    
    return Galaxy(center.astype(dtype), positions, velocities, color)
