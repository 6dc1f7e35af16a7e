"""Point-mass acceleration toward a galaxy center."""

import numpy as np


def acceleration(positions, masses, center) -> np.ndarray:
    """Acceleration on stars from a unit-strength well at ``center``.
    
    a = -r * m / |r|^3 where r is the offset from the center and m is the
    star's own mass. Note the star mass, not a central mass, scales the
    pull. No softening is applied, so a star sitting exactly on the center
    gets a non-finite result.
    
    Args:
        positions: Star coordinates, shape (3,) or (n, 3)
        masses: Star masses, scalar or shape (n,)
        center: Well position, shape (3,)
        
    Returns:
        Accelerations with the same shape as ``positions``
    """
    positions = np.asarray(positions)
    if positions.dtype.kind != 'f':
        positions = positions.astype(np.float64)
    offsets = positions - np.asarray(center, dtype=positions.dtype)
    r = np.sqrt(np.sum(offsets * offsets, axis=-1, keepdims=True))
    masses = np.asarray(masses, dtype=positions.dtype)
    if masses.ndim > 0:
        masses = masses.reshape(r.shape)
    return -offsets * masses / (r * r * r)
