"""Reproducibility utilities for deterministic simulations."""

from typing import Optional
import numpy as np


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create the random generator used for star sampling.
    
    Args:
        seed: Random seed, or None for OS entropy
        
    Returns:
        numpy Generator
    """
    return np.random.default_rng(seed)
