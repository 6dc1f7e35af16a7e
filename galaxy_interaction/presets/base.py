"""Base class for preset scenarios."""

from abc import ABC, abstractmethod
from typing import Optional, Tuple
import numpy as np
from galaxy_interaction.physics.galaxy import Galaxy
from galaxy_interaction.utils.reproducibility import make_rng


class Preset(ABC):
    """Abstract base class for preset scenarios."""
    
    def __init__(self, n_stars: int = 40000, seed: Optional[int] = None, rng: Optional[np.random.Generator] = None):
        """Initialize preset.
        
        Args:
            n_stars: Number of stars per galaxy
            seed: Random seed for reproducibility (ignored if rng is given)
            rng: Explicit random generator to draw from
        """
        self.n_stars = n_stars
        self.seed = seed
        self.rng = rng if rng is not None else make_rng(seed)
    
    @abstractmethod
    def generate(self) -> Tuple[Galaxy, ...]:
        """Generate initial conditions.
        
        Returns:
            Tuple of galaxies
        """
        pass
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this preset."""
        pass
