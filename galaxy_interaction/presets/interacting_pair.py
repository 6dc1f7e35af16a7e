"""Two disk galaxies perturbing each other."""

from typing import Optional, Sequence, Tuple
import numpy as np
from galaxy_interaction.physics.galaxy import Galaxy
from galaxy_interaction.presets.base import Preset
from galaxy_interaction.presets.disk import generate_galaxy


class InteractingPair(Preset):
    """Galaxy A and galaxy B, offset from each other and counter-rotating."""
    
    def __init__(
        self,
        n_stars: int = 40000,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
        galaxy_a_center: Sequence[float] = (-1.0, 0.0, -0.5),
        galaxy_a_invert: bool = False,
        galaxy_a_color: Sequence[float] = (1.0, 0.5, 1.0, 1.0),
        galaxy_b_center: Sequence[float] = (1.0, 0.0, 0.5),
        galaxy_b_invert: bool = True,
        galaxy_b_color: Sequence[float] = (0.5, 1.0, 1.0, 1.0),
        dtype=np.float64
    ):
        super().__init__(n_stars, seed, rng)
        self.galaxy_a_center = tuple(galaxy_a_center)
        self.galaxy_a_invert = galaxy_a_invert
        self.galaxy_a_color = tuple(galaxy_a_color)
        self.galaxy_b_center = tuple(galaxy_b_center)
        self.galaxy_b_invert = galaxy_b_invert
        self.galaxy_b_color = tuple(galaxy_b_color)
        self.dtype = dtype
    
    @classmethod
    def from_config(cls, config, rng: Optional[np.random.Generator] = None) -> "InteractingPair":
        """Build the preset from a Config."""
        return cls(
            n_stars=config.stars_per_galaxy,
            seed=config.seed,
            rng=rng,
            galaxy_a_center=config.galaxy_a_center,
            galaxy_a_invert=config.galaxy_a_invert,
            galaxy_a_color=config.galaxy_a_color,
            galaxy_b_center=config.galaxy_b_center,
            galaxy_b_invert=config.galaxy_b_invert,
            galaxy_b_color=config.galaxy_b_color,
        )
    
    @property
    def name(self) -> str:
        return "interacting_pair"
    
    def generate(self) -> Tuple[Galaxy, Galaxy]:
        """Generate galaxy A then galaxy B from the same random stream."""
        galaxy_a = generate_galaxy(
            self.galaxy_a_center, self.n_stars, self.galaxy_a_invert,
            self.galaxy_a_color, rng=self.rng, dtype=self.dtype
        )
        galaxy_b = generate_galaxy(
            self.galaxy_b_center, self.n_stars, self.galaxy_b_invert,
            self.galaxy_b_color, rng=self.rng, dtype=self.dtype
        )
        return galaxy_a, galaxy_b
