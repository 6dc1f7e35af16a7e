"""
Galaxy Interaction - two disk galaxies perturbing each other.

Features:
- Structure-of-arrays star state ready for render-buffer upload
- Vectorized point-mass force model and semi-implicit Euler integrator
- Fixed-step tick scheduling decoupled from display frame rate
- Seeded disk galaxy generation
- Interactive matplotlib 3D view and a headless CLI
"""

__version__ = "0.1.0"

from galaxy_interaction.physics.galaxy import Galaxy
from galaxy_interaction.physics.simulator import Simulator
from galaxy_interaction.presets.disk import generate_galaxy
from galaxy_interaction.utils.config import Config

__all__ = [
    "Galaxy",
    "Simulator",
    "generate_galaxy",
    "Config",
]
