"""Initial condition generators."""

from galaxy_interaction.presets.base import Preset
from galaxy_interaction.presets.disk import generate_galaxy
from galaxy_interaction.presets.interacting_pair import InteractingPair

__all__ = ["Preset", "generate_galaxy", "InteractingPair"]
