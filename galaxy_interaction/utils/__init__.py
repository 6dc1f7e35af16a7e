"""Utility functions for reproducibility and configuration."""

from galaxy_interaction.utils.reproducibility import make_rng
from galaxy_interaction.utils.config import load_config, save_config, Config

__all__ = ["make_rng", "load_config", "save_config", "Config"]
