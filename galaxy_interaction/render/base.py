"""Base renderer interface."""

from abc import ABC, abstractmethod
from typing import Sequence
from galaxy_interaction.physics.galaxy import Galaxy


class Renderer(ABC):
    """Abstract base class for renderers."""
    
    @abstractmethod
    def render(self, galaxies: Sequence[Galaxy]):
        """Draw the current positions of each galaxy in its color."""
        pass
    
    @property
    @abstractmethod
    def is_open(self) -> bool:
        """False once the output window has been closed."""
        pass
    
    @abstractmethod
    def close(self):
        """Close the renderer."""
        pass
