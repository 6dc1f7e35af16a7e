"""Abstract base class for numerical integrators."""

from abc import ABC, abstractmethod
from galaxy_interaction.physics.galaxy import Galaxy


class Integrator(ABC):
    """Abstract interface for galaxy integrators."""
    
    @abstractmethod
    def step(self, galaxy: Galaxy, other_galaxy: Galaxy, dt: float) -> None:
        """Advance every star of ``galaxy`` by one step, in place.
        
        Args:
            galaxy: Galaxy to advance (mutated)
            other_galaxy: The perturbing galaxy (read only, must not be
                mutated while this call runs)
            dt: Time step
        """
        pass
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this integrator."""
        pass
    
    @property
    @abstractmethod
    def order(self) -> int:
        """Return the order of accuracy."""
        pass
