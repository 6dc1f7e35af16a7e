"""Physics kernel: star state, force model, integrator and tick scheduling."""

from galaxy_interaction.physics.galaxy import Galaxy
from galaxy_interaction.physics.forces import acceleration
from galaxy_interaction.physics.clock import FixedStepScheduler, SimulationClock, ClockState
from galaxy_interaction.physics.simulator import Simulator

__all__ = [
    "Galaxy",
    "acceleration",
    "FixedStepScheduler",
    "SimulationClock",
    "ClockState",
    "Simulator",
]
