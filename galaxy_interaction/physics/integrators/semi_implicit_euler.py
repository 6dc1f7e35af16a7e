"""Semi-implicit Euler integrator (velocity first, then position)."""

from galaxy_interaction.physics.galaxy import Galaxy
from galaxy_interaction.physics.forces import acceleration
from galaxy_interaction.physics.integrators.base import Integrator

DEFAULT_CROSS_WEIGHT = 2.0


def integrate(galaxy: Galaxy, other_galaxy: Galaxy, dt: float, cross_weight: float = DEFAULT_CROSS_WEIGHT):
    """Advance ``galaxy`` one step under both galaxy wells.
    
    a = a_home + cross_weight * a_other
    v_new = v + a*dt
    r_new = r + v_new*dt
    
    ``galaxy`` positions and velocities are updated in place. Only the
    center of ``other_galaxy`` is read.
    """
    if galaxy.n_stars == 0:
        return
    xyz = galaxy.xyz
    masses = galaxy.masses
    
    a_home = acceleration(xyz, masses, galaxy.center)
    a_other = acceleration(xyz, masses, other_galaxy.center)
    accel = a_home + cross_weight * a_other
    
    galaxy.velocities += accel * dt
    galaxy.positions[:, :3] += galaxy.velocities * dt


class SemiImplicitEulerIntegrator(Integrator):
    """Semi-implicit (symplectic) Euler.
    
    The position update uses the freshly updated velocity, unlike the
    explicit Euler method.
    """
    
    def __init__(self, cross_weight: float = DEFAULT_CROSS_WEIGHT):
        """Initialize integrator.
        
        Args:
            cross_weight: Multiplier on the other galaxy's pull
        """
        self.cross_weight = cross_weight
    
    @property
    def name(self) -> str:
        return "semi_implicit_euler"
    
    @property
    def order(self) -> int:
        return 1
    
    def step(self, galaxy: Galaxy, other_galaxy: Galaxy, dt: float) -> None:
        integrate(galaxy, other_galaxy, dt, self.cross_weight)
