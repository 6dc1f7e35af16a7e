"""Main simulator controller."""

from typing import Callable, Optional, Tuple
import time
import numpy as np
from galaxy_interaction.physics.galaxy import Galaxy
from galaxy_interaction.physics.clock import (
    FixedStepScheduler,
    SimulationClock,
    DEFAULT_TIME_STEP,
)
from galaxy_interaction.physics.integrators.base import Integrator
from galaxy_interaction.physics.integrators.semi_implicit_euler import SemiImplicitEulerIntegrator


class Simulator:
    """Owns both galaxies and the clock, and runs ticks when they are due.
    
    The presentation layer calls ``update`` once per display frame with the
    current wall-clock time, then reads ``galaxy_a.positions`` and
    ``galaxy_b.positions`` for drawing. All ticks for a frame complete
    before ``update`` returns.
    """
    
    def __init__(
        self,
        galaxy_a: Galaxy,
        galaxy_b: Galaxy,
        integrator: Optional[Integrator] = None,
        scheduler: Optional[FixedStepScheduler] = None,
        dt: float = DEFAULT_TIME_STEP,
        clock: Optional[SimulationClock] = None
    ):
        """Initialize simulator.
        
        Args:
            galaxy_a: First galaxy, integrated first each tick
            galaxy_b: Second galaxy
            integrator: Integrator to use (default: semi-implicit Euler)
            scheduler: Tick scheduler (default: 120 Hz, 0.2 s stall, cap 8)
            dt: Simulated time per tick
            clock: Existing clock state to resume from
        """
        self.galaxy_a = galaxy_a
        self.galaxy_b = galaxy_b
        self.integrator = integrator or SemiImplicitEulerIntegrator()
        self.scheduler = scheduler or FixedStepScheduler()
        self.dt = dt
        self.clock = clock or SimulationClock()
        
        self.time = 0.0
        self.step_count = 0
        self.paused = False
        
        self._last_batch_ms: Optional[float] = None
        self._last_batch_ticks = 0
        self._profile = False
        
        self.on_step_callback: Optional[Callable] = None
    
    @classmethod
    def from_config(cls, config, rng: Optional[np.random.Generator] = None) -> "Simulator":
        """Generate both galaxies and wire scheduler/integrator from a Config."""
        from galaxy_interaction.presets.interacting_pair import InteractingPair
        
        config.validate()
        galaxy_a, galaxy_b = InteractingPair.from_config(config, rng=rng).generate()
        scheduler = FixedStepScheduler(
            tick_rate=config.tick_rate,
            stall_threshold=config.stall_threshold,
            max_ticks_per_frame=config.max_ticks_per_frame,
        )
        return cls(
            galaxy_a,
            galaxy_b,
            integrator=SemiImplicitEulerIntegrator(cross_weight=config.cross_weight),
            scheduler=scheduler,
            dt=config.time_step,
        )
    
    def set_profiling(self, enabled: bool = True):
        """Enable or disable timing of tick batches."""
        self._profile = enabled
    
    def get_timing(self) -> dict:
        """Return timing of the last ``update`` batch: batch_ms and ticks."""
        return {
            "batch_ms": self._last_batch_ms,
            "ticks": self._last_batch_ticks,
        }
    
    def tick(self):
        """Advance both galaxies by one fixed step (A first, then B)."""
        self.integrator.step(self.galaxy_a, self.galaxy_b, self.dt)
        self.integrator.step(self.galaxy_b, self.galaxy_a, self.dt)
        self.time += self.dt
        self.step_count += 1
        
        if self.on_step_callback:
            self.on_step_callback(self)
    
    def update(self, wall_time: float) -> int:
        """Run the ticks due at ``wall_time``.
        
        The clock is advanced even while paused so that resuming does not
        produce a burst of ticks.
        
        Args:
            wall_time: Monotonic wall-clock time in seconds
            
        Returns:
            Number of ticks actually run
        """
        ticks_due = self.scheduler.advance(self.clock, wall_time)
        if self.paused:
            self._last_batch_ticks = 0
            if self._profile:
                self._last_batch_ms = 0.0
            return 0
        
        if self._profile:
            t0 = time.perf_counter()
        for _ in range(ticks_due):
            self.tick()
        if self._profile:
            self._last_batch_ms = (time.perf_counter() - t0) * 1000.0
        self._last_batch_ticks = ticks_due
        return ticks_due
    
    def run(self, n_ticks: int):
        """Run a number of ticks directly, bypassing the scheduler."""
        for _ in range(n_ticks):
            self.tick()
    
    def pause(self):
        """Pause simulation."""
        self.paused = True
    
    def resume(self):
        """Resume simulation."""
        self.paused = False
    
    def reset_clock(self):
        """Forget the epoch; the next update starts a new one."""
        self.clock.reset()
    
    def get_state(self) -> Tuple[np.ndarray, np.ndarray, float, int]:
        """Get current render buffers.
        
        Returns:
            Tuple of (positions_a, positions_b, time, step_count); the
            position arrays are (n, 4) x, y, z, mass
        """
        return self.galaxy_a.positions, self.galaxy_b.positions, self.time, self.step_count
