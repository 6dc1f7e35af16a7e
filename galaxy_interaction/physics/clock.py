"""Fixed-step scheduling of simulation ticks against wall-clock time.

The numerical behaviour of the integrator depends on the step size, so the
simulation never uses the (variable) time between display frames as its
step. Instead a fixed number of ticks per wall-clock second is targeted and
each display frame runs however many ticks are due, up to a cap.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

DEFAULT_TICK_RATE = 120.0
DEFAULT_TIME_STEP = 0.0005
DEFAULT_STALL_THRESHOLD = 0.2
DEFAULT_MAX_TICKS_PER_FRAME = 8


class ClockState(Enum):
    UNINITIALIZED = "uninitialized"
    RUNNING = "running"


@dataclass
class SimulationClock:
    """Mutable scheduling state, owned by the simulation driver.
    
    Attributes:
        epoch: Wall-clock time (s) virtual time is measured from
        last_wall_time: Wall-clock time of the previous advance() call
        last_tick_index: Index of the last tick accounted for in this epoch
        ticks_run: Total ticks handed out across all epochs
        resets: Number of times the epoch was (re)initialized
    """
    epoch: Optional[float] = None
    last_wall_time: Optional[float] = None
    last_tick_index: int = -1
    ticks_run: int = 0
    resets: int = 0
    
    @property
    def state(self) -> ClockState:
        return ClockState.UNINITIALIZED if self.epoch is None else ClockState.RUNNING
    
    def virtual_time(self, wall_time: float) -> float:
        """Wall seconds elapsed since the epoch (0.0 before the first frame)."""
        if self.epoch is None:
            return 0.0
        return wall_time - self.epoch
    
    def reset(self):
        self.epoch = None
        self.last_wall_time = None
        self.last_tick_index = -1


class FixedStepScheduler:
    """Maps wall-clock frame times onto a fixed tick rate."""
    
    def __init__(
        self,
        tick_rate: float = DEFAULT_TICK_RATE,
        stall_threshold: float = DEFAULT_STALL_THRESHOLD,
        max_ticks_per_frame: int = DEFAULT_MAX_TICKS_PER_FRAME
    ):
        """Initialize scheduler.
        
        Args:
            tick_rate: Target ticks per wall-clock second
            stall_threshold: Gap between frames (s) treated as a pause
            max_ticks_per_frame: Cap on ticks returned by one advance() call
        """
        self.tick_rate = tick_rate
        self.stall_threshold = stall_threshold
        self.max_ticks_per_frame = max_ticks_per_frame
    
    def advance(self, clock: SimulationClock, wall_time: float) -> int:
        """Account for a new display frame and return the ticks due.
        
        A gap longer than ``stall_threshold`` since the previous call (e.g.
        the process was backgrounded) restarts the epoch instead of trying
        to catch up, so a pause looks like a pause. Ticks beyond
        ``max_ticks_per_frame`` are dropped, not deferred: the simulation
        visibly slows down when it cannot keep up.
        
        The due tick index is floor((wall_time - epoch) * tick_rate) in
        floating point. When the epoch is not 0 the subtraction can land
        just below a tick boundary, so a frame exactly one tick period
        after the previous boundary may still report 0 ticks; the tick
        then runs on the following frame.
        
        Args:
            clock: Clock state, mutated
            wall_time: Monotonic wall-clock time in seconds
            
        Returns:
            Number of ticks to run before the next draw
        """
        last_wall_time = wall_time if clock.last_wall_time is None else clock.last_wall_time
        gap = wall_time - last_wall_time
        clock.last_wall_time = wall_time
        
        if clock.epoch is None or gap > self.stall_threshold:
            clock.epoch = wall_time
            clock.last_tick_index = -1
            clock.resets += 1
        
        target_tick_index = math.floor(clock.virtual_time(wall_time) * self.tick_rate)
        ticks_due = target_tick_index - clock.last_tick_index
        ticks_due = max(0, min(ticks_due, self.max_ticks_per_frame))
        
        clock.last_tick_index = target_tick_index
        clock.ticks_run += ticks_due
        return ticks_due
