"""Tests for fixed-step tick scheduling."""

from galaxy_interaction.physics.clock import ClockState, FixedStepScheduler, SimulationClock


def test_first_call_starts_epoch():
    """The first frame sets the epoch and owes tick 0."""
    scheduler = FixedStepScheduler()
    clock = SimulationClock()
    assert clock.state == ClockState.UNINITIALIZED
    
    ticks = scheduler.advance(clock, 12.5)
    
    assert clock.state == ClockState.RUNNING
    assert clock.epoch == 12.5
    assert clock.last_tick_index == 0
    assert ticks == 1


def test_one_tick_period_gives_one_tick():
    """Frames one tick period apart produce exactly one tick.
    
    Uses epoch 0 so the elapsed time is exactly 1/120 in floating point.
    """
    scheduler = FixedStepScheduler(tick_rate=120.0)
    clock = SimulationClock()
    scheduler.advance(clock, 0.0)
    
    assert scheduler.advance(clock, 1.0 / 120.0) == 1
    assert clock.last_tick_index == 1


def test_no_ticks_within_period():
    """A frame arriving before the next tick boundary runs nothing."""
    scheduler = FixedStepScheduler(tick_rate=120.0)
    clock = SimulationClock()
    scheduler.advance(clock, 0.0)
    
    assert scheduler.advance(clock, 0.004) == 0


def test_sixty_hz_display():
    """At 60 frames per second, two ticks are run per frame."""
    scheduler = FixedStepScheduler(tick_rate=120.0)
    clock = SimulationClock()
    scheduler.advance(clock, 0.0)
    
    ticks = [scheduler.advance(clock, 0.015625 * i) for i in range(1, 9)]
    
    # 0.015625 s = 1.875 tick periods
    assert sum(ticks) == 15
    assert all(t in (1, 2) for t in ticks)


def test_stall_resets_epoch():
    """A gap longer than the stall threshold restarts the clock."""
    scheduler = FixedStepScheduler(tick_rate=120.0, stall_threshold=0.2)
    clock = SimulationClock()
    scheduler.advance(clock, 0.0)
    scheduler.advance(clock, 0.125)
    
    ticks = scheduler.advance(clock, 5.0)
    
    assert clock.epoch == 5.0
    assert clock.resets == 2
    assert ticks == 1
    assert scheduler.advance(clock, 5.0625) == 7


def test_gap_at_threshold_does_not_reset():
    """Exactly the threshold is not a stall."""
    scheduler = FixedStepScheduler(tick_rate=128.0, stall_threshold=0.25, max_ticks_per_frame=100)
    clock = SimulationClock()
    scheduler.advance(clock, 0.0)
    
    assert scheduler.advance(clock, 0.25) == 32
    assert clock.epoch == 0.0


def test_ticks_capped_and_dropped():
    """Ticks over the cap are dropped, not carried to the next frame."""
    scheduler = FixedStepScheduler(tick_rate=120.0, max_ticks_per_frame=8)
    clock = SimulationClock()
    scheduler.advance(clock, 0.0)
    
    assert scheduler.advance(clock, 0.125) == 8
    assert clock.last_tick_index == 15
    # floor(0.1875 * 120) = 22, only 7 beyond the dropped backlog
    assert scheduler.advance(clock, 0.1875) == 7
    assert clock.ticks_run == 1 + 8 + 7


def test_clock_going_backwards():
    """A timestamp earlier than the previous one runs no ticks."""
    scheduler = FixedStepScheduler()
    clock = SimulationClock()
    scheduler.advance(clock, 1.0)
    scheduler.advance(clock, 1.1)
    
    assert scheduler.advance(clock, 1.05) == 0


def test_reset():
    """Resetting the clock makes the next call start a new epoch."""
    scheduler = FixedStepScheduler()
    clock = SimulationClock()
    scheduler.advance(clock, 0.0)
    scheduler.advance(clock, 0.1)
    clock.reset()
    
    assert clock.state == ClockState.UNINITIALIZED
    assert scheduler.advance(clock, 0.15) == 1
    assert clock.epoch == 0.15


def test_tick_boundary_rounding_with_nonzero_epoch():
    """Near a boundary with a non-zero epoch, the tick may land one frame late."""
    scheduler = FixedStepScheduler(tick_rate=120.0)
    clock = SimulationClock()
    scheduler.advance(clock, 12.5)
    
    first = scheduler.advance(clock, 12.5 + 1.0 / 120.0)
    second = scheduler.advance(clock, 12.5 + 1.5 / 120.0)
    
    assert first in (0, 1)
    assert first + second == 1
