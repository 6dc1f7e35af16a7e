"""CLI main entry point."""

import argparse
import time
from galaxy_interaction.physics.simulator import Simulator
from galaxy_interaction.physics.diagnostics import summarize
from galaxy_interaction.render import Camera, Renderer3D
from galaxy_interaction.utils.config import Config, load_config, save_config
from galaxy_interaction.utils.reproducibility import make_rng


def build_config(args) -> Config:
    """Config file (if any) overridden by explicit command-line values."""
    config = load_config(args.config) if args.config else Config()
    overrides = {
        'stars_per_galaxy': args.stars,
        'seed': args.seed,
        'cross_weight': args.cross_weight,
        'time_step': args.time_step,
        'tick_rate': args.tick_rate,
        'max_ticks_per_frame': args.max_ticks,
    }
    for key, value in overrides.items():
        if value is not None:
            setattr(config, key, value)
    return config.validate()


def print_header():
    print(f"{'Frame':<8} {'Wall':<8} {'SimTime':<10} {'Ticks':<8} "
          f"{'K_A':<12} {'<r>_A':<8} {'ok_A':<6} {'K_B':<12} {'<r>_B':<8} {'ok_B':<6}")
    print("-" * 96)


def print_row(frame: int, wall_time: float, sim: Simulator):
    a = summarize(sim.galaxy_a)
    b = summarize(sim.galaxy_b)
    print(f"{frame:<8} {wall_time:<8.2f} {sim.time:<10.4f} {sim.step_count:<8} "
          f"{a['kinetic_energy']:<12.2f} {a['mean_radius']:<8.4f} {a['finite_fraction']:<6.3f} "
          f"{b['kinetic_energy']:<12.2f} {b['mean_radius']:<8.4f} {b['finite_fraction']:<6.3f}")


def run_headless(sim: Simulator, frames: int, fps: float, debug_every: int):
    """Drive the simulator with synthetic frame timestamps at ``fps``."""
    print_header()
    print_row(0, 0.0, sim)
    for frame in range(frames):
        wall_time = frame / fps
        sim.update(wall_time)
        if debug_every > 0 and (frame + 1) % debug_every == 0:
            print_row(frame + 1, wall_time, sim)


def run_interactive(sim: Simulator, config: Config, debug_every: int):
    """Drive the simulator from the real clock until the window is closed."""
    renderer = Renderer3D(camera=Camera.from_config(config))
    sim.set_profiling(True)
    start = time.perf_counter()
    frame = 0
    try:
        while renderer.is_open:
            wall_time = time.perf_counter() - start
            sim.update(wall_time)
            renderer.render([sim.galaxy_a, sim.galaxy_b])
            frame += 1
            if debug_every > 0 and frame % debug_every == 0:
                timing = sim.get_timing()
                print(f"frame={frame} ticks={timing['ticks']} batch_ms={timing['batch_ms']:.1f}")
    finally:
        renderer.close()


def main():
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Galaxy Interaction - two disk galaxies perturbing each other")
    
    parser.add_argument('--config', type=str, default=None,
                       help='Load configuration from .json or .yaml')
    parser.add_argument('--save-config', type=str, default=None,
                       help='Write the effective configuration to .json or .yaml and exit')
    parser.add_argument('--stars', type=int, default=None,
                       help='Stars per galaxy (default: 40000)')
    parser.add_argument('--seed', type=int, default=None,
                       help='Random seed for reproducibility')
    
    # Physics and scheduling
    parser.add_argument('--cross-weight', type=float, default=None,
                       help="Multiplier on the other galaxy's pull (default: 2.0)")
    parser.add_argument('--time-step', type=float, default=None,
                       help='Simulated time per tick (default: 0.0005)')
    parser.add_argument('--tick-rate', type=float, default=None,
                       help='Ticks per wall-clock second (default: 120)')
    parser.add_argument('--max-ticks', type=int, default=None,
                       help='Maximum ticks per displayed frame (default: 8)')
    
    # Run mode
    parser.add_argument('--render', action='store_true',
                       help='Open an interactive 3D window')
    parser.add_argument('--frames', type=int, default=600,
                       help='Number of frames to simulate in headless mode')
    parser.add_argument('--fps', type=float, default=60.0,
                       help='Display rate assumed in headless mode')
    parser.add_argument('--debug-every', type=int, default=60,
                       help='Print diagnostics every N frames (0 disables)')
    
    args = parser.parse_args()
    config = build_config(args)
    
    if args.save_config:
        save_config(config, args.save_config)
        print(f"Configuration saved to {args.save_config}")
        return
    
    print(f"Generating 2 x {config.stars_per_galaxy} stars (seed={config.seed})")
    sim = Simulator.from_config(config, rng=make_rng(config.seed))
    print(f"Integrator: {sim.integrator.name}, dt: {sim.dt}, tick rate: {sim.scheduler.tick_rate} Hz, "
          f"cross weight: {sim.integrator.cross_weight}")
    
    if args.render:
        run_interactive(sim, config, args.debug_every)
    else:
        run_headless(sim, args.frames, args.fps, args.debug_every)
    
    print("Simulation complete!")


if __name__ == '__main__':
    main()
