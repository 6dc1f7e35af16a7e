"""Basic headless example of the galaxy interaction kernel."""

from galaxy_interaction import Config, Simulator
from galaxy_interaction.physics.diagnostics import summarize


def main():
    """Run two galaxies for five simulated seconds at a 60 Hz display rate."""
    config = Config(stars_per_galaxy=5000, seed=42)
    sim = Simulator.from_config(config)
    
    print("Running simulation...")
    fps = 60.0
    for frame in range(300):
        sim.update(frame / fps)
        if frame % 60 == 0:
            a = summarize(sim.galaxy_a)
            b = summarize(sim.galaxy_b)
            print(f"Frame {frame}: ticks={sim.step_count}, "
                  f"<r>_A={a['mean_radius']:.4f}, <r>_B={b['mean_radius']:.4f}")
    
    print("Simulation complete!")


if __name__ == "__main__":
    main()
