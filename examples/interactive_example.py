"""Open the interactive 3D view of the default scenario."""

import time
from galaxy_interaction import Config, Simulator
from galaxy_interaction.render import Camera, Renderer3D


def main():
    config = Config(stars_per_galaxy=10000, seed=7)
    sim = Simulator.from_config(config)
    renderer = Renderer3D(camera=Camera.from_config(config))
    
    start = time.perf_counter()
    try:
        while renderer.is_open:
            sim.update(time.perf_counter() - start)
            renderer.render([sim.galaxy_a, sim.galaxy_b])
    finally:
        renderer.close()


if __name__ == "__main__":
    main()
