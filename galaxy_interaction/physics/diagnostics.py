"""Diagnostics for interacting galaxies."""

import numpy as np
from galaxy_interaction.physics.galaxy import Galaxy


def kinetic_energy(galaxy: Galaxy) -> float:
    """Total kinetic energy, sum(m v^2 / 2)."""
    v_sq = np.sum(galaxy.velocities ** 2, axis=1)
    return float(0.5 * np.sum(galaxy.masses * v_sq))


def radii(galaxy: Galaxy) -> np.ndarray:
    """Distance of each star from its own galaxy's center."""
    return np.linalg.norm(galaxy.xyz - galaxy.center, axis=1)


def finite_fraction(galaxy: Galaxy) -> float:
    """Fraction of stars whose position and velocity are all finite.
    
    Stars that pass too close to a center pick up non-finite state that
    never recovers; this tracks how many are left.
    """
    if galaxy.n_stars == 0:
        return 1.0
    finite = np.all(np.isfinite(galaxy.positions), axis=1) & np.all(np.isfinite(galaxy.velocities), axis=1)
    return float(np.mean(finite))


def summarize(galaxy: Galaxy) -> dict:
    """Summary of one galaxy, computed over its finite stars."""
    finite = np.all(np.isfinite(galaxy.positions), axis=1) & np.all(np.isfinite(galaxy.velocities), axis=1)
    healthy = Galaxy(galaxy.center, galaxy.positions[finite], galaxy.velocities[finite], galaxy.color)
    r = radii(healthy)
    return {
        "n_stars": galaxy.n_stars,
        "kinetic_energy": kinetic_energy(healthy),
        "mean_radius": float(np.mean(r)) if r.size else 0.0,
        "median_radius": float(np.median(r)) if r.size else 0.0,
        "finite_fraction": finite_fraction(galaxy),
    }
