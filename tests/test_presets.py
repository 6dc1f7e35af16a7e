"""Tests for galaxy generation."""

import numpy as np
import pytest
from galaxy_interaction.presets import InteractingPair, generate_galaxy
from galaxy_interaction.utils.config import Config


def test_generate_galaxy_shapes():
    """Generated arrays have the documented layout."""
    galaxy = generate_galaxy((-1.0, 0.0, -0.5), 500, rng=np.random.default_rng(0))
    
    assert galaxy.n_stars == 500
    assert galaxy.positions.shape == (500, 4)
    assert galaxy.velocities.shape == (500, 3)
    assert np.allclose(galaxy.center, [-1.0, 0.0, -0.5])
    assert galaxy.color.shape == (4,)


def test_masses_in_range():
    """Star masses lie in [0.5, 1.0]."""
    galaxy = generate_galaxy((0.0, 0.0, 0.0), 5000, rng=np.random.default_rng(1))
    assert np.all(galaxy.masses >= 0.5)
    assert np.all(galaxy.masses <= 1.0)


def test_radial_extent():
    """Stars stay within the sampled disk radius and thickness."""
    center = np.array([1.0, 0.0, 0.5])
    galaxy = generate_galaxy(center, 5000, rng=np.random.default_rng(2))
    offsets = galaxy.xyz - center
    planar = np.linalg.norm(offsets[:, :2], axis=1)
    
    assert np.all(planar >= 0.01 - 1e-12)
    assert np.all(planar <= 1.01 + 1e-12)
    assert np.all(np.abs(offsets[:, 2]) <= 0.01 + 0.2 + 1e-12)
    # Both sides of the disk plane are populated
    assert np.any(offsets[:, 2] > 0) and np.any(offsets[:, 2] < 0)


def test_circular_speed_matches_distance():
    """Speed is sqrt(m / d) with d the 3D distance from the center."""
    center = np.array([-1.0, 0.0, -0.5])
    galaxy = generate_galaxy(center, 2000, rng=np.random.default_rng(3))
    distance = np.linalg.norm(galaxy.xyz - center, axis=1)
    speed = np.linalg.norm(galaxy.velocities, axis=1)
    
    assert np.allclose(speed, np.sqrt(galaxy.masses / distance))


def test_velocity_tangential_in_plane():
    """Velocities are perpendicular to the in-plane radius with no z part."""
    center = np.array([0.0, 0.0, 0.0])
    galaxy = generate_galaxy(center, 2000, rng=np.random.default_rng(4))
    radial = galaxy.xyz[:, :2] - center[:2]
    
    assert np.all(galaxy.velocities[:, 2] == 0.0)
    assert np.allclose(np.sum(radial * galaxy.velocities[:, :2], axis=1), 0.0, atol=1e-12)


def test_rotation_sense():
    """Inverting the rotation flips every velocity and nothing else."""
    center = np.zeros(3)
    normal = generate_galaxy(center, 300, False, rng=np.random.default_rng(5))
    inverted = generate_galaxy(center, 300, True, rng=np.random.default_rng(5))
    
    lz = np.cross(normal.xyz, normal.velocities)[:, 2]
    assert np.all(lz > 0)
    assert np.array_equal(inverted.positions, normal.positions)
    assert np.array_equal(inverted.velocities, -normal.velocities)


def test_reproducibility():
    """The same seed yields the same galaxy."""
    g1 = generate_galaxy((0.0, 0.0, 0.0), 100, rng=np.random.default_rng(42))
    g2 = generate_galaxy((0.0, 0.0, 0.0), 100, rng=np.random.default_rng(42))
    
    assert np.array_equal(g1.positions, g2.positions)
    assert np.array_equal(g1.velocities, g2.velocities)


def test_non_positive_star_count():
    """Zero or negative star counts give an empty galaxy."""
    with pytest.warns(UserWarning):
        galaxy = generate_galaxy((0.0, 0.0, 0.0), -5)
    assert galaxy.n_stars == 0
    assert galaxy.positions.shape == (0, 4)


def test_float32_galaxy():
    """Single precision arrays can be requested for render upload."""
    galaxy = generate_galaxy((0.0, 0.0, 0.0), 10, rng=np.random.default_rng(6), dtype=np.float32)
    assert galaxy.positions.dtype == np.float32
    assert galaxy.velocities.dtype == np.float32
    assert galaxy.center.dtype == np.float32


def test_interacting_pair():
    """The pair preset builds two independent galaxies."""
    preset = InteractingPair(n_stars=200, seed=42)
    galaxy_a, galaxy_b = preset.generate()
    
    assert preset.name == "interacting_pair"
    assert np.allclose(galaxy_a.center, [-1.0, 0.0, -0.5])
    assert np.allclose(galaxy_b.center, [1.0, 0.0, 0.5])
    assert np.allclose(galaxy_a.color, [1.0, 0.5, 1.0, 1.0])
    assert np.allclose(galaxy_b.color, [0.5, 1.0, 1.0, 1.0])
    assert not np.shares_memory(galaxy_a.positions, galaxy_b.positions)
    assert not np.shares_memory(galaxy_a.velocities, galaxy_b.velocities)
    # Opposite spin about z
    lz_a = np.cross(galaxy_a.xyz - galaxy_a.center, galaxy_a.velocities)[:, 2]
    lz_b = np.cross(galaxy_b.xyz - galaxy_b.center, galaxy_b.velocities)[:, 2]
    assert np.all(lz_a > 0)
    assert np.all(lz_b < 0)


def test_interacting_pair_from_config():
    """Preset parameters come from the config."""
    config = Config(stars_per_galaxy=50, galaxy_b_center=(3.0, 0.0, 0.0), seed=7)
    galaxy_a, galaxy_b = InteractingPair.from_config(config).generate()
    again_a, _ = InteractingPair.from_config(config).generate()
    
    assert galaxy_a.n_stars == 50
    assert np.allclose(galaxy_b.center, [3.0, 0.0, 0.0])
    assert np.array_equal(galaxy_a.positions, again_a.positions)
