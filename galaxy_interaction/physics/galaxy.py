"""Per-galaxy star state stored as parallel arrays."""

from dataclasses import dataclass, field
from typing import Sequence
import numpy as np


@dataclass
class Galaxy:
    """A fixed-center collection of point-mass stars.
    
    Star state is kept structure-of-arrays: ``positions`` is (n, 4) with
    x, y, z and mass packed per row so it can be uploaded to a render
    buffer as-is, and ``velocities`` is (n, 3). The center never moves.
    """
    center: np.ndarray
    positions: np.ndarray
    velocities: np.ndarray
    color: np.ndarray = field(default_factory=lambda: np.ones(4))
    
    def __post_init__(self):
        self.positions = np.asarray(self.positions)
        dtype = self.positions.dtype if self.positions.dtype.kind == 'f' else np.float64
        self.positions = self.positions.astype(dtype, copy=False).reshape(-1, 4)
        self.velocities = np.asarray(self.velocities, dtype=dtype).reshape(-1, 3)
        self.center = np.asarray(self.center, dtype=dtype)
        self.color = np.asarray(self.color, dtype=np.float64)
        
        if self.center.shape != (3,):
            raise ValueError(f"Galaxy center must have 3 components, got shape {self.center.shape}")
        if self.positions.shape[0] != self.velocities.shape[0]:
            raise ValueError(
                f"positions and velocities disagree on star count: "
                f"{self.positions.shape[0]} vs {self.velocities.shape[0]}"
            )
        if self.color.shape == (3,):
            self.color = np.append(self.color, 1.0)
    
    @classmethod
    def from_arrays(
        cls,
        center: Sequence[float],
        xyz,
        masses,
        velocities,
        color: Sequence[float] = (1.0, 1.0, 1.0, 1.0)
    ) -> "Galaxy":
        """Build a galaxy from separate position and mass arrays."""
        xyz = np.asarray(xyz, dtype=np.float64).reshape(-1, 3)
        masses = np.asarray(masses, dtype=np.float64).reshape(-1, 1)
        return cls(center, np.hstack([xyz, masses]), velocities, color)
    
    @property
    def n_stars(self) -> int:
        return self.positions.shape[0]
    
    @property
    def xyz(self) -> np.ndarray:
        """Writable (n, 3) view of the star coordinates."""
        return self.positions[:, :3]
    
    @property
    def masses(self) -> np.ndarray:
        """(n,) view of the star masses."""
        return self.positions[:, 3]
    
    def copy(self) -> "Galaxy":
        return Galaxy(
            self.center.copy(),
            self.positions.copy(),
            self.velocities.copy(),
            self.color.copy()
        )
