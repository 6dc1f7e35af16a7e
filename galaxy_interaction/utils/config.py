"""Configuration management."""

import json
import warnings
import yaml
from typing import Optional, Tuple
from pathlib import Path
from dataclasses import dataclass, asdict


@dataclass
class Config:
    """Simulation configuration."""
    # Initial conditions
    stars_per_galaxy: int = 40000
    galaxy_a_center: Tuple[float, float, float] = (-1.0, 0.0, -0.5)
    galaxy_a_invert: bool = False
    galaxy_a_color: Tuple[float, ...] = (1.0, 0.5, 1.0, 1.0)
    galaxy_b_center: Tuple[float, float, float] = (1.0, 0.0, 0.5)
    galaxy_b_invert: bool = True
    galaxy_b_color: Tuple[float, ...] = (0.5, 1.0, 1.0, 1.0)
    
    # Physics
    time_step: float = 0.0005
    cross_weight: float = 2.0
    
    # Scheduling
    tick_rate: float = 120.0
    stall_threshold: float = 0.2
    max_ticks_per_frame: int = 8
    
    # Camera
    zoom: float = 8.0
    lat: float = 0.5
    long: float = 0.0
    
    # Reproducibility
    seed: Optional[int] = None
    
    def __post_init__(self):
        # YAML/JSON hand back lists
        self.galaxy_a_center = tuple(float(c) for c in self.galaxy_a_center)
        self.galaxy_b_center = tuple(float(c) for c in self.galaxy_b_center)
        self.galaxy_a_color = _rgba(self.galaxy_a_color)
        self.galaxy_b_color = _rgba(self.galaxy_b_color)
    
    def validate(self) -> "Config":
        """Check value ranges.
        
        Raises:
            ValueError: If any parameter is out of range
        """
        if len(self.galaxy_a_center) != 3 or len(self.galaxy_b_center) != 3:
            raise ValueError("Galaxy centers must have exactly 3 components")
        if self.tick_rate <= 0:
            raise ValueError(f"tick_rate must be positive, got {self.tick_rate}")
        if self.time_step < 0:
            raise ValueError(f"time_step must be non-negative, got {self.time_step}")
        if self.stall_threshold <= 0:
            raise ValueError(f"stall_threshold must be positive, got {self.stall_threshold}")
        if self.max_ticks_per_frame < 1:
            raise ValueError(f"max_ticks_per_frame must be at least 1, got {self.max_ticks_per_frame}")
        if self.stall_threshold < 1.0 / self.tick_rate:
            warnings.warn(
                f"stall_threshold={self.stall_threshold}s is shorter than one tick period "
                f"({1.0 / self.tick_rate:.4f}s); normal frames will reset the clock.",
                UserWarning
            )
        return self


def _rgba(color) -> Tuple[float, ...]:
    color = tuple(float(c) for c in color)
    if len(color) == 3:
        color = color + (1.0,)
    if len(color) != 4:
        raise ValueError(f"Color must have 3 or 4 components, got {len(color)}")
    return color


def load_config(config_path: str) -> Config:
    """Load configuration from file.
    
    Args:
        config_path: Path to config file (.json or .yaml)
        
    Returns:
        Config object
    """
    config_path = Path(config_path)
    
    with open(config_path, 'r') as f:
        if config_path.suffix in ('.yaml', '.yml'):
            data = yaml.safe_load(f) or {}
        elif config_path.suffix == '.json':
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported config format: {config_path.suffix}. Use .json or .yaml")
    
    return Config(**data)


def save_config(config: Config, output_path: str):
    """Save configuration to file.
    
    Args:
        config: Config object
        output_path: Output file path (.json or .yaml)
    """
    output_path = Path(output_path)
    if output_path.suffix not in ('.json', '.yaml', '.yml'):
        raise ValueError(f"Unsupported config format: {output_path.suffix}. Use .json or .yaml")
    data = asdict(config)
    # Plain lists keep safe_load happy
    for key, value in data.items():
        if isinstance(value, tuple):
            data[key] = list(value)
    
    with open(output_path, 'w') as f:
        if output_path.suffix in ('.yaml', '.yml'):
            yaml.safe_dump(data, f, default_flow_style=False)
        else:
            json.dump(data, f, indent=2)
