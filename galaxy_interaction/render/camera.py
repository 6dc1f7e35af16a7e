"""Orbiting camera with smoothed zoom and angles."""

from dataclasses import dataclass
import math


@dataclass
class Camera:
    """Camera orbiting the origin.
    
    ``zoom``, ``lat`` and ``long`` chase their targets exponentially;
    input handlers only ever touch the targets.
    """
    zoom: float = 8.0
    lat: float = 0.5
    long: float = 0.0
    target_zoom: float = 8.0
    target_lat: float = 0.5
    target_long: float = 0.0
    zoom_rate: float = 8.0
    angle_rate: float = 4.0
    
    @classmethod
    def from_config(cls, config) -> "Camera":
        return cls(
            zoom=config.zoom, lat=config.lat, long=config.long,
            target_zoom=config.zoom, target_lat=config.lat, target_long=config.long,
        )
    
    @property
    def distance(self) -> float:
        """Eye distance from the origin."""
        return math.pow(1.2, self.zoom)
    
    def update(self, dt: float):
        """Move the current values toward the targets over ``dt`` seconds."""
        self.zoom += (self.target_zoom - self.zoom) * dt * self.zoom_rate
        self.lat += (self.target_lat - self.lat) * dt * self.angle_rate
        self.long += (self.target_long - self.long) * dt * self.angle_rate
    
    def scroll(self, direction: float):
        """One zoom step out for positive ``direction``, in for negative."""
        if direction > 0:
            self.target_zoom += 1
        elif direction < 0:
            self.target_zoom -= 1
    
    def drag(self, dx: float, dy: float):
        """Orbit by a pointer movement in pixels."""
        self.target_lat += dy / 100
        self.target_long += dx / 100
