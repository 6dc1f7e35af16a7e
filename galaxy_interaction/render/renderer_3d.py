"""3D renderer using matplotlib."""

import math
import time
from typing import Optional, Sequence, Tuple
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from galaxy_interaction.physics.galaxy import Galaxy
from galaxy_interaction.render.base import Renderer
from galaxy_interaction.render.camera import Camera

FIELD_OF_VIEW = math.radians(45)


def point_colors(positions: np.ndarray, color, alpha: float) -> np.ndarray:
    """Per-star RGBA: the galaxy color scaled by each star's mass.
    
    Args:
        positions: (n, 4) x, y, z, mass buffer
        color: Galaxy RGB or RGBA color
        alpha: Opacity applied to every star
        
    Returns:
        (n, 4) RGBA array clipped to [0, 1]
    """
    rgba = np.empty((positions.shape[0], 4))
    rgba[:, :3] = np.asarray(color, dtype=np.float64)[:3] * positions[:, 3:4]
    rgba[:, 3] = alpha
    return np.clip(rgba, 0.0, 1.0)


class Renderer3D(Renderer):
    """Real-time point renderer on a black matplotlib 3D axis.
    
    Scroll to zoom, drag with the left button to orbit.
    """
    
    def __init__(
        self,
        camera: Optional[Camera] = None,
        figsize: Tuple[int, int] = (10, 10),
        dpi: int = 100,
        point_size: float = 0.5,
        alpha: float = 0.5,
        max_points: Optional[int] = 20000,
        fps_overlay: bool = True
    ):
        """Initialize 3D renderer.
        
        Args:
            camera: Camera state (default camera if None)
            figsize: Figure size
            dpi: Dots per inch
            point_size: Marker size for stars
            alpha: Star opacity
            max_points: Draw at most this many stars per galaxy (None for all)
            fps_overlay: Show frames per second in the corner
        """
        self.camera = camera or Camera()
        self.figsize = figsize
        self.dpi = dpi
        self.point_size = point_size
        self.alpha = alpha
        self.max_points = max_points
        self.fps_overlay = fps_overlay
        self.fig: Optional[Figure] = None
        self.ax = None
        self.initialized = False
        self._closed = False
        self._drag_origin = None
        self._last_frame_time: Optional[float] = None
        self._fps = 0.0
    
    def _initialize(self):
        """Create the figure and hook up input handlers."""
        if self.initialized:
            return
        self.fig = plt.figure(figsize=self.figsize, dpi=self.dpi)
        self.ax = self.fig.add_subplot(111, projection='3d')
        self.fig.patch.set_facecolor('black')
        self.ax.disable_mouse_rotation()
        
        self.fig.canvas.mpl_connect('scroll_event', self._on_scroll)
        self.fig.canvas.mpl_connect('button_press_event', self._on_press)
        self.fig.canvas.mpl_connect('button_release_event', self._on_release)
        self.fig.canvas.mpl_connect('motion_notify_event', self._on_motion)
        self.fig.canvas.mpl_connect('close_event', self._on_close)
        
        plt.show(block=False)
        plt.pause(0.1)
        self.initialized = True
    
    def _on_scroll(self, event):
        # Wheel up zooms in
        self.camera.scroll(-event.step)
    
    def _on_press(self, event):
        if event.button == 1:
            self._drag_origin = (event.x, event.y)
    
    def _on_release(self, event):
        if event.button == 1:
            self._drag_origin = None
    
    def _on_motion(self, event):
        if self._drag_origin is None or event.x is None:
            return
        x0, y0 = self._drag_origin
        self.camera.drag(event.x - x0, y0 - event.y)
        self._drag_origin = (event.x, event.y)
    
    def _on_close(self, event):
        self._closed = True
    
    @property
    def is_open(self) -> bool:
        return not self._closed
    
    def _subsample(self, positions: np.ndarray) -> np.ndarray:
        if self.max_points is None or positions.shape[0] <= self.max_points:
            return positions
        stride = int(math.ceil(positions.shape[0] / self.max_points))
        return positions[::stride]
    
    def render(self, galaxies: Sequence[Galaxy]):
        """Render current frame."""
        if self._closed:
            raise RuntimeError("Renderer has been closed")
        self._initialize()
        
        now = time.perf_counter()
        if self._last_frame_time is not None:
            frame_dt = now - self._last_frame_time
            self.camera.update(frame_dt)
            if frame_dt > 0:
                self._fps = 1.0 / frame_dt
        self._last_frame_time = now
        
        self.ax.clear()
        self.ax.set_facecolor('black')
        self.ax.set_axis_off()
        
        for galaxy in galaxies:
            pts = self._subsample(galaxy.positions)
            self.ax.scatter(
                pts[:, 0], pts[:, 1], pts[:, 2],
                c=point_colors(pts, galaxy.color, self.alpha), s=self.point_size,
                edgecolors='none', depthshade=False
            )
        
        half_range = self.camera.distance * math.tan(FIELD_OF_VIEW / 2)
        self.ax.set_xlim(-half_range, half_range)
        self.ax.set_ylim(-half_range, half_range)
        self.ax.set_zlim(-half_range, half_range)
        self.ax.view_init(elev=math.degrees(self.camera.lat), azim=math.degrees(self.camera.long))
        
        if self.fps_overlay:
            self.ax.text2D(0.02, 0.95, f"{self._fps:.1f} FPS",
                           transform=self.ax.transAxes, color='white')
        
        plt.draw()
        plt.pause(0.001)
    
    def close(self):
        """Close the renderer."""
        if self.fig is not None:
            plt.close(self.fig)
            self.fig = None
            self.ax = None
            self.initialized = False
        self._closed = True
