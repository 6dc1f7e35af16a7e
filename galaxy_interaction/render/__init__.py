"""Presentation layer: camera and 3D point rendering."""

from galaxy_interaction.render.camera import Camera
from galaxy_interaction.render.renderer_3d import Renderer3D

__all__ = ["Camera", "Renderer3D"]
