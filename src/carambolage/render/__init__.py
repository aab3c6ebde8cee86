"""
Render module - Collaborators between the vehicle core and a renderer.

This module contains:
- Model: Protocol for per-car draw sinks
- NullModel, RecordingModel: Headless draw sinks
- Camera: View and projection matrices
"""

from carambolage.render.model import Model, NullModel, RecordingModel
from carambolage.render.camera import Camera, CameraConfig

__all__ = [
    "Model",
    "NullModel",
    "RecordingModel",
    "Camera",
    "CameraConfig",
]
