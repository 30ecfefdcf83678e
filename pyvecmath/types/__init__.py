# Main __init__.py for the types sub-package

from .vector import Vector2, Vector3, Vector4

__all__ = ["Vector2", "Vector3", "Vector4"]
