# Basic package metadata.

__version__ = "0.1.0"

import logging

from .settings import Settings
from .types import Vector2, Vector3, Vector4
from .utils.buffers import pack_vectors, unpack_vectors, as_array


def configure_logging(level=None):
    """Installs a basic root handler; the library itself never adds handlers."""
    logging.basicConfig(level=Settings.LOG_LEVEL if level is None else level)


__all__ = [
    "Vector2", "Vector3", "Vector4",
    "Settings", "configure_logging",
    "pack_vectors", "unpack_vectors", "as_array",
    "__version__",
]
