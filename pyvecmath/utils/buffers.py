"""
Contiguous float buffers built from many vectors, e.g. vertex data handed to
a native graphics API in one call.
"""
import ctypes
import logging

import numpy as np

from pyvecmath.settings import Settings
from pyvecmath.types.vector import Vector2, Vector3, Vector4
from pyvecmath.utils.helpers import bytes_to_floats

logger = logging.getLogger(__name__)

VECTOR_TYPES = (Vector2, Vector3, Vector4)


def pack_vectors(vectors) -> ctypes.Array:
    """
    Copies ``vectors`` back to back into a new ``c_float`` array.

    Every vector must be of the same type. The result holds
    ``len(vectors) * arity`` floats with no padding between vectors.
    """
    vectors = list(vectors)
    if not vectors:
        raise ValueError("Cannot pack an empty sequence of vectors.")
    vector_type = type(vectors[0])
    if vector_type not in VECTOR_TYPES:
        raise TypeError(f"Cannot pack objects of type {vector_type.__name__}.")
    if any(type(v) is not vector_type for v in vectors):
        raise ValueError(f"All vectors in a buffer must be {vector_type.__name__}.")

    stride = ctypes.sizeof(vector_type)
    buffer = (ctypes.c_float * (len(vectors) * len(vectors[0])))()
    base = ctypes.addressof(buffer)
    for i, vector in enumerate(vectors):
        ctypes.memmove(base + i * stride, ctypes.addressof(vector), stride)
    logger.debug(f"Packed {len(vectors)} {vector_type.__name__} into {ctypes.sizeof(buffer)} bytes.")
    return buffer


def unpack_vectors(buffer, vector_type) -> list:
    """
    Splits a flat float buffer into a list of ``vector_type``.

    ``buffer`` may be any sequence of floats (including a ``ctypes`` array)
    or a bytes-like object holding little-endian single-precision floats.
    """
    if vector_type not in VECTOR_TYPES:
        raise TypeError(f"Cannot unpack into {getattr(vector_type, '__name__', vector_type)}.")
    if isinstance(buffer, (bytes, bytearray, memoryview)):
        data = bytes(buffer)
        if len(data) % Settings.COMPONENT_SIZE:
            raise ValueError(f"Buffer of {len(data)} bytes is not a whole number of floats.")
        floats = bytes_to_floats(data, len(data) // Settings.COMPONENT_SIZE)
    else:
        floats = list(buffer)

    arity = len(vector_type._fields_)
    if len(floats) % arity:
        raise ValueError(f"Buffer of {len(floats)} floats does not divide into {vector_type.__name__}.")
    vectors = [vector_type(*floats[i:i + arity]) for i in range(0, len(floats), arity)]
    logger.debug(f"Unpacked {len(vectors)} {vector_type.__name__} from {len(floats)} floats.")
    return vectors


def as_array(vectors) -> np.ndarray:
    """Returns the packed vectors as a ``float32`` array of shape ``(count, arity)``."""
    vectors = list(vectors)
    buffer = pack_vectors(vectors)
    return np.ctypeslib.as_array(buffer).reshape(len(vectors), len(vectors[0]))
