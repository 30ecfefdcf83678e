import ctypes
import struct

from pyvecmath.settings import Settings


def to_single(value: float) -> float:
    """Rounds a Python float to single precision; out-of-range values become +-inf."""
    return ctypes.c_float(value).value

def approximately_equal(a: float, b: float, tolerance: float = Settings.DEFAULT_TOLERANCE) -> bool:
    """Checks if two floats are approximately equal within a tolerance."""
    return abs(a - b) < tolerance

def floats_to_bytes(values) -> bytes:
    """Packs a sequence of floats as little-endian single-precision values."""
    values = list(values)
    return struct.pack(Settings.BYTE_ORDER + Settings.COMPONENT_FORMAT * len(values), *values)

def bytes_to_floats(data: bytes, count: int, offset: int = 0) -> tuple:
    """Unpacks ``count`` little-endian single-precision floats starting at ``offset``."""
    size = count * Settings.COMPONENT_SIZE
    if len(data) - offset < size:
        raise ValueError(f"Not enough bytes to unpack {count} floats. Need {size}.")
    return struct.unpack_from(Settings.BYTE_ORDER + Settings.COMPONENT_FORMAT * count, data, offset)
