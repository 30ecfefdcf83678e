# This file marks pyvecmath.utils as a Python package.
# buffers is imported explicitly (pyvecmath.utils.buffers) since it depends on
# pyvecmath.types, which in turn uses the helpers below.

from .helpers import (
    to_single,
    approximately_equal,
    floats_to_bytes,
    bytes_to_floats,
)

__all__ = [
    "to_single",
    "approximately_equal",
    "floats_to_bytes",
    "bytes_to_floats",
]
