"""
Library-wide settings and constants.
"""
import logging


class Settings:
    """
    Constants shared by the vector types and the buffer helpers. These are
    plain class attributes; nothing is read from the environment.
    """

    BYTE_ORDER: str = "<"
    """struct byte-order prefix used by to_bytes/from_bytes (little endian)."""

    COMPONENT_FORMAT: str = "f"
    """struct format character of a single component (IEEE-754 single precision)."""

    COMPONENT_SIZE: int = 4 # bytes
    """Size of one component in bytes; a vector of arity N occupies N * COMPONENT_SIZE."""

    DEFAULT_TOLERANCE: float = 1e-6
    """Default tolerance for almost_equals and approximately_equal."""

    LOG_LEVEL: int = logging.WARNING
    """Level applied by pyvecmath.configure_logging when none is given."""
