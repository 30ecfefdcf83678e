import ctypes
import math
import numbers

import numpy as np

from pyvecmath.settings import Settings
from pyvecmath.utils.helpers import approximately_equal, bytes_to_floats, floats_to_bytes, to_single


class _Constant:
    """Class-level vector constant; every access returns a fresh instance."""

    def __init__(self, *components):
        self.components = components

    def __get__(self, instance, owner):
        return owner(*self.components)


class _FloatVector(ctypes.Structure):
    """
    Shared plumbing for the fixed-size vectors.

    Subclasses declare their components as ``c_float`` fields, so an instance
    occupies exactly ``len(_fields_) * 4`` bytes with the components in
    declaration order. The arithmetic itself lives on each subclass.
    """

    __hash__ = None  # mutable value type

    @classmethod
    def _arity(cls) -> int:
        return len(cls._fields_)

    def _check_count(self, args: tuple) -> None:
        if args and len(args) != self._arity():
            raise TypeError(
                f"{type(self).__name__} takes exactly {self._arity()} components, got {len(args)}"
            )

    def components(self) -> tuple:
        """Returns the component values in declaration order."""
        return tuple(getattr(self, name) for name, _ in self._fields_)

    def __iter__(self):
        return iter(self.components())

    def __len__(self) -> int:
        return self._arity()

    def __str__(self) -> str:
        # np.float32 prints the shortest text that round-trips in single precision
        return "(" + ", ".join(str(np.float32(c)) for c in self.components()) + ")"

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={np.float32(getattr(self, name))}" for name, _ in self._fields_)
        return f"{type(self).__name__}({fields})"

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.components() == other.components()

    def __neg__(self):
        return type(self)(*(-c for c in self.components()))

    def __mul__(self, scalar: float):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        scalar = float(scalar)
        return type(self)(*(c * scalar for c in self.components()))

    def __rmul__(self, scalar: float):
        return self.__mul__(scalar)

    def __add__(self, other):
        if not isinstance(other, _FloatVector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, _FloatVector):
            return NotImplemented
        return self.sub(other)

    def copy(self):
        """Returns an independent copy; no memory is shared with the original."""
        return type(self)(*self.components())

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    @property
    def length_squared(self) -> float:
        """
        Sum of the squared components, rounded to single precision like every
        other scalar result. Cheaper than ``length`` for comparisons.
        """
        return to_single(sum(c * c for c in self.components()))

    @property
    def length(self) -> float:
        return to_single(math.sqrt(self.length_squared))

    def normalize(self):
        """
        Returns a new vector scaled to unit length.

        The division happens in single precision and is not guarded: a
        zero-length vector produces NaN components instead of raising.
        """
        values = np.array(self.components(), dtype=np.float32)
        with np.errstate(divide='ignore', invalid='ignore'):
            values = values / np.float32(self.length)
        return type(self)(*values.tolist())

    def almost_equals(self, other, tolerance: float = Settings.DEFAULT_TOLERANCE) -> bool:
        """Component-wise comparison within ``tolerance``; ``==`` is exact."""
        if type(other) is not type(self):
            return False
        return all(approximately_equal(a, b, tolerance)
                   for a, b in zip(self.components(), other.components()))

    def float_view(self):
        """
        Borrows the backing memory as a ``c_float`` array of ``len(self)`` items.

        Reads and writes go straight to this vector. The view is unchecked and
        only meaningful while the vector is alive.
        """
        return (ctypes.c_float * self._arity()).from_buffer(self)

    def as_pointer(self):
        """Unchecked ``POINTER(c_float)`` to the first component, for native calls."""
        return ctypes.cast(ctypes.pointer(self), ctypes.POINTER(ctypes.c_float))

    def to_bytes(self) -> bytes:
        """Packs the vector into ``len(self) * 4`` bytes, little-endian floats."""
        return floats_to_bytes(self.components())

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    @classmethod
    def from_bytes(cls, data: bytes, offset: int = 0):
        """Unpacks a vector from ``len(cls._fields_) * 4`` little-endian bytes."""
        size = cls._arity() * Settings.COMPONENT_SIZE
        if len(data) - offset < size:
            raise ValueError(f"Not enough bytes to unpack {cls.__name__}. Need {size}.")
        return cls(*bytes_to_floats(data, cls._arity(), offset))


class Vector2(_FloatVector):
    """A 2D vector with X and Y components."""
    _fields_ = [
        ("X", ctypes.c_float),
        ("Y", ctypes.c_float),
    ]

    def __init__(self, *args, **kwargs):
        if len(args) == 1 and isinstance(args[0], _FloatVector):
            # Narrowing from Vector3/Vector4 keeps X and Y.
            src = args[0]
            super().__init__(src.X, src.Y)
            return
        self._check_count(args)
        super().__init__(*args, **kwargs)

    def add(self, other: _FloatVector) -> _FloatVector:
        """Adds ``other``; a wider operand's extra components pass through."""
        if isinstance(other, Vector2):
            return Vector2(self.X + other.X, self.Y + other.Y)
        if isinstance(other, Vector3):
            return Vector3(self.X + other.X, self.Y + other.Y, other.Z)
        if isinstance(other, Vector4):
            return Vector4(self.X + other.X, self.Y + other.Y, other.Z, other.W)
        raise TypeError(f"Cannot add {type(other).__name__} to Vector2.")

    def sub(self, other: _FloatVector) -> _FloatVector:
        """Subtracts ``other``. A Vector4 operand contributes its W negated."""
        if isinstance(other, Vector2):
            return Vector2(self.X - other.X, self.Y - other.Y)
        if isinstance(other, Vector3):
            return Vector3(self.X - other.X, self.Y - other.Y, other.Z)
        if isinstance(other, Vector4):
            return Vector4(self.X - other.X, self.Y - other.Y, other.Z, -other.W)
        raise TypeError(f"Cannot subtract {type(other).__name__} from Vector2.")

    def dot(self, other: _FloatVector) -> float:
        """Dot product over X and Y; components beyond Y are ignored."""
        if not isinstance(other, _FloatVector):
            raise TypeError("Can only calculate dot product with another vector.")
        return to_single(self.X * other.X + self.Y * other.Y)

    def scale(self, sx: float, sy: float) -> "Vector2":
        return Vector2(self.X * sx, self.Y * sy)


class Vector3(_FloatVector):
    """A 3D vector with X, Y, and Z components."""
    _fields_ = [
        ("X", ctypes.c_float),
        ("Y", ctypes.c_float),
        ("Z", ctypes.c_float),
    ]

    def __init__(self, *args, **kwargs):
        if len(args) == 1 and isinstance(args[0], _FloatVector):
            src = args[0]
            if isinstance(src, Vector2):
                super().__init__(src.X, src.Y, 0.0)
            else:
                super().__init__(src.X, src.Y, src.Z)
            return
        self._check_count(args)
        super().__init__(*args, **kwargs)

    def add(self, other: _FloatVector) -> _FloatVector:
        if isinstance(other, Vector2):
            return Vector3(self.X + other.X, self.Y + other.Y, self.Z)
        if isinstance(other, Vector3):
            return Vector3(self.X + other.X, self.Y + other.Y, self.Z + other.Z)
        if isinstance(other, Vector4):
            # W unaffected
            return Vector4(self.X + other.X, self.Y + other.Y, self.Z + other.Z, other.W)
        raise TypeError(f"Cannot add {type(other).__name__} to Vector3.")

    def sub(self, other: _FloatVector) -> _FloatVector:
        if isinstance(other, Vector2):
            return Vector3(self.X - other.X, self.Y - other.Y, self.Z)
        if isinstance(other, Vector3):
            return Vector3(self.X - other.X, self.Y - other.Y, self.Z - other.Z)
        if isinstance(other, Vector4):
            return Vector4(self.X - other.X, self.Y - other.Y, self.Z - other.Z, -other.W)
        raise TypeError(f"Cannot subtract {type(other).__name__} from Vector3.")

    def dot(self, other: _FloatVector) -> float:
        """Calculates the dot product over the components both vectors share."""
        if isinstance(other, Vector2):
            return to_single(self.X * other.X + self.Y * other.Y)
        if isinstance(other, (Vector3, Vector4)):
            return to_single(self.X * other.X + self.Y * other.Y + self.Z * other.Z)
        raise TypeError("Can only calculate dot product with another vector.")

    def cross(self, other: "Vector3") -> "Vector3":
        """Calculates the cross product with another Vector3."""
        if not isinstance(other, Vector3):
            raise TypeError("Can only calculate cross product with another Vector3.")
        return Vector3(
            self.Y * other.Z - self.Z * other.Y,
            self.Z * other.X - self.X * other.Z,
            self.X * other.Y - self.Y * other.X,
        )

    def scale(self, sx: float, sy: float, sz: float) -> "Vector3":
        return Vector3(self.X * sx, self.Y * sy, self.Z * sz)


class Vector4(_FloatVector):
    """
    A 4D vector with X, Y, Z, and W components.

    W is treated as a homogeneous coordinate by the mixed-arity arithmetic of
    the narrower types: it passes through ``Vector3.add`` untouched and is
    negated by ``Vector3.sub``. Widening conversions still zero-fill it.
    """
    _fields_ = [
        ("X", ctypes.c_float),
        ("Y", ctypes.c_float),
        ("Z", ctypes.c_float),
        ("W", ctypes.c_float),
    ]

    def __init__(self, *args, **kwargs):
        if len(args) == 1 and isinstance(args[0], _FloatVector):
            src = args[0]
            if isinstance(src, Vector2):
                super().__init__(src.X, src.Y, 0.0, 0.0)
            elif isinstance(src, Vector3):
                super().__init__(src.X, src.Y, src.Z, 0.0)
            else:
                super().__init__(src.X, src.Y, src.Z, src.W)
            return
        self._check_count(args)
        super().__init__(*args, **kwargs)

    def add(self, other: _FloatVector) -> "Vector4":
        """Adds ``other``; components ``other`` lacks are kept from this vector."""
        if isinstance(other, Vector2):
            return Vector4(self.X + other.X, self.Y + other.Y, self.Z, self.W)
        if isinstance(other, Vector3):
            return Vector4(self.X + other.X, self.Y + other.Y, self.Z + other.Z, self.W)
        if isinstance(other, Vector4):
            return Vector4(self.X + other.X, self.Y + other.Y, self.Z + other.Z, self.W + other.W)
        raise TypeError(f"Cannot add {type(other).__name__} to Vector4.")

    def sub(self, other: _FloatVector) -> "Vector4":
        if isinstance(other, Vector2):
            return Vector4(self.X - other.X, self.Y - other.Y, self.Z, self.W)
        if isinstance(other, Vector3):
            return Vector4(self.X - other.X, self.Y - other.Y, self.Z - other.Z, self.W)
        if isinstance(other, Vector4):
            return Vector4(self.X - other.X, self.Y - other.Y, self.Z - other.Z, self.W - other.W)
        raise TypeError(f"Cannot subtract {type(other).__name__} from Vector4.")

    def dot(self, other: _FloatVector) -> float:
        if isinstance(other, Vector2):
            return to_single(self.X * other.X + self.Y * other.Y)
        if isinstance(other, Vector3):
            return to_single(self.X * other.X + self.Y * other.Y + self.Z * other.Z)
        if isinstance(other, Vector4):
            return to_single(self.X * other.X + self.Y * other.Y + self.Z * other.Z + self.W * other.W)
        raise TypeError("Can only calculate dot product with another vector.")

    def scale(self, sx: float, sy: float, sz: float, sw: float) -> "Vector4":
        return Vector4(self.X * sx, self.Y * sy, self.Z * sz, self.W * sw)


Vector2.ZERO = _Constant(0.0, 0.0)
Vector2.UNIT_X = _Constant(1.0, 0.0)
Vector2.UNIT_Y = _Constant(0.0, 1.0)

Vector3.ZERO = _Constant(0.0, 0.0, 0.0)
Vector3.UNIT_X = _Constant(1.0, 0.0, 0.0)
Vector3.UNIT_Y = _Constant(0.0, 1.0, 0.0)
Vector3.UNIT_Z = _Constant(0.0, 0.0, 1.0)

Vector4.ZERO = _Constant(0.0, 0.0, 0.0, 0.0)
Vector4.UNIT_X = _Constant(1.0, 0.0, 0.0, 0.0)
Vector4.UNIT_Y = _Constant(0.0, 1.0, 0.0, 0.0)
Vector4.UNIT_Z = _Constant(0.0, 0.0, 1.0, 0.0)
Vector4.UNIT_W = _Constant(0.0, 0.0, 0.0, 1.0)
