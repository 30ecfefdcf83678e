import copy
import math
import os
import sys
import warnings
from fractions import Fraction

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import numpy as np
import pytest

from pyvecmath import Vector2, Vector3, Vector4
from pyvecmath.utils import to_single


def test_widening_from_vector2_zero_fills_z():
    assert Vector3(Vector2(1, 2)) == Vector3(1, 2, 0)


def test_narrowing_from_vector4_drops_w():
    assert Vector3(Vector4(1, 2, 3, 4)) == Vector3(1, 2, 3)


def test_component_count_is_enforced():
    with pytest.raises(TypeError):
        Vector3(1, 2)
    with pytest.raises(TypeError):
        Vector3(1, 2, 3, 4)


def test_keyword_components():
    assert Vector3(X=1, Z=3) == Vector3(1, 0, 3)


def test_values_are_stored_in_single_precision():
    v = Vector3(0.1, 0, 0)
    assert v.X != 0.1
    assert abs(v.X - 0.1) < 1e-7


def test_add_and_sub_same_arity():
    a = Vector3(1.5, -2, 0.3)
    b = Vector3(0.7, 4, -9)
    assert a + b == b + a
    assert a - b == -(b - a)
    assert Vector3(1, 2, 3) + Vector3(4, 5, 6) == Vector3(5, 7, 9)


def test_add_vector2_keeps_z():
    assert Vector3(1, 2, 3).add(Vector2(10, 20)) == Vector3(11, 22, 3)
    assert Vector3(1, 2, 3).sub(Vector2(10, 20)) == Vector3(-9, -18, 3)


def test_add_vector4_leaves_w_unaffected():
    assert Vector3(1, 2, 3).add(Vector4(4, 5, 6, 7)) == Vector4(5, 7, 9, 7)
    assert Vector3(1, 2, 3) + Vector4(4, 5, 6, 7) == Vector4(5, 7, 9, 7)


def test_sub_vector4_negates_w():
    assert Vector3(1, 2, 3).sub(Vector4(4, 5, 6, 7)) == Vector4(-3, -3, -3, -7)
    assert Vector3(1, 2, 3) - Vector4(4, 5, 6, 7) == Vector4(-3, -3, -3, -7)


def test_operands_are_not_mutated():
    a = Vector3(1, 2, 3)
    b = Vector4(4, 5, 6, 7)
    a.add(b)
    a.sub(b)
    a.normalize()
    a.scale(2, 2, 2)
    assert a == Vector3(1, 2, 3)
    assert b == Vector4(4, 5, 6, 7)


def test_dot():
    assert Vector3(1, 2, 3).dot(Vector3(4, 5, 6)) == 32.0
    assert Vector3(1, 2, 3).dot(Vector4(4, 5, 6, 100)) == 32.0
    assert Vector3(1, 2, 3).dot(Vector2(4, 5)) == 14.0


def test_cross():
    assert Vector3.UNIT_X.cross(Vector3.UNIT_Y) == Vector3.UNIT_Z
    assert Vector3(1, 2, 3).cross(Vector3(4, 5, 6)) == Vector3(-3, 6, -3)


def test_cross_is_anticommutative():
    a = Vector3(0.3, -1.25, 7)
    b = Vector3(2.5, 0.1, -4)
    assert a.cross(b) == -(b.cross(a))
    assert a.cross(a) == Vector3.ZERO


def test_cross_rejects_other_arities():
    with pytest.raises(TypeError):
        Vector3(1, 2, 3).cross(Vector4(1, 2, 3, 4))


def test_length_squared_equals_self_dot():
    v = Vector3(0.3, -1.7, 2.9)
    assert v.length_squared == v.dot(v)
    assert Vector3(2, 3, 6).length == 7.0


def test_length_is_recomputed():
    v = Vector3(3, 4, 0)
    assert v.length == 5.0
    v.Z = 12
    assert v.length == 13.0


def test_normalize_has_unit_length():
    for v in (Vector3(1, 2, 3), Vector3(-0.5, 100, 3e-3), Vector3(0, 0, 2)):
        assert abs(v.normalize().length - 1.0) < 1e-6


def test_normalize_zero_vector_gives_nan():
    # A zero-length vector is not guarded against: the components come back
    # as NaN rather than raising.
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        n = Vector3(0, 0, 0).normalize()
    assert all(math.isnan(c) for c in n)


def test_scale():
    assert Vector3(1, 2, 3).scale(2, 0, -1) == Vector3(2, 0, -3)


def test_negation_and_uniform_scale():
    assert -Vector3(1, -2, 3) == Vector3(-1, 2, -3)
    assert Vector3(1, 2, 3) * 0.5 == Vector3(0.5, 1, 1.5)


def test_str():
    assert str(Vector3(1, 2, 3)) == "(1.0, 2.0, 3.0)"


def test_copies_are_independent():
    a = Vector3(1, 2, 3)
    for b in (a.copy(), copy.copy(a), copy.deepcopy(a), Vector3(a)):
        b.Y = 42
        assert a.Y == 2.0


def test_unhashable():
    with pytest.raises(TypeError):
        hash(Vector3(1, 2, 3))


def test_iteration_and_len():
    assert list(Vector3(1, 2, 3)) == [1.0, 2.0, 3.0]
    assert len(Vector3()) == 3


def test_almost_equals():
    assert Vector3(1, 2, 3).almost_equals(Vector3(1, 2, 3.0000001))
    assert not Vector3(1, 2, 3).almost_equals(Vector3(1, 2, 3.1))
    assert not Vector3(1, 2, 0).almost_equals(Vector2(1, 2))


def test_str_uses_shortest_single_precision_text():
    assert str(Vector3(0.1, 0.2, 0.3)) == "(0.1, 0.2, 0.3)"
    assert repr(Vector3(0.1, -2, 0)) == "Vector3(X=0.1, Y=-2.0, Z=0.0)"


def test_scalar_results_are_single_precision():
    v = Vector3(0.1, 0.2, 0.3)
    assert to_single(v.length_squared) == v.length_squared
    assert to_single(v.length) == v.length
    assert to_single(v.dot(Vector3(0.7, 0.1, 0.9))) == v.dot(Vector3(0.7, 0.1, 0.9))
    assert v.length_squared == v.dot(v)


def test_length_overflows_to_inf():
    v = Vector3(1e20, 0, 0)
    assert math.isinf(v.length_squared)
    assert math.isinf(v.length)
    assert math.isinf(v.dot(v))
    assert v.normalize() == Vector3(0, 0, 0)


def test_length_underflows_to_zero():
    v = Vector3(1e-30, 0, 0)
    assert v.X != 0.0
    assert v.length_squared == 0.0
    assert v.length == 0.0
    n = v.normalize()
    assert math.isinf(n.X)
    assert math.isnan(n.Y) and math.isnan(n.Z)


def test_constants_are_fresh_instances():
    Vector3.ZERO.float_view()[0] = 1
    Vector3.UNIT_X.X = 5
    assert Vector3.ZERO == Vector3(0, 0, 0)
    assert Vector3.UNIT_X == Vector3(1, 0, 0)
    assert Vector3.ZERO is not Vector3.ZERO


def test_uniform_scale_accepts_any_real():
    scaled = Vector3(1, 2, 3) * np.float32(2)
    assert isinstance(scaled, Vector3)
    assert scaled == Vector3(2, 4, 6)
    assert Vector3(1, 2, 3) * Fraction(1, 2) == Vector3(0.5, 1, 1.5)
    with pytest.raises(TypeError):
        Vector3(1, 2, 3) * "2"
