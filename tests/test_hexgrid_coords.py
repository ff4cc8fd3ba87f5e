import dataclasses
from fractions import Fraction

import pytest

from hexgrid import Axial, Cube, CubeInvariantError, Direction


def test_cube_invariant():
    c = Cube(1, -2, 1)
    assert c.x + c.y + c.z == 0
    assert c.coords() == (1, -2, 1)


def test_cube_accepts_valid_triple():
    assert Cube(1, -1, 0).coords() == (1, -1, 0)


def test_cube_rejects_invalid_triple():
    with pytest.raises(CubeInvariantError) as excinfo:
        Cube(1, 1, 1)
    err = excinfo.value
    assert (err.x, err.y, err.z) == (1, 1, 1)
    assert "(1, 1, 1)" in str(err)


def test_cube_fields_are_read_only():
    c = Cube(1, -1, 0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        c.x = 5  # type: ignore[misc]


def test_unchecked_skips_validation():
    c = Cube.unchecked(1, 1, 1)
    assert c.coords() == (1, 1, 1)
    # stepping an invalid value does not raise
    c.neighbor(Direction.N)


def test_unchecked_equals_checked_for_valid_values():
    assert Cube.unchecked(2, -3, 1) == Cube(2, -3, 1)
    assert hash(Cube.unchecked(2, -3, 1)) == hash(Cube(2, -3, 1))


def test_axial_accepts_any_pair():
    a = Axial(7, -100)
    assert (a.q, a.r) == (7, -100)
    assert Axial.origin() == Axial(0, 0)
    assert Cube.origin() == Cube(0, 0, 0)


def test_axial_is_hashable_value():
    assert {Axial(1, 2), Axial(1, 2), Axial(2, 1)} == {Axial(1, 2), Axial(2, 1)}


def test_axial_arithmetic():
    assert Axial(1, 2) + Axial(3, -1) == Axial(4, 1)
    assert Axial(1, 2) - Axial(3, -1) == Axial(-2, 3)


def test_cube_arithmetic_preserves_invariant():
    total = Cube(1, -2, 1) + Cube(0, 3, -3)
    assert total == Cube(1, 1, -2)
    diff = Cube(1, -2, 1) - Cube(0, 3, -3)
    assert sum(diff.coords()) == 0


def test_mixed_arithmetic_is_unsupported():
    with pytest.raises(TypeError):
        Axial(1, 0) + Cube(1, -1, 0)  # type: ignore[operator]


def test_fractional_components():
    c = Cube(Fraction(1, 2), Fraction(-1, 2), Fraction(0))
    assert c.to_axial() == Axial(Fraction(1, 2), Fraction(0))
    with pytest.raises(CubeInvariantError):
        Cube(Fraction(1, 2), Fraction(1, 2), Fraction(0))
