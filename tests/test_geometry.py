import pytest

from meshgen2d.geometry import Cartesian2D, Polynomial, StraightLine2D

TOL = 1e-6


def _has_root(roots, expected):
    return any(abs(r - expected) < TOL for r in roots)


def test_quadratic_roots():
    poly = Polynomial([1.0, -5.0, 6.0])
    roots = poly.roots()
    assert len(roots) == 2
    for expected in (2.0, 3.0):
        assert _has_root(roots, complex(expected, 0.0))


def test_fourth_order_roots():
    poly = Polynomial([1.0, -10.0, 35.0, -50.0, 24.0])
    roots = poly.roots()
    assert len(roots) == 4
    for expected in (1.0, 2.0, 3.0, 4.0):
        assert _has_root(roots, complex(expected, 0.0))
    assert sorted(poly.real_roots()) == pytest.approx([1.0, 2.0, 3.0, 4.0], abs=TOL)


def test_tenth_order_real_roots_are_among_roots():
    poly = Polynomial(
        [1.0, -2.3, 3.45, -4.56, 1.23, -0.78, 0.56, -0.34, 0.12, -0.05, 1.0]
    )
    roots = poly.roots()
    assert len(roots) == 10
    for r in poly.real_roots():
        assert any(abs(root.real - r) < 1e-12 and abs(root.imag) < 1e-8 for root in roots)


def test_constant_polynomial_has_no_roots():
    assert Polynomial([5.0]).roots() == []
    assert Polynomial([5.0]).order() == 0


def test_empty_polynomial_rejected():
    with pytest.raises(ValueError):
        Polynomial([])


def test_complex_roots_not_real():
    poly = Polynomial([1.0, 0.0, 1.0])
    assert poly.real_roots() == []
    roots = poly.roots()
    assert _has_root(roots, 1j)
    assert _has_root(roots, -1j)


def test_polynomial_evaluation():
    poly = Polynomial([1.0, 2.0, -3.0, 4.0])
    assert poly.solve(2.0) == pytest.approx(14.0)
    assert poly.eqn()(0.0) == pytest.approx(4.0)


def test_print_straight_line():
    assert str(StraightLine2D(2.0, 3.0)) == "y = 2.00x + 3.00"
    assert str(StraightLine2D(1.0, 0.0)) == "y = 1.00x"
    assert str(StraightLine2D(0.0, 4.5)) == "y = 4.50"
    assert str(StraightLine2D(0.0, 0.0)) == "y = 0"


def test_print_poly():
    assert str(Polynomial([1.0, 2.0, -3.0, 4.0])) == "y = 1.00x^3 + 2.00x^2 - 3.00x + 4.00"


def test_print_poly_leading_negative_and_zero_terms():
    assert str(Polynomial([-2.0, 0.0, 1.5])) == "y = -2.00x^2 + 1.50"
    assert str(Polynomial([0.0, 0.0])) == "y = 0"


def test_straight_line_solve():
    line = StraightLine2D(2.0, 3.0)
    assert line.solve(4.0) == pytest.approx(11.0)
    assert line.eqn()(-1.0) == pytest.approx(1.0)


def test_line_from_points():
    line = StraightLine2D.from_cartesian_points(Cartesian2D(0.0, 1.0), Cartesian2D(2.0, 5.0))
    assert line.m == pytest.approx(2.0)
    assert line.c == pytest.approx(1.0)


def test_line_from_vertical_points_rejected():
    with pytest.raises(ValueError):
        StraightLine2D.from_cartesian_points(Cartesian2D(1.0, 0.0), Cartesian2D(1.0, 3.0))