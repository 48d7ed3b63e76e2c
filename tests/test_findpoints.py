import sys, os
sys.path.append(os.path.realpath(os.path.dirname(__file__)+"/.."))

import findpoints
from finitefield.quadratic import F25, QuadraticExtension
from elliptic import AffinePoint, Ideal, point_mul
from findpoints import enumerate_curve_points, enumerate_field_elements, find_full_r_torsion_points

A, B = F25(1), F25(1)
FIELD = enumerate_field_elements(5, 3)

# y^2 = x^3 + x + 1 over F(5^2) with t^2 = 3, in search order
GOLDEN_POINTS = [
    ((0, 0), (1, 0)), ((0, 0), (4, 0)),
    ((1, 0), (0, 1)), ((1, 0), (0, 4)),
    ((1, 2), (1, 1)), ((1, 2), (4, 4)),
    ((1, 3), (1, 4)), ((1, 3), (4, 1)),
    ((2, 0), (1, 0)), ((2, 0), (4, 0)),
    ((2, 2), (0, 1)), ((2, 2), (0, 4)),
    ((2, 3), (0, 1)), ((2, 3), (0, 4)),
    ((3, 0), (1, 0)), ((3, 0), (4, 0)),
    ((3, 1), (1, 3)), ((3, 1), (4, 2)),
    ((3, 2), (2, 0)), ((3, 2), (3, 0)),
    ((3, 3), (2, 0)), ((3, 3), (3, 0)),
    ((3, 4), (1, 2)), ((3, 4), (4, 3)),
    ((4, 0), (2, 0)), ((4, 0), (3, 0)),
]

GOLDEN_3_TORSION = [
    ((1, 0), (0, 1)), ((1, 0), (0, 4)),
    ((1, 2), (1, 1)), ((1, 2), (4, 4)),
    ((1, 3), (1, 4)), ((1, 3), (4, 1)),
    ((2, 0), (1, 0)), ((2, 0), (4, 0)),
]


def affine(pairs):
    return [AffinePoint(F25(*x), F25(*y)) for x, y in pairs]


def test_enumerate_field_elements():
    assert len(FIELD) == 25
    assert [(x.a, x.b) for x in FIELD] == [(a, b) for a in range(5) for b in range(5)]
    assert len(set(FIELD)) == 25


def test_enumeration_order_ignores_the_non_residue():
    other = enumerate_field_elements(5)
    assert type(other[0]) is QuadraticExtension(5, 2)
    assert [(x.a, x.b) for x in other] == [(x.a, x.b) for x in FIELD]
    assert len(enumerate_field_elements(7)) == 49


def test_enumerate_curve_points_golden():
    points = enumerate_curve_points(A, B, FIELD)
    assert points == affine(GOLDEN_POINTS)
    # with the point at infinity, #E(F25) = 27
    assert len(points) + 1 == 27


def test_every_enumerated_point_is_on_the_curve():
    for P in enumerate_curve_points(A, B, FIELD):
        assert P.y * P.y == P.x ** 3 + A * P.x + B


def test_enumerate_curve_points_over_a_subset():
    subset = [F25(0), F25(1), F25(4)]
    assert enumerate_curve_points(A, B, subset) == affine([((0, 0), (1, 0)), ((0, 0), (4, 0))])
    assert enumerate_curve_points(A, B, []) == []


def test_three_torsion_golden():
    torsion = find_full_r_torsion_points(3, A, B, FIELD)
    assert torsion == affine(GOLDEN_3_TORSION) + [Ideal()]


def test_torsion_subgroup_properties():
    total = len(enumerate_curve_points(A, B, FIELD)) + 1
    for r in range(1, 10):
        torsion = find_full_r_torsion_points(r, A, B, FIELD)
        assert total % len(torsion) == 0
        assert torsion[-1] == Ideal()
        assert sum(1 for P in torsion if P.isIdeal) == 1
        for P in torsion:
            assert point_mul(r, P, A) == Ideal()


def test_torsion_sizes():
    sizes = [len(find_full_r_torsion_points(r, A, B, FIELD)) for r in (1, 2, 3, 9, 27)]
    assert sizes == [1, 1, 9, 27, 27]


def test_torsion_search_skips_vertical_tangents():
    # on y^2 = x^3 + x every doubling of a y = 0 point fails to invert
    a, b = F25(1), F25(0)
    torsion = find_full_r_torsion_points(2, a, b, FIELD)
    assert torsion[-1] == Ideal()
    assert all(P.isIdeal or P.y != 0 for P in torsion)


def test_main_output(capsys):
    findpoints.main()
    lines = capsys.readouterr().out.splitlines()

    assert lines[0] == "Elements of F(5^2):"
    assert lines[1:26] == [str(x) for x in FIELD]
    assert lines[27] == "Points on the elliptic curve y^2 = x^3 + 1x + 1:"
    assert lines[28:54] == [str(P) for P in affine(GOLDEN_POINTS)]
    assert lines[55] == "Full 3-torsion points on the curve:"
    assert lines[56:] == [str(P) for P in affine(GOLDEN_3_TORSION)] + ["Point at infinity"]
