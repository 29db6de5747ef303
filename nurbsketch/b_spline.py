"""
Rational B-spline (NURBS) curves on clamped knot vectors.

A point of the curve is the weighted average `sum(N_i(t) w_i P_i) / sum(N_i(t) w_i)`
of the control points, `N_i` being the Cox-de Boor basis functions of the
knot vector. The valid parameter domain is `[knots[degree], knots[n]]`, `n`
being the number of control points.
"""
from typing import Iterable, Union

import numpy as np

from nurbsketch.control_point import CurvePoint, PointLike, as_homogeneous_array
from nurbsketch.b_spline_basis import (
    BSplineBasis,
    basis_functions,
    generate_uniform_knots,
)


def effective_degree(requested_degree: int, point_count: int) -> int:
    """
    Degree actually usable with `point_count` control points.

    Examples
    --------
    >>> effective_degree(3, 3)
    2
    >>> effective_degree(3, 10)
    3
    """
    return max(0, min(int(requested_degree), int(point_count) - 1))


def steps_from_interpolation_step(step: float) -> int:
    """
    Number of sampling intervals `ceil(1 / step)` matching an interpolation step.

    Raises
    ------
    ValueError
        If `step` is not strictly positive.

    Examples
    --------
    >>> steps_from_interpolation_step(0.01)
    100
    >>> steps_from_interpolation_step(0.3)
    4
    """
    if not step > 0:
        raise ValueError(f"Interpolation step must be strictly positive, got {step}.")
    return int(np.ceil(1 / step))


def _knot_vector(
    n: int, degree: int, knots: Union[Iterable[float], None]
) -> np.ndarray[np.floating]:
    if knots is None:
        return generate_uniform_knots(n, degree)
    knots = np.array(knots, dtype="float")
    if knots.size != n + degree + 1:
        raise ValueError(
            f"Knot vector of size {knots.size} doesn't match {n} control points of degree {degree}, "
            f"expected size {n + degree + 1}."
        )
    return knots


def _weights(array: np.ndarray[np.floating]) -> np.ndarray[np.floating]:
    # unset weights (0 or NaN) count as 1
    w = array[:, 2]
    return np.where((w == 0) | np.isnan(w), 1.0, w)


def evaluate_b_spline_at(
    points: Union[Iterable[PointLike], np.ndarray[np.floating]],
    t: float,
    degree: int,
    knots: Union[Iterable[float], None] = None,
) -> Union[CurvePoint, None]:
    """
    Evaluate the rational B-spline defined by `points` at parameter `t`.

    Parameters
    ----------
    points : Union[Iterable[PointLike], np.ndarray[np.floating]]
        Ordered weighted control points. A weight of 0 (or NaN) is read as 1.
    t : float
        Curve parameter. It is clamped into `[knots[degree], knots[n]]`.
    degree : int
        Degree of the B-spline.
    knots : Union[Iterable[float], None], optional
        Knot vector of size `n + degree + 1`. If `None`, the clamped uniform knot
        vector is used. By default, None.

    Returns
    -------
    point : Union[CurvePoint, None]
        Point of the curve, or `None` if there are fewer than `degree + 1`
        control points. If the weighted basis sum is 0 the raw weighted sum is
        returned.

    Notes
    -----
    At the end of the domain the last non-empty knot interval is treated as
    closed, so that `t = knots[n]` gives the last point of the curve.

    Examples
    --------
    >>> evaluate_b_spline_at([(0, 0), (1, 2), (2, 0)], 0.5, 2)
    CurvePoint(x=1.0, y=1.0)
    """
    array = as_homogeneous_array(points)
    n = array.shape[0]
    if n == 0 or degree < 0 or n < degree + 1:
        return None
    basis = BSplineBasis(degree, _knot_vector(n, degree, knots))
    N = basis_functions(basis.clamp(t), degree, basis.knot, closed_end=True)
    Nw = N * _weights(array)
    weight_sum = Nw.sum()
    x, y = Nw @ array[:, :2]
    if weight_sum != 0:
        x, y = x / weight_sum, y / weight_sum
    return CurvePoint(float(x), float(y))


def generate_b_spline_curve(
    points: Union[Iterable[PointLike], np.ndarray[np.floating]],
    degree: int = 3,
    steps: int = 100,
    knots: Union[Iterable[float], None] = None,
) -> np.ndarray[np.floating]:
    """
    Sample the rational B-spline defined by `points` at `steps + 1` parameters
    evenly spread over `[knots[degree], knots[n]]`.

    Parameters
    ----------
    points : Union[Iterable[PointLike], np.ndarray[np.floating]]
        Ordered weighted control points. A weight of 0 (or NaN) is read as 1.
    degree : int, optional
        Degree of the B-spline. By default, 3.
    steps : int, optional
        Number of intervals between samples. By default, 100.
    knots : Union[Iterable[float], None], optional
        Knot vector of size `n + degree + 1`. If `None`, the clamped uniform knot
        vector is used. By default, None.

    Returns
    -------
    curve : np.ndarray[np.floating]
        Sampled points of shape (`steps + 1`, 2), or an empty array of shape
        (0, 2) when there are fewer than `degree + 1` control points.

    Notes
    -----
    The whole curve is evaluated at once with the sparse basis matrix of
    `BSplineBasis.N`, giving the same points as `evaluate_b_spline_at`.

    Examples
    --------
    >>> generate_b_spline_curve([(0, 0), (1, 1), (2, 2)], degree=2, steps=2)
    array([[0., 0.],
           [1., 1.],
           [2., 2.]])
    """
    array = as_homogeneous_array(points)
    n = array.shape[0]
    if n == 0 or degree < 0 or n < degree + 1:
        return np.empty((0, 2), dtype="float")
    basis = BSplineBasis(degree, _knot_vector(n, degree, knots))
    N = basis.N(basis.linspace(steps)).tocsr()
    w = _weights(array)
    xy = N @ (array[:, :2] * w[:, None])
    weight_sum = N @ w
    non_zero = weight_sum != 0
    xy[non_zero] /= weight_sum[non_zero, None]
    return np.asarray(xy, dtype="float")
