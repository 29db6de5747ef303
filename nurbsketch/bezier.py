"""
Rational Bézier curves evaluated with De Casteljau's algorithm.

Control points are lifted to homogeneous coordinates `(x*w, y*w, w)` and the
three channels go through the same affine reduction. A final perspective
division brings the result back to the plane, which is equivalent to the
rational Bézier formula without computing any Bernstein polynomial.
"""
from typing import Iterable, Union

import numpy as np

from nurbsketch.control_point import CurvePoint, PointLike, as_homogeneous_array


def _lift(array: np.ndarray[np.floating]) -> np.ndarray[np.floating]:
    homogeneous = array.copy()
    homogeneous[:, :2] *= array[:, 2:]
    return homogeneous


def _de_casteljau(
    homogeneous: np.ndarray[np.floating], t: np.ndarray[np.floating]
) -> np.ndarray[np.floating]:
    """
    Reduce the homogeneous control polygon at every parameter of `t` at once.

    Parameters
    ----------
    homogeneous : np.ndarray[np.floating]
        Homogeneous control points of shape (`n`, 3).
    t : np.ndarray[np.floating]
        Parameters of shape (`m`,).

    Returns
    -------
    Q : np.ndarray[np.floating]
        Homogeneous curve points of shape (`m`, 3).
    """
    W = np.repeat(homogeneous[None], t.size, axis=0)
    tt = t[:, None, None]
    for _ in range(homogeneous.shape[0] - 1):
        W = (1 - tt) * W[:, :-1] + tt * W[:, 1:]
    return W[:, 0]


def _perspective_divide(Q: np.ndarray[np.floating]) -> np.ndarray[np.floating]:
    xy = Q[:, :2].copy()
    w = Q[:, 2]
    # a null weight keeps the raw homogeneous coordinates
    non_zero = w != 0
    xy[non_zero] /= w[non_zero, None]
    return xy


def bezier_parameters(steps: int = 100) -> np.ndarray[np.floating]:
    """
    Evenly spaced parameters `i/steps` for `i = 0..steps` in `[0, 1]`.

    Parameters
    ----------
    steps : int, optional
        Number of intervals. `0` gives the single parameter `0`. By default, 100.

    Returns
    -------
    t : np.ndarray[np.floating]
        Array of size `steps + 1`.

    Raises
    ------
    ValueError
        If `steps` is negative.

    Examples
    --------
    >>> bezier_parameters(4)
    array([0.  , 0.25, 0.5 , 0.75, 1.  ])
    """
    steps = int(steps)
    if steps < 0:
        raise ValueError(f"Number of steps must be non negative, got {steps}.")
    if steps == 0:
        return np.zeros(1, dtype="float")
    return np.arange(steps + 1, dtype="float") / steps


def evaluate_bezier_at(
    points: Union[Iterable[PointLike], np.ndarray[np.floating]], t: float
) -> Union[CurvePoint, None]:
    """
    Evaluate the rational Bézier curve defined by `points` at parameter `t`.

    Parameters
    ----------
    points : Union[Iterable[PointLike], np.ndarray[np.floating]]
        Ordered weighted control points. The degree of the curve is
        `len(points) - 1`.
    t : float
        Curve parameter. It is not clamped to `[0, 1]`.

    Returns
    -------
    point : Union[CurvePoint, None]
        Point of the curve, `None` if there is no control point. A single
        control point is returned unchanged (its weight is ignored).

    Examples
    --------
    >>> evaluate_bezier_at([(0, 0), (1, 2), (2, 0)], 0.5)
    CurvePoint(x=1.0, y=1.0)
    """
    array = as_homogeneous_array(points)
    if array.shape[0] == 0:
        return None
    if array.shape[0] == 1:
        return CurvePoint(float(array[0, 0]), float(array[0, 1]))
    Q = _de_casteljau(_lift(array), np.array([t], dtype="float"))
    x, y = _perspective_divide(Q)[0]
    return CurvePoint(float(x), float(y))


def generate_bezier_curve(
    points: Union[Iterable[PointLike], np.ndarray[np.floating]], steps: int = 100
) -> np.ndarray[np.floating]:
    """
    Sample the rational Bézier curve defined by `points` at `steps + 1` parameters.

    Parameters
    ----------
    points : Union[Iterable[PointLike], np.ndarray[np.floating]]
        Ordered weighted control points.
    steps : int, optional
        Number of intervals between samples. By default, 100.

    Returns
    -------
    curve : np.ndarray[np.floating]
        Sampled points of shape (`steps + 1`, 2), or an empty array of shape
        (0, 2) when fewer than 2 control points are given.

    Examples
    --------
    >>> generate_bezier_curve([(0, 0), (2, 2)], steps=2)
    array([[0., 0.],
           [1., 1.],
           [2., 2.]])
    """
    array = as_homogeneous_array(points)
    if array.shape[0] < 2:
        return np.empty((0, 2), dtype="float")
    t = bezier_parameters(steps)
    return _perspective_divide(_de_casteljau(_lift(array), t))
