from typing import Iterable, Union

import numpy as np

from nurbsketch.control_point import PointLike, as_homogeneous_array
from nurbsketch.geometry import get_bounding_box
from nurbsketch.b_spline import effective_degree

CURVE_TYPES = ("bezier", "spline")


def validate_curve(
    points: Union[Iterable[PointLike], np.ndarray[np.floating], None],
    curve_type: str,
    degree: int = 3,
) -> bool:
    """
    Tell whether `points` are enough to build a curve of the given family.

    A Bézier curve needs at least 2 points, a B-spline of degree `degree` needs
    at least `degree + 1` points. No point at all, or an unknown `curve_type`,
    is always invalid.

    Examples
    --------
    >>> validate_curve([(0, 0), (1, 1)], "bezier")
    True
    >>> validate_curve([(0, 0), (1, 1)], "spline", degree=3)
    False
    """
    if points is None:
        return False
    nb_points = as_homogeneous_array(points).shape[0]
    if nb_points == 0:
        return False
    if curve_type == "bezier":
        return nb_points >= 2
    if curve_type == "spline":
        return nb_points >= degree + 1
    return False


def validate_curve_report(
    points: Union[Iterable[PointLike], np.ndarray[np.floating], None],
    curve_type: str,
    degree: int = 3,
) -> dict:
    """
    Validate a curve and explain why it is invalid.

    Returns
    -------
    report : dict
        `{"isValid": bool, "errors": list[str], "warnings": list[str]}`.
    """
    nb_points = 0 if points is None else as_homogeneous_array(points).shape[0]
    errors = []
    if nb_points == 0:
        errors.append("No control point defined")
    elif curve_type == "bezier" and nb_points < 2:
        errors.append("A Bézier curve needs at least 2 control points")
    elif curve_type == "spline" and nb_points < degree + 1:
        errors.append(
            f"A B-spline of degree {degree} needs at least {degree + 1} control points"
        )
    elif curve_type not in CURVE_TYPES:
        errors.append(f"Unknown curve type {curve_type!r}")
    return {
        "isValid": validate_curve(points, curve_type, degree),
        "errors": errors,
        "warnings": [],
    }


def curve_statistics(
    points: Union[Iterable[PointLike], np.ndarray[np.floating]],
    curve_type: str,
    degree: int = 3,
) -> dict:
    """
    Summary of a set of control points.

    Parameters
    ----------
    points : Union[Iterable[PointLike], np.ndarray[np.floating]]
        Control points.
    curve_type : str
        `"bezier"` or `"spline"`.
    degree : int, optional
        Requested B-spline degree. By default, 3.

    Returns
    -------
    stats : dict
        Dictionary with keys `"pointCount"`, `"degree"` (`pointCount - 1` for a
        Bézier curve, the effective degree for a B-spline), `"boundingBox"`
        (`BoundingBox` or `None`), `"totalWeight"` and `"averageWeight"`.

    Examples
    --------
    >>> curve_statistics([(0, 0, 1), (2, 1, 3)], "spline")["degree"]
    1
    """
    array = as_homogeneous_array(points)
    nb_points = array.shape[0]
    if nb_points == 0:
        return {
            "pointCount": 0,
            "degree": 0,
            "boundingBox": None,
            "totalWeight": 0.0,
            "averageWeight": 0.0,
        }
    total_weight = float(array[:, 2].sum())
    if curve_type == "bezier":
        curve_degree = nb_points - 1
    else:
        curve_degree = effective_degree(degree, nb_points)
    return {
        "pointCount": nb_points,
        "degree": curve_degree,
        "boundingBox": get_bounding_box(array),
        "totalWeight": total_weight,
        "averageWeight": total_weight / nb_points,
    }
