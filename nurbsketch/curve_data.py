"""
Exchange format of curves and the caller-facing curve generation.

A curve is exported as a plain dictionary, ready for `json.dump`:

    {
        "type": "bezier" | "spline",
        "degree": int,
        "interpolationStep": float,          # splines only
        "controlPoints": [{"x": float, "y": float, "weight": float}, ...],
        "settings": {"steps": int, "showConstructionLines": bool},
        "metadata": {"exportDate": str, "version": "1.0"},
    }
"""
import json
import math
from datetime import datetime, timezone
from numbers import Real
from typing import Iterable, Mapping, Union

import numpy as np

from nurbsketch.control_point import ControlPoint, PointLike, as_homogeneous_array
from nurbsketch.bezier import generate_bezier_curve
from nurbsketch.b_spline import (
    effective_degree,
    generate_b_spline_curve,
    steps_from_interpolation_step,
)
from nurbsketch.settings import CurveSettings
from nurbsketch.validation import CURVE_TYPES

FORMAT_VERSION = "1.0"


def _is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and not math.isnan(value)


def _field(point, name):
    if isinstance(point, Mapping):
        return point.get(name)
    return getattr(point, name, None)


def sanitize_points(raw) -> list[ControlPoint]:
    """
    Turn untrusted point records into control points.

    Records whose `x` or `y` is not a real number (or is NaN) are dropped.
    A missing, null, zero or non numeric weight becomes 1, then every weight is
    clamped into `[WEIGHT_MIN, WEIGHT_MAX]`. Coordinates are kept as is.

    Parameters
    ----------
    raw : Any
        List of mappings or objects with `x`, `y` and optionally `weight`.
        Anything that is not a list or a tuple gives no point.

    Returns
    -------
    points : list[ControlPoint]
        Sanitized control points, in the input order.

    Examples
    --------
    >>> sanitize_points([{"x": 1, "y": 2, "weight": 9}, {"x": "a", "y": 0}, None])
    [ControlPoint(x=1.0, y=2.0, weight=3.0)]
    """
    if not isinstance(raw, (list, tuple)):
        return []
    points = []
    for point in raw:
        if point is None:
            continue
        x, y = _field(point, "x"), _field(point, "y")
        if not (_is_number(x) and _is_number(y)):
            continue
        weight = _field(point, "weight")
        if not _is_number(weight) or weight == 0:
            weight = 1.0
        points.append(ControlPoint.make(x, y, weight))
    return points


def export_curve_data(
    points: Union[Iterable[PointLike], np.ndarray[np.floating]],
    curve_type: Union[str, None] = None,
    settings: Union[CurveSettings, None] = None,
) -> dict:
    """
    Build the exchange dictionary of a curve.

    Parameters
    ----------
    points : Union[Iterable[PointLike], np.ndarray[np.floating]]
        Control points of the curve.
    curve_type : Union[str, None], optional
        `"bezier"` or `"spline"`. If `None`, `settings.curve_type` is used.
        By default, None.
    settings : Union[CurveSettings, None], optional
        Settings to export along the points. If `None`, default settings are used.
        By default, None.

    Returns
    -------
    data : dict
        Exchange dictionary, see the module documentation.

    Raises
    ------
    ValueError
        If the curve type is unknown.
    """
    if settings is None:
        settings = CurveSettings()
    if curve_type is None:
        curve_type = settings.curve_type
    if curve_type not in CURVE_TYPES:
        raise ValueError(
            f"Unknown curve type {curve_type!r}. Supported types: {', '.join(CURVE_TYPES)}."
        )
    array = as_homogeneous_array(points)
    control_points = [
        {"x": float(x), "y": float(y), "weight": float(w)} for x, y, w in array
    ]
    metadata = {
        "exportDate": datetime.now(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z"),
        "version": FORMAT_VERSION,
    }
    if curve_type == "bezier":
        return {
            "type": "bezier",
            "degree": max(0, len(control_points) - 1),
            "controlPoints": control_points,
            "settings": {
                "steps": settings.bezier_steps,
                "showConstructionLines": settings.show_construction_lines,
            },
            "metadata": metadata,
        }
    return {
        "type": "spline",
        "degree": settings.spline_degree,
        "interpolationStep": settings.spline_step,
        "controlPoints": control_points,
        "settings": {
            "steps": settings.spline_steps,
            "showConstructionLines": settings.show_construction_lines,
        },
        "metadata": metadata,
    }


def import_curve_data(
    data: Mapping, settings: Union[CurveSettings, None] = None
) -> tuple[str, list[ControlPoint], CurveSettings]:
    """
    Read an exchange dictionary.

    Parameters
    ----------
    data : Mapping
        Exchange dictionary, see the module documentation.
    settings : Union[CurveSettings, None], optional
        Current settings, left untouched. If `None`, default settings are used.
        By default, None.

    Returns
    -------
    curve_type : str
        Family of the imported curve.
    points : list[ControlPoint]
        Sanitized control points, see `sanitize_points`.
    settings : CurveSettings
        New settings whose curve type is the imported one. For splines, the
        degree and the interpolation step are taken from the data when present
        (a step that is not a strictly positive number is ignored).

    Raises
    ------
    ValueError
        If `data` has no known `"type"` or no `"controlPoints"` list.
    """
    if not isinstance(data, Mapping) or not data.get("type"):
        raise ValueError("Invalid curve data format: missing curve type.")
    if not isinstance(data.get("controlPoints"), list):
        raise ValueError("Invalid curve data format: controlPoints must be a list.")
    curve_type = data["type"]
    if curve_type not in CURVE_TYPES:
        raise ValueError(
            f"Unknown curve type {curve_type!r}. Supported types: {', '.join(CURVE_TYPES)}."
        )
    if settings is None:
        settings = CurveSettings()
    points = sanitize_points(data["controlPoints"])
    changes = {"curve_type": curve_type}
    if curve_type == "spline":
        if data.get("degree"):
            changes["spline_degree"] = int(data["degree"])
        step = data.get("interpolationStep")
        if _is_number(step) and step > 0:
            changes["spline_step"] = float(step)
    return curve_type, points, settings.replace(**changes)


def _json_path(filepath: str) -> str:
    ext = filepath.split(".")[-1]
    if ext != "json":
        raise ValueError(f"Unknown extension {ext}. Supported extension: json.")
    return filepath


def save_curve_data(data: dict, filepath: str, verbose: bool = False) -> None:
    """
    Save an exchange dictionary to a json file.
    """
    with open(_json_path(filepath), "w") as f:
        json.dump(data, f, indent=2)
    if verbose:
        print("JSON: " + filepath + " written")


def load_curve_data(filepath: str) -> dict:
    """
    Load an exchange dictionary from a json file.
    """
    with open(_json_path(filepath), "r") as f:
        return json.load(f)


def generate_curve(
    points: Union[Iterable[PointLike], np.ndarray[np.floating]],
    settings: CurveSettings,
) -> np.ndarray[np.floating]:
    """
    Sample the curve described by `points` and `settings`.

    Bézier curves use `settings.bezier_steps` intervals. B-splines use the
    effective degree `min(settings.spline_degree, len(points) - 1)` and
    `ceil(1 / settings.spline_step)` intervals.

    Parameters
    ----------
    points : Union[Iterable[PointLike], np.ndarray[np.floating]]
        Ordered weighted control points.
    settings : CurveSettings
        Evaluation context.

    Returns
    -------
    curve : np.ndarray[np.floating]
        Sampled points of shape (`m`, 2), empty when fewer than 2 points are given
        or when the interpolation step of a B-spline is not strictly positive.
    """
    array = as_homogeneous_array(points)
    if array.shape[0] < 2 or (settings.curve_type == "spline" and not settings.spline_step > 0):
        return np.empty((0, 2), dtype="float")
    if settings.curve_type == "bezier":
        return generate_bezier_curve(array, settings.bezier_steps)
    degree = effective_degree(settings.spline_degree, array.shape[0])
    steps = steps_from_interpolation_step(settings.spline_step)
    return generate_b_spline_curve(array, degree, steps)
