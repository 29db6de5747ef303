from typing import Iterable, Mapping, NamedTuple, Union

import numpy as np

WEIGHT_MIN = 0.1
WEIGHT_MAX = 3.0


def clamp_weight(weight: float) -> float:
    """
    Clamp a control point weight into `[WEIGHT_MIN, WEIGHT_MAX]`.

    Examples
    --------
    >>> clamp_weight(0.)
    0.1
    >>> clamp_weight(5.)
    3.0
    """
    return max(WEIGHT_MIN, min(WEIGHT_MAX, float(weight)))


class _ControlPointFields(NamedTuple):
    x: float
    y: float
    weight: float


class ControlPoint(_ControlPointFields):
    """
    Weighted 2D control point.

    The weight is clamped into `[WEIGHT_MIN, WEIGHT_MAX]` when the point is
    created, so a control point never carries a weight of 0.

    Attributes
    ----------
    x : float
        Abscissa of the point.
    y : float
        Ordinate of the point.
    weight : float
        Rational weight of the point. By default, 1.

    Examples
    --------
    >>> ControlPoint(1, 2, weight=10)
    ControlPoint(x=1.0, y=2.0, weight=3.0)
    """

    __slots__ = ()

    def __new__(cls, x: float, y: float, weight: float = 1.0) -> "ControlPoint":
        return super().__new__(cls, float(x), float(y), clamp_weight(weight))

    @classmethod
    def make(cls, x: float, y: float, weight: float = 1.0) -> "ControlPoint":
        """
        Create a control point, clamping its weight into `[WEIGHT_MIN, WEIGHT_MAX]`.
        Same as calling `ControlPoint(x, y, weight)`.
        """
        return cls(x, y, weight)

    def with_weight(self, weight: float) -> "ControlPoint":
        """
        Return a copy of the point with a new (clamped) weight.
        """
        return ControlPoint.make(self.x, self.y, weight)

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "weight": self.weight}


class CurvePoint(NamedTuple):
    """
    Sampled point of a curve.
    """

    x: float
    y: float


PointLike = Union[ControlPoint, CurvePoint, Mapping, tuple, list]


def _row(point) -> tuple[float, float, float]:
    if isinstance(point, Mapping):
        weight = point.get("weight", 1.0)
        return (
            float(point["x"]),
            float(point["y"]),
            1.0 if weight is None else float(weight),
        )
    if hasattr(point, "x") and hasattr(point, "y"):
        weight = getattr(point, "weight", 1.0)
        return (
            float(point.x),
            float(point.y),
            1.0 if weight is None else float(weight),
        )
    values = tuple(point)
    if len(values) == 2:
        return (float(values[0]), float(values[1]), 1.0)
    if len(values) == 3:
        return (float(values[0]), float(values[1]), float(values[2]))
    raise ValueError(
        f"Can't understand point {point!r}. Expected (x, y) or (x, y, weight)."
    )


def as_homogeneous_array(
    points: Union[Iterable[PointLike], np.ndarray[np.floating]]
) -> np.ndarray[np.floating]:
    """
    Convert a sequence of point-likes into a fresh array of `(x, y, weight)` rows.

    Parameters
    ----------
    points : Union[Iterable[PointLike], np.ndarray[np.floating]]
        Control points given as `ControlPoint` instances, mappings with keys
        `"x"`, `"y"` and optionally `"weight"`, `(x, y)` or `(x, y, weight)`
        tuples, or an array of shape (`n`, 2) or (`n`, 3).
        Points without a weight get a weight of 1.

    Returns
    -------
    array : np.ndarray[np.floating]
        Array of shape (`n`, 3). The input is never modified, even when it
        already is an array of the right shape.

    Raises
    ------
    ValueError
        If a point can't be read as 2 or 3 numbers.

    Examples
    --------
    >>> as_homogeneous_array([(0, 0), {"x": 1, "y": 2, "weight": 2}])
    array([[0., 0., 1.],
           [1., 2., 2.]])
    """
    if isinstance(points, np.ndarray):
        array = np.array(points, dtype="float")
        if array.size == 0:
            return np.empty((0, 3), dtype="float")
        if array.ndim != 2 or array.shape[1] not in (2, 3):
            raise ValueError(
                f"Control points array shape {array.shape} not understood. Expected (n, 2) or (n, 3)."
            )
        if array.shape[1] == 2:
            array = np.hstack((array, np.ones((array.shape[0], 1), dtype="float")))
        return array
    rows = [_row(point) for point in points]
    if not rows:
        return np.empty((0, 3), dtype="float")
    return np.array(rows, dtype="float")
