from typing import Iterable, NamedTuple, Union

import numpy as np

from nurbsketch.control_point import PointLike, as_homogeneous_array


class BoundingBox(NamedTuple):
    """
    Axis aligned bounding box of a set of points.
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float
    width: float
    height: float

    def to_dict(self) -> dict:
        return {
            "minX": self.min_x,
            "minY": self.min_y,
            "maxX": self.max_x,
            "maxY": self.max_y,
            "width": self.width,
            "height": self.height,
        }


def _xy(point: PointLike) -> np.ndarray[np.floating]:
    return as_homogeneous_array([point])[0, :2]


def distance(p1: PointLike, p2: PointLike) -> float:
    """
    Euclidean distance between two points. Weights are ignored.

    Examples
    --------
    >>> distance((0, 0), (3, 4))
    5.0
    """
    dx, dy = _xy(p2) - _xy(p1)
    return float(np.hypot(dx, dy))


def get_bounding_box(
    points: Union[Iterable[PointLike], np.ndarray[np.floating]]
) -> Union[BoundingBox, None]:
    """
    Compute the bounding box of a set of points.

    Parameters
    ----------
    points : Union[Iterable[PointLike], np.ndarray[np.floating]]
        Control points or sampled curve points.

    Returns
    -------
    bbox : Union[BoundingBox, None]
        Bounding box of the points, or `None` if there is no point.

    Examples
    --------
    >>> get_bounding_box([(0, 1), (4, -1)])
    BoundingBox(min_x=0.0, min_y=-1.0, max_x=4.0, max_y=1.0, width=4.0, height=2.0)
    """
    xy = as_homogeneous_array(points)[:, :2]
    if xy.shape[0] == 0:
        return None
    min_x, min_y = xy.min(axis=0)
    max_x, max_y = xy.max(axis=0)
    return BoundingBox(
        float(min_x),
        float(min_y),
        float(max_x),
        float(max_y),
        float(max_x - min_x),
        float(max_y - min_y),
    )


def find_nearest_control_point(
    points: Union[Iterable[PointLike], np.ndarray[np.floating]],
    target: PointLike,
    threshold: float = 15,
) -> int:
    """
    Find the index of the control point closest to `target`.

    Only points strictly closer than `threshold` are candidates. When several
    points are at the same distance, the first one wins.

    Parameters
    ----------
    points : Union[Iterable[PointLike], np.ndarray[np.floating]]
        Control points to search.
    target : PointLike
        Point to look around.
    threshold : float, optional
        Search radius. By default, 15.

    Returns
    -------
    index : int
        Index of the nearest point, or -1 if no point is closer than `threshold`.

    Examples
    --------
    >>> find_nearest_control_point([(0, 0), (10, 0), (100, 100)], (1, 0), 15)
    0
    """
    xy = as_homogeneous_array(points)[:, :2]
    target_xy = _xy(target)
    nearest_index = -1
    min_distance = threshold
    for i in range(xy.shape[0]):
        d = float(np.hypot(*(xy[i] - target_xy)))
        if d < min_distance:
            min_distance = d
            nearest_index = i
    return nearest_index


def interpolate_curves(
    curve1: np.ndarray[np.floating], curve2: np.ndarray[np.floating], t: float
) -> np.ndarray[np.floating]:
    """
    Blend two sampled curves point by point.

    The shorter curve is padded with its last point so that the result has
    as many points as the longer one. Used to animate the transition between
    two states of a curve.

    Parameters
    ----------
    curve1 : np.ndarray[np.floating]
        Starting curve of shape (`m1`, 2).
    curve2 : np.ndarray[np.floating]
        Ending curve of shape (`m2`, 2).
    t : float
        Blending factor, 0 gives `curve1` and 1 gives `curve2`.

    Returns
    -------
    curve : np.ndarray[np.floating]
        Blended curve of shape (`max(m1, m2)`, 2).
    """
    curve1 = np.asarray(curve1, dtype="float").reshape((-1, 2))
    curve2 = np.asarray(curve2, dtype="float").reshape((-1, 2))
    if curve1.shape[0] == 0:
        return curve2.copy()
    if curve2.shape[0] == 0:
        return curve1.copy()
    size = max(curve1.shape[0], curve2.shape[0])
    a = np.vstack((curve1, np.repeat(curve1[-1:], size - curve1.shape[0], axis=0)))
    b = np.vstack((curve2, np.repeat(curve2[-1:], size - curve2.shape[0], axis=0)))
    return a + (b - a) * t
