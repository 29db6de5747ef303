from typing import Iterable, Union

import numpy as np
import matplotlib as mpl
import matplotlib.pyplot as plt

from nurbsketch.control_point import PointLike, as_homogeneous_array

CURVE_COLORS = {"bezier": "#e91e63", "spline": "#4caf50"}


def plot_curve(
    points: Union[Iterable[PointLike], np.ndarray[np.floating]],
    curve: np.ndarray[np.floating],
    curve_type: str = "bezier",
    show_construction_lines: bool = True,
    ax: Union[mpl.axes.Axes, None] = None,
    ctrl_color: str = "#1b9e77",
    curve_color: Union[str, None] = None,
    show: bool = True,
) -> mpl.axes.Axes:
    """
    Plot a sampled curve and its control points using Matplotlib.

    Parameters
    ----------
    points : Union[Iterable[PointLike], np.ndarray[np.floating]]
        Control points of the curve. Each marker is sized after the point weight.
    curve : np.ndarray[np.floating]
        Sampled curve of shape (`m`, 2), as returned by the curve generators.
        Nothing is drawn for the curve if it has fewer than 2 points.
    curve_type : str, optional
        `"bezier"` or `"spline"`, only used to pick the default curve color.
        By default, "bezier".
    show_construction_lines : bool, optional
        Whether to draw the control polygon. By default, True.
    ax : Union[mpl.axes.Axes, None], optional
        Matplotlib axes for plotting. If None, creates a new figure and axes.
        By default, None.
    ctrl_color : str, optional
        Color of the control points and of the control polygon.
        By default, '#1b9e77' (green).
    curve_color : Union[str, None], optional
        Color of the curve. If None, '#e91e63' is used for Bézier curves and
        '#4caf50' for B-splines. By default, None.
    show : bool, optional
        Whether to display the plot immediately. By default, True.

    Returns
    -------
    ax : mpl.axes.Axes
        Axes the curve was drawn on.
    """
    array = as_homogeneous_array(points)
    curve = np.asarray(curve, dtype="float").reshape((-1, 2))
    if curve_color is None:
        curve_color = CURVE_COLORS.get(curve_type, "#7570b3")
    if ax is None:
        ax = plt.figure().add_subplot()
    if show_construction_lines and array.shape[0] > 1:
        ax.plot(
            array[:, 0], array[:, 1], linestyle="--", c=ctrl_color, alpha=0.5,
            label="Control polygon", zorder=0,
        )
    if array.shape[0] > 0:
        sizes = plt.rcParams["lines.markersize"] ** 2 * array[:, 2]
        ax.scatter(
            array[:, 0], array[:, 1], s=sizes, marker="o", c=ctrl_color,
            label="Control points", zorder=2,
        )  # type: ignore
    if curve.shape[0] > 1:
        ax.plot(curve[:, 0], curve[:, 1], c=curve_color, lw=2, label=curve_type, zorder=1)
        ax.scatter(curve[[0, -1], 0], curve[[0, -1], 1], marker="s", c=curve_color, zorder=1)  # type: ignore
    ax.legend()
    ax.set_aspect(1)
    if show:
        plt.show()
    return ax
