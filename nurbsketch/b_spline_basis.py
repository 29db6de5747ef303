from typing import Iterable
import numpy as np
import numba as nb
import scipy.sparse as sps
import matplotlib.pyplot as plt

from nurbsketch.bezier import bezier_parameters


class BSplineBasis:
    """
    B-spline basis in 1D.

    A class representing a one-dimensional B-spline basis: a degree and a knot
    vector. Provides basis function evaluation on a set of parameters as a
    sparse matrix, sampling and clamping of its domain, and visualization.

    Attributes
    ----------
    p : int
        Degree of the polynomials composing the basis.
    knot : np.ndarray[np.floating]
        Knot vector defining the B-spline basis. Contains non-decreasing sequence
        of parameters.
    m : int
        Last index of the knot vector (size - 1).
    n : int
        Last index of the basis functions. When evaluated, returns an array of size
        `n + 1`, i.e. one value per control point.
    span : tuple[float, float]
        Interval of definition of the basis `(knot[p], knot[m - p])`.

    Notes
    -----
    Instances are never modified after creation. Basis functions are evaluated
    with a Cox-de Boor dynamic programming table instead of the recursive
    formula, see `basis_functions`.

    See Also
    --------
    `generate_uniform_knots` : Clamped uniform knot vector used by default.
    `scipy.sparse` : Sparse matrix formats used for basis function evaluations.
    """

    p: int
    knot: np.ndarray[np.floating]
    m: int
    n: int
    span: tuple[float, float]

    def __init__(self, p: int, knot: Iterable[float]):
        """
        Initialize a B-spline basis with specified degree and knot vector.

        Parameters
        ----------
        p : int
            Degree of the B-spline polynomials.
        knot : Iterable[float]
            Knot vector defining the B-spline basis. Must be a non-decreasing sequence
            of real numbers of size at least `p + 2`.

        Examples
        --------
        Create a quadratic B-spline basis with one interior knot:
        >>> basis = BSplineBasis(2, [0., 0., 0., 0.5, 1., 1., 1.])
        >>> basis.n, basis.span
        (3, (0.0, 1.0))
        """
        self.p = int(p)
        self.knot = np.array(knot, dtype="float")
        self.m = self.knot.size - 1
        self.n = self.m - self.p - 1
        self.span = (float(self.knot[self.p]), float(self.knot[self.m - self.p]))

    @classmethod
    def uniform(cls, nb_func: int, p: int) -> "BSplineBasis":
        """
        Create the basis of `nb_func` functions of degree `p` on a clamped uniform
        knot vector.

        Examples
        --------
        >>> BSplineBasis.uniform(5, 3).knot
        array([0. , 0. , 0. , 0. , 0.5, 1. , 1. , 1. , 1. ])
        """
        return cls(p, generate_uniform_knots(nb_func, p))

    def linspace(self, steps: int = 100) -> np.ndarray[np.floating]:
        """
        Generate `steps + 1` evenly spaced parameters over the basis span.

        Contrary to a per-element sampling, the spacing is uniform over the whole
        span `[knot[p], knot[m - p]]`, whatever the knot distribution.

        Parameters
        ----------
        steps : int, optional
            Number of intervals between parameters. `0` gives the start of the
            span only. By default, 100.

        Returns
        -------
        xi : np.ndarray[np.floating]
            Array of parameters of size `steps + 1`.

        Examples
        --------
        >>> basis = BSplineBasis(2, [0., 0., 0., 1., 1., 1.])
        >>> basis.linspace(4)
        array([0.  , 0.25, 0.5 , 0.75, 1.  ])
        """
        lower, upper = self.span
        xi = lower + bezier_parameters(steps) * (upper - lower)
        return np.clip(xi, lower, upper)

    def clamp(self, xi: float) -> float:
        """
        Clamp a parameter into the span of the basis.
        """
        lower, upper = self.span
        return max(lower, min(upper, float(xi)))

    def N(
        self, XI: Iterable[float], closed_end: bool = True
    ) -> sps.coo_matrix:
        """
        Compute the B-spline basis functions at specified parameters.

        Parameters
        ----------
        XI : Iterable[float]
            Parameters at which to evaluate the basis functions. They are not
            clamped into the span: outside of the knot vector every function is 0.
        closed_end : bool, optional
            If `True`, the last non-empty knot interval is closed on the right so
            that the functions still sum to 1 at the end of the span.
            By default, True.

        Returns
        -------
        N : sps.coo_matrix
            Sparse matrix containing the basis function values. Each row corresponds
            to a parameter, each column to a basis function. Shape is
            (`XI.size`, `n + 1`).

        Examples
        --------
        >>> basis = BSplineBasis(2, [0., 0., 0., 1., 1., 1.])
        >>> basis.N([0., 0.5, 1.]).toarray()
        array([[1.  , 0.  , 0.  ],
               [0.25, 0.5 , 0.25],
               [0.  , 0.  , 1.  ]])
        """
        XI = np.asarray(XI, dtype="float").ravel()
        vals, row, col = _N(self.p, self.knot, XI, closed_end)
        N = sps.coo_matrix((vals, (row, col)), shape=(XI.size, self.n + 1))
        return N

    def plotN(self, steps: int = 500, show: bool = True):
        """
        Plot the B-spline basis functions over the span.

        Parameters
        ----------
        steps : int, optional
            Number of sampling intervals over the span. By default, 500.
        show : bool, optional
            Whether to display the plot immediately. Can be useful to add more stuff to the plot.
            By default, True.

        Returns
        -------
        ax : matplotlib.axes.Axes
            Axes the functions were drawn on.

        Notes
        -----
        - Legend is automatically hidden if there are more than 10 basis functions
        - Knots are marked with dotted vertical lines, labelled with their index
          (or index range for repeated knots)
        """
        XI = self.linspace(steps)
        N = self.N(XI).toarray()
        ax = plt.gca()
        for idx in range(self.n + 1):
            ax.plot(XI, N[:, idx], label="$N_{" + str(idx) + "}(t)$")
        ax.set_xlabel("$t$")
        unique_knots, counts = np.unique(self.knot, return_counts=True)
        if unique_knots.size <= 10:
            ylim = ax.get_ylim()
            y_text = ylim[1] + 0.05 * (ylim[1] - ylim[0])
            id = 0
            for xi, n in zip(unique_knots, counts):
                ax.axvline(xi, color="gray", linestyle=":", linewidth=0.8)
                if n == 1:
                    label = f"$t_{{{id}}}$"
                else:
                    label = f"$t_{{{id}-{id + n - 1}}}$"
                ax.text(xi, y_text, label, ha="center", va="bottom", fontsize=10)
                id += n
            ax.set_ylim(ylim[0], y_text + 0.05 * (ylim[1] - ylim[0]))
        if self.n + 1 <= 10:
            ax.legend(loc="best")
        if show:
            plt.show()
        return ax


def generate_uniform_knots(n: int, degree: int) -> np.ndarray[np.floating]:
    """
    Generate the clamped uniform knot vector of `n` basis functions of degree `degree`.

    The vector holds `degree + 1` zeros, `n - degree - 1` interior knots
    `i / (n - degree)` and `degree + 1` ones, for a total size of `n + degree + 1`.

    Parameters
    ----------
    n : int
        Number of control points.
    degree : int
        Degree of the B-spline.

    Returns
    -------
    knot : np.ndarray[np.floating]
        Non-decreasing knot vector.

    Raises
    ------
    ValueError
        If `degree` is negative or if `n < degree + 1`.

    Examples
    --------
    >>> generate_uniform_knots(5, 3)
    array([0. , 0. , 0. , 0. , 0.5, 1. , 1. , 1. , 1. ])
    >>> generate_uniform_knots(3, 2)
    array([0., 0., 0., 1., 1., 1.])
    """
    n, degree = int(n), int(degree)
    if degree < 0:
        raise ValueError(f"Degree must be non negative, got {degree}.")
    if n < degree + 1:
        raise ValueError(
            f"A B-spline of degree {degree} needs at least {degree + 1} control points, got {n}."
        )
    interior = np.arange(1, n - degree, dtype="float") / (n - degree)
    return np.concatenate(
        (np.zeros(degree + 1, dtype="float"), interior, np.ones(degree + 1, dtype="float"))
    )


def basis_functions(
    t: float, degree: int, knots: Iterable[float], closed_end: bool = False
) -> np.ndarray[np.floating]:
    """
    Evaluate every basis function of degree `degree` at parameter `t`.

    Parameters
    ----------
    t : float
        Parameter.
    degree : int
        Degree of the basis.
    knots : Iterable[float]
        Knot vector.
    closed_end : bool, optional
        If `True`, `t` equal to the last knot belongs to the last non-empty knot
        interval, otherwise every interval is half-open and all the functions
        vanish there. By default, False.

    Returns
    -------
    N : np.ndarray[np.floating]
        Array of size `len(knots) - degree - 1`.

    Examples
    --------
    >>> basis_functions(0.5, 2, [0., 0., 0., 1., 1., 1.])
    array([0.25, 0.5 , 0.25])
    >>> basis_functions(1., 2, [0., 0., 0., 1., 1., 1.])
    array([0., 0., 0.])
    >>> basis_functions(1., 2, [0., 0., 0., 1., 1., 1.], closed_end=True)
    array([0., 0., 1.])
    """
    if degree < 0:
        raise ValueError(f"Degree must be non negative, got {degree}.")
    return _cox_de_boor(
        float(t), int(degree) + 1, np.asarray(knots, dtype="float"), bool(closed_end)
    )


def basis_function(
    i: int, k: int, t: float, knots: Iterable[float], closed_end: bool = False
) -> float:
    """
    Evaluate the `i`-th basis function of order `k` (degree `k - 1`) at parameter `t`.

    Cox-de Boor formula: for `k = 1` the function is 1 on `[knots[i], knots[i+1][`
    and 0 elsewhere; for higher orders it blends `N(i, k-1)` and `N(i+1, k-1)`.
    A term whose denominator `knots[i+k-1] - knots[i]` (resp.
    `knots[i+k] - knots[i+1]`) is 0 is skipped.

    Parameters
    ----------
    i : int
        Index of the basis function.
    k : int
        Order of the basis, i.e. degree + 1.
    t : float
        Parameter.
    knots : Iterable[float]
        Knot vector.
    closed_end : bool, optional
        See `basis_functions`. By default, False.

    Returns
    -------
    N_i : float
        Value of the basis function, 0 if `i` does not index a function of the basis.

    Examples
    --------
    >>> basis_function(1, 3, 0.5, [0., 0., 0., 1., 1., 1.])
    0.5
    """
    if k < 1:
        raise ValueError(f"Order must be at least 1, got {k}.")
    N = basis_functions(t, k - 1, knots, closed_end)
    if i < 0 or i >= N.size:
        return 0.0
    return float(N[i])


# %% fast functions for evaluation


@nb.njit(nb.float64[:](nb.float64, nb.int64, nb.float64[:], nb.boolean), cache=True)
def _cox_de_boor(t, k, knot, closed_end):
    """
    Evaluate all the basis functions of order `k` at `t` with a Cox-de Boor
    table.

    Parameters
    ----------
    t : float
        Parameter.
    k : int
        Order of the basis (degree + 1).
    knot : numpy.array of float
        Knot vector.
    closed_end : bool
        Whether `t` equal to the last knot belongs to the last non-empty interval.

    Returns
    -------
    N : numpy.array of float
        Values of the `knot.size - k` basis functions. Column `r` of the table
        holds the functions of order `r + 1`.

    """
    m = knot.size - 1
    nb_func = knot.size - k
    if nb_func <= 0:
        return np.zeros(0, dtype=np.float64)
    table = np.zeros((m, k), dtype=np.float64)
    for i in range(m):
        if knot[i] <= t and t < knot[i + 1]:
            table[i, 0] = 1.0
        elif (
            closed_end
            and t == knot[m]
            and knot[i] < knot[i + 1]
            and knot[i + 1] == knot[m]
        ):
            table[i, 0] = 1.0
    for r in range(1, k):
        for i in range(m - r):
            left = 0.0
            if knot[i + r] != knot[i]:
                left = (t - knot[i]) / (knot[i + r] - knot[i]) * table[i, r - 1]
            right = 0.0
            if knot[i + r + 1] != knot[i + 1]:
                right = (
                    (knot[i + r + 1] - t)
                    / (knot[i + r + 1] - knot[i + 1])
                    * table[i + 1, r - 1]
                )
            table[i, r] = left + right
    return table[:nb_func, k - 1].copy()


@nb.njit(
    nb.types.UniTuple.from_types((nb.float64[:], nb.int64[:], nb.int64[:]))(
        nb.int64, nb.float64[:], nb.float64[:], nb.boolean
    ),
    cache=True,
)
def _N(p, knot, XI, closed_end):
    """
    Compute the non zero values of the basis functions for a set of parameters.

    Parameters
    ----------
    p : int
        Degree of the polynomials composing the basis.
    knot : numpy.array of float
        Knot vector of the BSpline basis.
    XI : numpy.array of float
        Parameters at which the basis is evaluated.
    closed_end : bool
        Whether the last non-empty knot interval is closed on the right.

    Returns
    -------
    (vals, row, col) : (numpy.array of float, numpy.array of int, numpy.array of int)
        Values and indices of the basis functions in the columns for each
        value of `XI` in the rows.

    """
    nb_func = knot.size - p - 1
    nb_val_max = XI.size * max(nb_func, 0)
    vals = np.empty(nb_val_max, dtype=np.float64)
    row = np.empty(nb_val_max, dtype=np.int64)
    col = np.empty(nb_val_max, dtype=np.int64)
    nb_put = 0
    for i_xi in range(XI.size):
        N_xi = _cox_de_boor(XI[i_xi], p + 1, knot, closed_end)
        for i in range(N_xi.size):
            if N_xi[i] != 0.0:
                vals[nb_put] = N_xi[i]
                row[nb_put] = i_xi
                col[nb_put] = i
                nb_put += 1
    return (vals[:nb_put], row[:nb_put], col[:nb_put])
