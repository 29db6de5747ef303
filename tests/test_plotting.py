import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
from nurbsketch.bezier import generate_bezier_curve
from nurbsketch.b_spline_basis import BSplineBasis
from nurbsketch.plotting import plot_curve

def test_plot_curve():
    points = [(0., 0., 1.), (1., 2., 2.), (3., 0., 1.)]
    curve = generate_bezier_curve(points, 20)
    ax = plot_curve(points, curve, show=False)
    assert len(ax.lines) == 2
    np.testing.assert_allclose(ax.lines[1].get_xydata(), curve)
    plt.close("all")

def test_plot_curve_without_construction_lines():
    points = [(0., 0.), (1., 2.)]
    ax = plot_curve(points, generate_bezier_curve(points, 5), curve_type="spline", show_construction_lines=False, show=False)
    assert len(ax.lines) == 1
    plt.close("all")

def test_plotN():
    basis = BSplineBasis.uniform(5, 2)
    ax = basis.plotN(steps=50, show=False)
    assert len(ax.lines) >= basis.n + 1
    plt.close("all")
