import numpy as np
import pytest
from nurbsketch.control_point import ControlPoint, CurvePoint
from nurbsketch.bezier import bezier_parameters, evaluate_bezier_at, generate_bezier_curve

@pytest.fixture
def cubic_points():
    """Unit weight control points of a cubic Bézier curve."""
    return [ControlPoint(0., 0.), ControlPoint(1., 3.), ControlPoint(3., 3.), ControlPoint(4., 0.)]

@pytest.fixture
def quarter_circle():
    """Rational quadratic Bézier curve describing the unit quarter circle."""
    return np.array([[1., 0., 1.], 
                     [1., 1., np.sqrt(2)/2], 
                     [0., 1., 1.]])

def test_degenerate_inputs():
    assert evaluate_bezier_at([], 0.5) is None
    assert evaluate_bezier_at([ControlPoint(2., 3., 2.5)], 0.7) == CurvePoint(2., 3.)
    assert generate_bezier_curve([]).shape == (0, 2)
    assert generate_bezier_curve([ControlPoint(2., 3.)]).shape == (0, 2)

def test_end_points(cubic_points):
    assert evaluate_bezier_at(cubic_points, 0) == CurvePoint(0., 0.)
    assert evaluate_bezier_at(cubic_points, 1) == CurvePoint(4., 0.)

def test_quadratic_middle():
    point = evaluate_bezier_at([(0, 0), (1, 2), (2, 0)], 0.5)
    np.testing.assert_allclose(point, (1., 1.))

def test_bernstein_formula(cubic_points):
    """Unit weights give the polynomial Bézier curve."""
    P = np.array([p[:2] for p in cubic_points])
    t = np.linspace(0, 1, 13)
    B = np.array([(1 - t)**3, 3*t*(1 - t)**2, 3*t**2*(1 - t), t**3]).T
    np.testing.assert_allclose(generate_bezier_curve(cubic_points, 12), B @ P, atol=1e-12)

def test_line_segment():
    P0, P1 = np.array([1., -2.]), np.array([5., 4.])
    points = [(*P0, 1.), (*P1, 1.)]
    for t in np.linspace(0, 1, 7):
        np.testing.assert_allclose(evaluate_bezier_at(points, t), (1 - t)*P0 + t*P1)

def test_weighted_segment_stays_on_line():
    points = [(0., 1., 0.3), (4., 9., 2.7)]
    curve = generate_bezier_curve(points, 20)
    np.testing.assert_allclose(curve[:, 1], 2*curve[:, 0] + 1, atol=1e-12)
    assert np.all(np.diff(curve[:, 0]) > 0)

def test_rational_circle(quarter_circle):
    curve = generate_bezier_curve(quarter_circle, 50)
    np.testing.assert_allclose(np.linalg.norm(curve, axis=1), 1.)

def test_collinear_points():
    rng = np.random.default_rng(0)
    x = rng.uniform(-10, 10, 6)
    points = np.column_stack((x, 3*x - 2, rng.uniform(0.1, 3., 6)))
    curve = generate_bezier_curve(points, 40)
    np.testing.assert_allclose(curve[:, 1], 3*curve[:, 0] - 2, atol=1e-9)

def test_weight_invariance(quarter_circle):
    scaled = quarter_circle.copy()
    scaled[:, 2] *= 2.5
    np.testing.assert_allclose(generate_bezier_curve(scaled, 30), generate_bezier_curve(quarter_circle, 30))

def test_generate_matches_evaluate(quarter_circle):
    curve = generate_bezier_curve(quarter_circle, 10)
    assert curve.shape == (11, 2)
    for i, t in enumerate(bezier_parameters(10)):
        np.testing.assert_allclose(curve[i], evaluate_bezier_at(quarter_circle, t))

def test_zero_steps(cubic_points):
    curve = generate_bezier_curve(cubic_points, 0)
    np.testing.assert_array_equal(curve, [[0., 0.]])

def test_negative_steps(cubic_points):
    with pytest.raises(ValueError):
        generate_bezier_curve(cubic_points, -1)

def test_zero_weights_do_not_crash():
    point = evaluate_bezier_at([(1., 2., 0.), (3., 4., 0.)], 0.5)
    assert point == CurvePoint(0., 0.)

def test_parameter_not_clamped():
    point = evaluate_bezier_at([(0., 0.), (1., 1.)], 2.)
    np.testing.assert_allclose(point, (2., 2.))

def test_inputs_not_modified(quarter_circle):
    before = quarter_circle.copy()
    generate_bezier_curve(quarter_circle, 5)
    evaluate_bezier_at(quarter_circle, 0.3)
    np.testing.assert_array_equal(quarter_circle, before)
