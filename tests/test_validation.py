import numpy as np
import pytest
from nurbsketch.control_point import ControlPoint
from nurbsketch.geometry import BoundingBox
from nurbsketch.validation import curve_statistics, validate_curve, validate_curve_report

@pytest.fixture
def three_points():
    return [ControlPoint(0., 0., 1.), ControlPoint(2., 1., 2.), ControlPoint(4., 0., 3.)]

def test_empty_is_invalid():
    assert not validate_curve([], "bezier")
    assert not validate_curve([], "spline", 0)
    assert not validate_curve(None, "bezier")

def test_bezier(three_points):
    assert not validate_curve(three_points[:1], "bezier")
    assert validate_curve(three_points[:2], "bezier")
    assert validate_curve(three_points, "bezier")

def test_spline(three_points):
    assert not validate_curve(three_points, "spline", 3)
    assert validate_curve(three_points, "spline", 2)
    assert validate_curve(three_points, "spline", 1)

def test_unknown_type(three_points):
    assert not validate_curve(three_points, "hermite")

def test_report(three_points):
    report = validate_curve_report(three_points, "spline", 3)
    assert report == {"isValid": False, 
                      "errors": ["A B-spline of degree 3 needs at least 4 control points"], 
                      "warnings": []}
    assert validate_curve_report(three_points, "bezier") == {"isValid": True, "errors": [], "warnings": []}
    assert validate_curve_report([], "bezier")["errors"] == ["No control point defined"]
    assert validate_curve_report(three_points[:1], "bezier")["errors"] == ["A Bézier curve needs at least 2 control points"]
    assert not validate_curve_report(three_points, "hermite")["isValid"]

def test_statistics(three_points):
    stats = curve_statistics(three_points, "bezier")
    assert stats["pointCount"] == 3
    assert stats["degree"] == 2
    assert stats["boundingBox"] == BoundingBox(0., 0., 4., 1., 4., 1.)
    assert stats["totalWeight"] == pytest.approx(6.)
    assert stats["averageWeight"] == pytest.approx(2.)

def test_statistics_spline_effective_degree(three_points):
    assert curve_statistics(three_points, "spline", 3)["degree"] == 2
    assert curve_statistics(three_points, "spline", 1)["degree"] == 1

def test_statistics_empty():
    assert curve_statistics([], "spline") == {"pointCount": 0, 
                                              "degree": 0, 
                                              "boundingBox": None, 
                                              "totalWeight": 0., 
                                              "averageWeight": 0.}
