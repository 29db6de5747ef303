import numpy as np
import pytest
from nurbsketch.control_point import (ControlPoint, 
                                      CurvePoint, 
                                      WEIGHT_MAX, 
                                      WEIGHT_MIN, 
                                      as_homogeneous_array, 
                                      clamp_weight)

def test_clamp_weight():
    assert clamp_weight(0.) == WEIGHT_MIN
    assert clamp_weight(-2.) == WEIGHT_MIN
    assert clamp_weight(10.) == WEIGHT_MAX
    assert clamp_weight(1.7) == 1.7

def test_make_clamps_weight():
    assert ControlPoint.make(1, 2, 0.) == ControlPoint(1., 2., 0.1)
    assert ControlPoint.make(1, 2) == ControlPoint(1., 2., 1.)
    assert ControlPoint(1., 2.).with_weight(4.).weight == 3.

def test_constructor_clamps_weight():
    assert ControlPoint(0, 0, 10).weight == WEIGHT_MAX
    assert ControlPoint(0, 0, 0).weight == WEIGHT_MIN
    assert ControlPoint(x=1, y=2, weight=-1.) == (1., 2., WEIGHT_MIN)
    assert ControlPoint(1, 2) == (1., 2., 1.)
    assert isinstance(ControlPoint(1, 2).x, float)

def test_to_dict():
    assert ControlPoint(1., 2., 0.5).to_dict() == {"x": 1., "y": 2., "weight": 0.5}

def test_as_homogeneous_array_inputs():
    points = [ControlPoint(1., 2., 0.5), 
              {"x": 3, "y": 4}, 
              {"x": 5, "y": 6, "weight": 2}, 
              (7, 8), 
              [9, 10, 3], 
              CurvePoint(11., 12.)]
    expected = [[1, 2, 0.5], [3, 4, 1], [5, 6, 2], [7, 8, 1], [9, 10, 3], [11, 12, 1]]
    np.testing.assert_array_equal(as_homogeneous_array(points), expected)

def test_as_homogeneous_array_from_array():
    xy = np.array([[0., 1.], [2., 3.]])
    array = as_homogeneous_array(xy)
    np.testing.assert_array_equal(array, [[0, 1, 1], [2, 3, 1]])
    xyw = np.array([[0., 1., 2.]])
    array = as_homogeneous_array(xyw)
    array[0, 0] = 5.
    assert xyw[0, 0] == 0.

def test_as_homogeneous_array_empty():
    assert as_homogeneous_array([]).shape == (0, 3)
    assert as_homogeneous_array(np.empty((0, 2))).shape == (0, 3)

def test_as_homogeneous_array_bad_shape():
    with pytest.raises(ValueError):
        as_homogeneous_array([(1., 2., 3., 4.)])
    with pytest.raises(ValueError):
        as_homogeneous_array(np.zeros((3, 4)))
