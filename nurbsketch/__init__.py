"""
.. include:: ../README.md
"""
from nurbsketch.control_point import (ControlPoint,
                                      CurvePoint,
                                      clamp_weight,
                                      as_homogeneous_array,
                                      WEIGHT_MIN,
                                      WEIGHT_MAX)
from nurbsketch.geometry import (BoundingBox,
                                 distance,
                                 get_bounding_box,
                                 find_nearest_control_point,
                                 interpolate_curves)
from nurbsketch.bezier import bezier_parameters, evaluate_bezier_at, generate_bezier_curve
from nurbsketch.b_spline_basis import (BSplineBasis,
                                       generate_uniform_knots,
                                       basis_function,
                                       basis_functions)
from nurbsketch.b_spline import (evaluate_b_spline_at,
                                 generate_b_spline_curve,
                                 effective_degree,
                                 steps_from_interpolation_step)
from nurbsketch.validation import validate_curve, validate_curve_report, curve_statistics
from nurbsketch.settings import CurveSettings
from nurbsketch.curve_data import (sanitize_points,
                                   export_curve_data,
                                   import_curve_data,
                                   save_curve_data,
                                   load_curve_data,
                                   generate_curve)
from nurbsketch.plotting import plot_curve
