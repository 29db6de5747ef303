# %% Imports
from nurbsketch import (ControlPoint, 
                        generate_bezier_curve, 
                        generate_b_spline_curve, 
                        plot_curve)
import numpy as np

# %% A cubic Bézier curve, its degree is the number of points minus one
points = [ControlPoint(0, 0), ControlPoint(1, 3), ControlPoint(3, 3), ControlPoint(4, 0)]
curve = generate_bezier_curve(points, steps=100)
plot_curve(points, curve)

# %% Increase the weight of a control point: the curve is pulled towards it
points[1] = points[1].with_weight(3.)
plot_curve(points, generate_bezier_curve(points))

# %% The unit quarter circle as a rational quadratic curve
quarter_circle = [ControlPoint(1, 0), ControlPoint(1, 1, np.sqrt(2)/2), ControlPoint(0, 1)]
curve = generate_bezier_curve(quarter_circle)
print(np.abs(np.linalg.norm(curve, axis=1) - 1).max())

# %% A cubic B-spline on more points stays local: moving a point only changes part of the curve
x = np.arange(8)
y = np.random.randn(8)
points = [ControlPoint.make(xi, yi) for xi, yi in zip(x, y)]
plot_curve(points, generate_b_spline_curve(points, degree=3, steps=200), curve_type="spline")

# %%
