# %% imports
from nurbsketch import BSplineBasis, basis_functions, generate_uniform_knots
import numpy as np

# %% Create the cubic B-spline basis of 6 control points on a clamped uniform knot vector
basis = BSplineBasis.uniform(6, 3)
print(basis.knot)
basis.plotN()

# %% The basis functions sum to 1 everywhere on the span
xi = basis.linspace(20)
N = basis.N(xi)
print(np.asarray(N.sum(axis=1)).ravel())

# %% Exactly on the last knot, half-open intervals make every function vanish
knots = generate_uniform_knots(6, 3)
print(basis_functions(1., 3, knots))
print(basis_functions(1., 3, knots, closed_end=True))

# %% Four points of degree 3: no interior knot, the basis is the Bernstein one
BSplineBasis.uniform(4, 3).plotN()

# %%
