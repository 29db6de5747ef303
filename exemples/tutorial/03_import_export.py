# %% Imports
from nurbsketch import (CurveSettings, 
                        ControlPoint, 
                        curve_statistics, 
                        export_curve_data, 
                        generate_curve, 
                        import_curve_data, 
                        load_curve_data, 
                        save_curve_data, 
                        validate_curve_report)

# %% The caller owns the settings and passes them explicitly
settings = CurveSettings(curve_type="spline", spline_degree=3, spline_step=0.02)
points = [ControlPoint.make(x, y, w) for x, y, w in [(0, 0, 1), (2, 4, 2), (5, 5, 1), (7, 1, 0.5), (9, 3, 1)]]
print(validate_curve_report(points, settings.curve_type, settings.spline_degree))
print(curve_statistics(points, settings.curve_type, settings.spline_degree))
curve = generate_curve(points, settings)
print(curve.shape)

# %% Export to a JSON file and read it back
save_curve_data(export_curve_data(points, settings=settings), "curve.json", verbose=True)
curve_type, imported, imported_settings = import_curve_data(load_curve_data("curve.json"), settings)
print(curve_type, imported == points, imported_settings)

# %%
