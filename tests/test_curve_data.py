import json
import numpy as np
import pytest
from nurbsketch.control_point import ControlPoint
from nurbsketch.settings import CurveSettings
from nurbsketch.curve_data import (export_curve_data, 
                                   generate_curve, 
                                   import_curve_data, 
                                   load_curve_data, 
                                   sanitize_points, 
                                   save_curve_data)

@pytest.fixture
def points():
    return [ControlPoint(10., 20., 1.), ControlPoint(30.5, 5., 2.5), ControlPoint(50., 25., 0.1), ControlPoint(70., 0., 1.)]

def test_export_bezier(points):
    data = export_curve_data(points, "bezier", CurveSettings(bezier_steps=50))
    assert data["type"] == "bezier"
    assert data["degree"] == 3
    assert "interpolationStep" not in data
    assert data["controlPoints"][1] == {"x": 30.5, "y": 5., "weight": 2.5}
    assert data["settings"] == {"steps": 50, "showConstructionLines": True}
    assert data["metadata"]["version"] == "1.0"
    assert data["metadata"]["exportDate"].endswith("Z")

def test_export_spline(points):
    settings = CurveSettings(curve_type="spline", spline_degree=2, spline_step=0.05)
    data = export_curve_data(points, settings=settings)
    assert data["type"] == "spline"
    assert data["degree"] == 2
    assert data["interpolationStep"] == 0.05
    json.dumps(data)

def test_export_empty_bezier():
    assert export_curve_data([], "bezier")["degree"] == 0

def test_export_unknown_type(points):
    with pytest.raises(ValueError):
        export_curve_data(points, "hermite")

def test_round_trip(points):
    data = json.loads(json.dumps(export_curve_data(points, "bezier")))
    curve_type, imported, settings = import_curve_data(data)
    assert curve_type == "bezier"
    assert imported == points
    assert settings.curve_type == "bezier"

def test_import_spline_settings(points):
    data = export_curve_data(points, "spline", CurveSettings(spline_degree=2, spline_step=0.2))
    current = CurveSettings()
    curve_type, imported, settings = import_curve_data(data, current)
    assert curve_type == "spline"
    assert settings.spline_degree == 2 and settings.spline_step == 0.2
    assert current.spline_degree == 3 and current.curve_type == "bezier"

def test_import_clamps_weights():
    data = {"type": "bezier", "controlPoints": [{"x": 0, "y": 0, "weight": 7}, 
                                                {"x": 1, "y": 0, "weight": 0.01}, 
                                                {"x": 2, "y": 0, "weight": 0}, 
                                                {"x": 3, "y": 0}]}
    _, imported, _ = import_curve_data(data)
    assert [p.weight for p in imported] == [3., 0.1, 1., 1.]

def test_import_invalid_data():
    with pytest.raises(ValueError):
        import_curve_data({"controlPoints": []})
    with pytest.raises(ValueError):
        import_curve_data({"type": "bezier", "controlPoints": "nope"})
    with pytest.raises(ValueError):
        import_curve_data({"type": "hermite", "controlPoints": []})
    with pytest.raises(ValueError):
        import_curve_data([1, 2])

def test_sanitize_points():
    raw = [{"x": 1, "y": 2}, None, {"x": float("nan"), "y": 0}, {"x": "1", "y": 0}, {"x": True, "y": 0}, 
           {"y": 4}, ControlPoint(5., 6., 9.)]
    assert sanitize_points(raw) == [ControlPoint(1., 2., 1.), ControlPoint(5., 6., 3.)]
    assert sanitize_points("points") == []

def test_save_load(points, tmp_path):
    data = export_curve_data(points, "spline")
    filepath = str(tmp_path / "curve.json")
    save_curve_data(data, filepath)
    assert load_curve_data(filepath) == data

def test_save_verbose(points, tmp_path, capsys):
    filepath = str(tmp_path / "curve.json")
    save_curve_data(export_curve_data(points, "bezier"), filepath, verbose=True)
    assert capsys.readouterr().out == "JSON: " + filepath + " written\n"

def test_save_unknown_extension(points, tmp_path):
    with pytest.raises(ValueError):
        save_curve_data(export_curve_data(points, "bezier"), str(tmp_path / "curve.pkl"))
    with pytest.raises(ValueError):
        load_curve_data(str(tmp_path / "curve.csv"))

def test_generate_curve_bezier(points):
    curve = generate_curve(points, CurveSettings(bezier_steps=40))
    assert curve.shape == (41, 2)
    np.testing.assert_allclose(curve[[0, -1]], [[10., 20.], [70., 0.]])

def test_generate_curve_spline(points):
    curve = generate_curve(points, CurveSettings(curve_type="spline", spline_step=0.3))
    assert curve.shape == (5, 2)
    np.testing.assert_allclose(curve[[0, -1]], [[10., 20.], [70., 0.]])

def test_generate_curve_spline_effective_degree(points):
    """Three points can't carry a cubic, the degree drops to 2."""
    curve = generate_curve(points[:3], CurveSettings(curve_type="spline", spline_degree=3, spline_step=0.1))
    assert curve.shape == (11, 2)

def test_generate_curve_too_few_points(points):
    assert generate_curve(points[:1], CurveSettings()).shape == (0, 2)
    assert generate_curve([], CurveSettings(curve_type="spline")).shape == (0, 2)

def test_non_positive_interpolation_step(points):
    data = export_curve_data(points, "spline", CurveSettings(spline_step=0.05))
    data["interpolationStep"] = -0.1
    _, _, settings = import_curve_data(data, CurveSettings(spline_step=0.2))
    assert settings.spline_step == 0.2
    assert generate_curve(points, settings).shape == (6, 2)
    for step in [0., -0.1]:
        assert generate_curve(points, CurveSettings(curve_type="spline", spline_step=step)).shape == (0, 2)
