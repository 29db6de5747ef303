from nurbsketch.validation import CURVE_TYPES

_KEYS = {
    "curve_type": "curveType",
    "bezier_steps": "bezierSteps",
    "spline_steps": "splineSteps",
    "spline_degree": "splineDegree",
    "spline_step": "splineStep",
    "show_construction_lines": "showConstructionLines",
    "show_debug_info": "showDebugInfo",
}


class CurveSettings:
    """
    Evaluation context owned by the caller.

    Holds everything needed to turn a set of control points into a sampled
    curve. The evaluators never keep a reference to it: pass it explicitly to
    `generate_curve` or to the import / export functions.

    Attributes
    ----------
    curve_type : str
        Curve family, `"bezier"` or `"spline"`.
    bezier_steps : int
        Number of sampling intervals of Bézier curves.
    spline_steps : int
        Number of sampling intervals of B-splines, exported along the data.
    spline_degree : int
        Requested B-spline degree.
    spline_step : float
        Interpolation step of B-splines, the curve is sampled with
        `ceil(1 / spline_step)` intervals.
    show_construction_lines : bool
        Whether renderers draw the control polygon.
    show_debug_info : bool
        Whether renderers display debugging information.
    """

    curve_type: str
    bezier_steps: int
    spline_steps: int
    spline_degree: int
    spline_step: float
    show_construction_lines: bool
    show_debug_info: bool

    def __init__(
        self,
        curve_type: str = "bezier",
        bezier_steps: int = 100,
        spline_steps: int = 100,
        spline_degree: int = 3,
        spline_step: float = 0.01,
        show_construction_lines: bool = True,
        show_debug_info: bool = False,
    ):
        if curve_type not in CURVE_TYPES:
            raise ValueError(
                f"Unknown curve type {curve_type!r}. Supported types: {', '.join(CURVE_TYPES)}."
            )
        self.curve_type = curve_type
        self.bezier_steps = int(bezier_steps)
        self.spline_steps = int(spline_steps)
        self.spline_degree = int(spline_degree)
        self.spline_step = float(spline_step)
        self.show_construction_lines = bool(show_construction_lines)
        self.show_debug_info = bool(show_debug_info)

    def replace(self, **changes) -> "CurveSettings":
        """
        Return a copy of the settings with some attributes changed.

        Raises
        ------
        ValueError
            If a key is not a setting.

        Examples
        --------
        >>> CurveSettings().replace(curve_type="spline", spline_degree=2).spline_degree
        2
        """
        unknown = set(changes) - set(_KEYS)
        if unknown:
            raise ValueError(f"Unknown settings {sorted(unknown)}.")
        values = {key: getattr(self, key) for key in _KEYS}
        values.update(changes)
        return CurveSettings(**values)

    def to_dict(self) -> dict:
        """
        Returns a dictionary representation of the settings, with camelCase keys.
        """
        return {camel: getattr(self, key) for key, camel in _KEYS.items()}

    @classmethod
    def from_dict(cls, data: dict) -> "CurveSettings":
        """
        Creates a CurveSettings object from a dictionary representation.
        Missing keys keep their default value and unknown keys are ignored.
        """
        return cls(
            **{key: data[camel] for key, camel in _KEYS.items() if camel in data}
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, CurveSettings):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        args = ", ".join(f"{key}={getattr(self, key)!r}" for key in _KEYS)
        return f"CurveSettings({args})"
