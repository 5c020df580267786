# File: floor_heating_planner/layout/errors.py

"""
Exceptions raised by the layout engine.

Every error is structural and fatal for the current call: it is raised
before any grid stamping or search begins, so callers never observe a
partially built result.
"""

from typing import Any, Dict, Optional


class PlannerError(Exception):
    """
    Base class for layout engine errors.

    Carries a machine-readable code and optional context alongside the
    human-readable message, so the presentation layer can surface it.
    """

    code = "planner_error"

    def __init__(self, detail: str, extra: Optional[Dict[str, Any]] = None):
        """
        Initialize the error.

        Args:
            detail: Human-readable error message
            extra: Optional additional error context
        """
        self.detail = detail
        self.extra = extra or {}
        super().__init__(detail)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        error = {"code": self.code, "detail": self.detail}
        if self.extra:
            error["extra"] = self.extra
        return error


class InvalidDimensionsError(PlannerError):
    """Room width, length, or grid resolution is missing, non-finite, or not positive."""

    code = "invalid_dimensions"

    def __init__(
        self,
        width_m: Optional[float],
        length_m: Optional[float],
        resolution_m: Optional[float] = None,
        detail: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None
    ):
        context = {
            "width_m": width_m,
            "length_m": length_m,
            "resolution_m": resolution_m,
        }
        context.update(extra or {})
        super().__init__(
            detail or (
                f"Room dimensions and resolution must be positive "
                f"(width={width_m}, length={length_m}, resolution={resolution_m})"
            ),
            extra=context,
        )


class OutOfBoundsError(PlannerError):
    """A start or end point lies outside the grid."""

    code = "out_of_bounds"

    def __init__(self, role: str, point: Any, rows: int, cols: int):
        """
        Args:
            role: Which point failed ("start" or "end")
            point: The offending (col, row) point
            rows: Grid row count
            cols: Grid column count
        """
        super().__init__(
            f"{role.capitalize()} point {tuple(point)} is outside the "
            f"{cols}x{rows} grid",
            extra={"role": role, "point": list(point), "rows": rows, "cols": cols},
        )


class InvalidStartPointError(PlannerError):
    """The start point lies on an obstacle or no-pipe zone."""

    code = "invalid_start_point"

    def __init__(self, point: Any, state: str):
        super().__init__(
            f"Start point {tuple(point)} is on a {state} cell",
            extra={"point": list(point), "state": state},
        )


class InvalidEndPointError(PlannerError):
    """The end point lies on an obstacle or no-pipe zone."""

    code = "invalid_end_point"

    def __init__(self, point: Any, state: str):
        super().__init__(
            f"End point {tuple(point)} is on a {state} cell",
            extra={"point": list(point), "state": state},
        )


class InvalidGenerationOptionsError(PlannerError):
    """Generation options are inconsistent (spacing, length cap)."""

    code = "invalid_generation_options"


class InvalidInputError(PlannerError):
    """A room description cannot be read or is missing required fields."""

    code = "invalid_input"
