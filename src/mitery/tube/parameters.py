"""
Tube input parameters and geometry validation.

`TubeParameters` is an immutable snapshot of one set of user inputs. It does not
validate itself on construction; use `validate_parameters` for a result object
or `require_valid` to raise `InvalidGeometryError`.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
import logging

from ..config import DEFAULT_PARAMETERS, PARAMETER_RANGES, SAFE_THICKNESS_RATIO

logger = logging.getLogger(__name__)

THICKNESS_TOO_LARGE = "wall thickness must be less than half of the smaller outer dimension"


@dataclass(frozen=True)
class TubeParameters:
    """
    Rectangular hollow section and joint inputs.

    Attributes:
        width: Outer section width W (mm)
        height: Outer section height H (mm)
        thickness: Uniform wall thickness T (mm)
        length: Overall tube length L (mm), reported only
        joint_angle: Internal joint angle θ (degrees), 180 = straight
    """

    width: float = DEFAULT_PARAMETERS["width"]
    height: float = DEFAULT_PARAMETERS["height"]
    thickness: float = DEFAULT_PARAMETERS["thickness"]
    length: float = DEFAULT_PARAMETERS["length"]
    joint_angle: float = DEFAULT_PARAMETERS["joint_angle"]

    def __post_init__(self) -> None:
        for name in ("width", "height", "thickness", "length", "joint_angle"):
            object.__setattr__(self, name, float(getattr(self, name)))

    @property
    def min_dimension(self) -> float:
        return min(self.width, self.height)

    def with_thickness(self, thickness: float) -> "TubeParameters":
        """Return a copy with a different wall thickness."""
        return replace(self, thickness=thickness)

    def with_joint_angle(self, joint_angle: float) -> "TubeParameters":
        """Return a copy with a different joint angle."""
        return replace(self, joint_angle=joint_angle)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a `TubeParameters`.

    `suggested_thickness` is only set on rejection. Applying it is up to the
    caller.
    """

    ok: bool
    reason: str | None = None
    suggested_thickness: float | None = None

    def __bool__(self) -> bool:
        return self.ok


class InvalidGeometryError(ValueError):
    """Raised when the wall thickness leaves no valid inner hole."""

    def __init__(self, params: TubeParameters, reason: str, suggested_thickness: float) -> None:
        super().__init__(
            f"Invalid geometry: {reason} "
            f"(T={params.thickness:g}, min(W, H)={params.min_dimension:g})"
        )
        self.params = params
        self.reason = reason
        self.suggested_thickness = suggested_thickness


def suggested_thickness(width: float, height: float) -> float:
    """Fallback wall thickness for a section of the given outer size."""
    return min(width, height) * SAFE_THICKNESS_RATIO


def validate_parameters(params: TubeParameters) -> ValidationResult:
    """Check the thickness invariant `2T < min(W, H)` (strict)."""
    if 2.0 * params.thickness >= params.min_dimension:
        suggestion = suggested_thickness(params.width, params.height)
        logger.warning(
            "Rejected tube %gx%g with T=%g: %s (suggested T=%g)",
            params.width,
            params.height,
            params.thickness,
            THICKNESS_TOO_LARGE,
            suggestion,
        )
        return ValidationResult(ok=False, reason=THICKNESS_TOO_LARGE, suggested_thickness=suggestion)
    return ValidationResult(ok=True)


def validate(
    width: float,
    height: float,
    thickness: float,
    length: float,
    joint_angle: float,
) -> ValidationResult:
    """Validate raw values without building the parameters first."""
    return validate_parameters(
        TubeParameters(
            width=width,
            height=height,
            thickness=thickness,
            length=length,
            joint_angle=joint_angle,
        )
    )


def require_valid(params: TubeParameters) -> TubeParameters:
    """Return `params` unchanged, or raise `InvalidGeometryError`."""
    if not validate_parameters(params):
        raise InvalidGeometryError(
            params,
            THICKNESS_TOO_LARGE,
            suggested_thickness(params.width, params.height),
        )
    return params


def out_of_range_fields(params: TubeParameters) -> list[str]:
    """Names of fields outside `PARAMETER_RANGES`.

    Input-collection helper; the calculators never call this.
    """
    return [
        name
        for name, bounds in PARAMETER_RANGES.items()
        if not bounds.contains(getattr(params, name))
    ]


__all__ = [
    "THICKNESS_TOO_LARGE",
    "TubeParameters",
    "ValidationResult",
    "InvalidGeometryError",
    "suggested_thickness",
    "validate_parameters",
    "validate",
    "require_valid",
    "out_of_range_fields",
]
