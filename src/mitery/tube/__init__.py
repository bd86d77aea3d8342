"""Tube cross-section inputs and calculators."""

from .parameters import (
    InvalidGeometryError,
    TubeParameters,
    ValidationResult,
    out_of_range_fields,
    require_valid,
    suggested_thickness,
    validate,
    validate_parameters,
)
from .section import (
    CrossSectionResult,
    analyze_cross_section,
    compute_net_area,
    compute_weight_per_meter,
)

__all__ = [
    "TubeParameters",
    "ValidationResult",
    "InvalidGeometryError",
    "validate",
    "validate_parameters",
    "require_valid",
    "suggested_thickness",
    "out_of_range_fields",
    "CrossSectionResult",
    "compute_net_area",
    "compute_weight_per_meter",
    "analyze_cross_section",
]
