"""
Mitery - Rectangular Hollow Section Miter Joint Explorer

Calculate the miter cut for two rectangular tubes meeting at a chosen internal
angle, estimate the steel cross-section and weight per metre, and produce 2D
schematic geometry of the two mating cross-sections for drawing.

Example usage:
    from mitery import TubeParameters, analyze_joint, validate_parameters

    # 1. Define the tube (mm) and joint angle (degrees)
    params = TubeParameters(width=50, height=100, thickness=5, length=300, joint_angle=90)

    # 2. Validate (2T must be strictly less than min(W, H))
    check = validate_parameters(params)
    if not check.ok:
        print(check.reason, "- try T =", check.suggested_thickness)

    # 3. Analyze
    analysis = analyze_joint(params)
    print(f"Cut angle: {analysis.cut_angle_deg:.1f}°")
    print(f"Net area: {analysis.net_area:.0f} mm²")
    print(f"Weight: {analysis.weight_per_meter_kg:.2f} kg/m")
    print(analysis.report())

    # 4. Drawable geometry (pixels) about a canvas centre
    joint = analysis.project(scale=2.0, origin=(400, 300))
    print(joint.outer_a, joint.cut_line_b)

    # 5. Plot
    analysis.plot(save_path="joint.svg", show=False)
"""

from .config import (
    DEFAULT_PARAMETERS,
    PARAMETER_RANGES,
    PRESET_ANGLES,
    STEEL_DENSITY_G_PER_MM3,
    ParameterRange,
)
from .logging_config import setup_logging
from .tube import (
    CrossSectionResult,
    InvalidGeometryError,
    TubeParameters,
    ValidationResult,
    analyze_cross_section,
    compute_net_area,
    compute_weight_per_meter,
    out_of_range_fields,
    require_valid,
    suggested_thickness,
    validate,
    validate_parameters,
)
from .joint import (
    JointAnalysis,
    MiterAngles,
    ProjectedHalf,
    ProjectedJoint,
    analyze_joint,
    derive_angles,
    fit_scale,
    plot_joint,
    project_half,
    project_joint,
    rotate_points,
    translate_points,
)

__all__ = [
    # Inputs + validation
    "TubeParameters",
    "ValidationResult",
    "InvalidGeometryError",
    "validate",
    "validate_parameters",
    "require_valid",
    "suggested_thickness",
    "out_of_range_fields",
    # Cross-section
    "CrossSectionResult",
    "compute_net_area",
    "compute_weight_per_meter",
    "analyze_cross_section",
    # Miter
    "MiterAngles",
    "derive_angles",
    # Projection
    "ProjectedHalf",
    "ProjectedJoint",
    "rotate_points",
    "translate_points",
    "project_half",
    "project_joint",
    "fit_scale",
    # Analysis + plotting
    "JointAnalysis",
    "analyze_joint",
    "plot_joint",
    # Config
    "ParameterRange",
    "PARAMETER_RANGES",
    "DEFAULT_PARAMETERS",
    "PRESET_ANGLES",
    "STEEL_DENSITY_G_PER_MM3",
    "setup_logging",
]

__version__ = "0.1.0"
