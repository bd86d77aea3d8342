"""
Mitery Example: miter joint of a 100x50x5 RHS at a square corner.

This example demonstrates:
1. Defining tube parameters
2. Validating them (and handling a rejected thickness)
3. Running the joint analysis and printing the report
4. Projecting the joint onto a canvas and plotting it
"""
import logging

from mitery import (
    PRESET_ANGLES,
    TubeParameters,
    analyze_joint,
    fit_scale,
    setup_logging,
    validate_parameters,
)


def main() -> None:
    setup_logging(logging.INFO)

    # 1. RHS 50W x 100H x 5T, 300 mm long, 90° corner
    params = TubeParameters(width=50, height=100, thickness=5, length=300, joint_angle=90)

    # 2. A wall that is too thick is rejected; the suggestion is ours to apply
    too_thick = params.with_thickness(25)
    check = validate_parameters(too_thick)
    print(f"T = {too_thick.thickness:g} mm -> ok={check.ok}: {check.reason}")
    print(f"  suggested T = {check.suggested_thickness:g} mm")

    # 3. Analysis for each preset angle
    for angle in PRESET_ANGLES:
        analysis = analyze_joint(params.with_joint_angle(angle))
        print()
        print(analysis.report())

    # 4. Geometry for an 800 x 600 px canvas
    analysis = analyze_joint(params)
    scale = fit_scale(800, 600, params)
    joint = analysis.project(scale=scale, origin=(400, 300))

    print(f"\nScale: {scale:.3f} px/mm")
    print(f"Tube A outer: {[(round(x, 1), round(y, 1)) for x, y in joint.outer_a]}")
    print(f"Tube B outer: {[(round(x, 1), round(y, 1)) for x, y in joint.outer_b]}")
    print(f"Cut line A:   {joint.cut_line_a}")
    print(f"Cut line B:   {joint.cut_line_b}")

    # 5. Plot (1 unit = 1 mm)
    analysis.plot()


if __name__ == "__main__":
    main()
