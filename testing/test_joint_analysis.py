from __future__ import annotations

import pytest

from mitery import InvalidGeometryError, JointAnalysis, TubeParameters, analyze_joint


def test_square_corner_rhs(default_analysis: JointAnalysis) -> None:
    assert default_analysis.cut_angle_deg == pytest.approx(45.0)
    assert default_analysis.rotation_angle_deg == pytest.approx(90.0)
    assert default_analysis.net_area == pytest.approx(1400.0)
    assert default_analysis.weight_per_meter_kg == pytest.approx(10.99)


def test_thick_wall_rejected() -> None:
    params = TubeParameters(width=50.0, height=100.0, thickness=25.0, joint_angle=90.0)
    with pytest.raises(InvalidGeometryError) as excinfo:
        analyze_joint(params)
    assert excinfo.value.suggested_thickness == pytest.approx(5.0)


def test_square_section_at_135(square_tube: TubeParameters) -> None:
    analysis = analyze_joint(square_tube)
    assert analysis.cut_angle_deg == pytest.approx(67.5)
    assert analysis.section.inner_width == pytest.approx(50.0)
    assert analysis.net_area == pytest.approx(1100.0)
    assert analysis.weight_per_meter_kg == pytest.approx(8.635)


def test_custom_density(default_tube: TubeParameters) -> None:
    analysis = analyze_joint(default_tube, density=0.0027)
    assert analysis.weight_per_meter_kg == pytest.approx(1400.0 * 0.0027)
    assert analysis.info["density_g_per_mm3"] == 0.0027


def test_info_echoes_inputs_unrounded(default_analysis: JointAnalysis) -> None:
    info = default_analysis.info
    assert info["length_mm"] == 300.0
    assert info["joint_angle_deg"] == 90.0
    assert info["cut_angle_deg"] == 45.0
    assert info["net_area_mm2"] == pytest.approx(1400.0)


def test_report_square_corner(default_analysis: JointAnalysis) -> None:
    assert default_analysis.report() == "\n".join(
        [
            "--- Joint Geometry Analysis ---",
            "Internal Joint Angle (θ): 90°",
            "Miter Cut Angle (α): 45° (relative to face)",
            "Tube Cross-Section: 50W x 100H",
            "Wall Thickness: 5T",
            "Overall Length (L): 300 mm (Note: Only cut face shown in 2D view)",
            "",
            "--- Material Estimate (Steel) ---",
            "Net Cross-Sectional Area: 1400 mm²",
            "Approx. Weight per Meter: 10.99 kg",
        ]
    )


def test_report_trims_decimals() -> None:
    analysis = analyze_joint(TubeParameters(width=50.0, height=100.0, thickness=2.5, joint_angle=45.0))
    report = analysis.report()
    assert "Miter Cut Angle (α): 22.5° (relative to face)" in report
    assert "Wall Thickness: 2.5T" in report


def test_project_uses_analysis_angles(default_analysis: JointAnalysis) -> None:
    joint = default_analysis.project(scale=2.0, origin=(400.0, 300.0))
    assert joint.origin == (400.0, 300.0)
    assert joint.outer_a[0] == pytest.approx((350.0, 200.0))


def test_analysis_does_not_mutate_params(default_tube: TubeParameters) -> None:
    before = default_tube
    analysis = analyze_joint(default_tube)
    assert analysis.params is before
    assert default_tube == TubeParameters(50.0, 100.0, 5.0, 300.0, 90.0)
