"""JointAnalysis: validated tube parameters with their derived miter and section results."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any

from ..config import STEEL_DENSITY_G_PER_MM3
from ..tube.parameters import TubeParameters, require_valid
from ..tube.section import CrossSectionResult, analyze_cross_section
from .miter import MiterAngles, derive_angles
from .projection import Point2D, ProjectedJoint, project_joint

logger = logging.getLogger(__name__)


def _fmt(value: float) -> str:
    """Up to two decimals, trailing zeros dropped (12.50 -> 12.5, 45.00 -> 45)."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


@dataclass(frozen=True)
class JointAnalysis:
    """Raw numeric results for one parameter snapshot."""

    params: TubeParameters
    angles: MiterAngles
    section: CrossSectionResult
    density: float = STEEL_DENSITY_G_PER_MM3

    # --- Convenience ---
    @property
    def joint_angle_deg(self) -> float:
        return self.params.joint_angle

    @property
    def cut_angle_deg(self) -> float:
        return self.angles.cut_angle_deg

    @property
    def rotation_angle_deg(self) -> float:
        return self.angles.rotation_angle_deg

    @property
    def net_area(self) -> float:
        return self.section.net_area

    @property
    def weight_per_meter_kg(self) -> float:
        return self.section.weight_per_meter_kg

    @property
    def info(self) -> dict[str, Any]:
        return {
            "width_mm": self.params.width,
            "height_mm": self.params.height,
            "thickness_mm": self.params.thickness,
            "length_mm": self.params.length,
            "joint_angle_deg": self.joint_angle_deg,
            "cut_angle_deg": self.cut_angle_deg,
            "rotation_angle_deg": self.rotation_angle_deg,
            "density_g_per_mm3": self.density,
            **self.section.info,
        }

    def project(self, scale: float, origin: Point2D = (0.0, 0.0)) -> ProjectedJoint:
        """Drawable geometry for this analysis."""
        return project_joint(self.params, scale, origin=origin, angles=self.angles)

    def report(self) -> str:
        """Human-readable summary of the joint and material estimate."""
        p = self.params
        lines = [
            "--- Joint Geometry Analysis ---",
            f"Internal Joint Angle (θ): {_fmt(p.joint_angle)}°",
            f"Miter Cut Angle (α): {_fmt(self.cut_angle_deg)}° (relative to face)",
            f"Tube Cross-Section: {_fmt(p.width)}W x {_fmt(p.height)}H",
            f"Wall Thickness: {_fmt(p.thickness)}T",
            f"Overall Length (L): {_fmt(p.length)} mm (Note: Only cut face shown in 2D view)",
            "",
            "--- Material Estimate (Steel) ---",
            f"Net Cross-Sectional Area: {_fmt(self.net_area)} mm²",
            f"Approx. Weight per Meter: {_fmt(self.weight_per_meter_kg)} kg",
        ]
        return "\n".join(lines)

    def plot(self, **kwargs):
        from .plotting import plot_joint

        return plot_joint(self, **kwargs)


def analyze_joint(params: TubeParameters, density: float = STEEL_DENSITY_G_PER_MM3) -> JointAnalysis:
    """Validate `params` and compute miter angles and section quantities.

    Raises:
        InvalidGeometryError: if 2T >= min(W, H). Nothing is computed.
    """
    require_valid(params)

    analysis = JointAnalysis(
        params=params,
        angles=derive_angles(params.joint_angle),
        section=analyze_cross_section(params, density),
        density=density,
    )
    logger.debug(
        "Joint θ=%g: α=%g, rotation=%g, A=%g mm², %g kg/m",
        analysis.joint_angle_deg,
        analysis.cut_angle_deg,
        analysis.rotation_angle_deg,
        analysis.net_area,
        analysis.weight_per_meter_kg,
    )
    return analysis


__all__ = ["JointAnalysis", "analyze_joint"]
