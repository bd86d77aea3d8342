"""Miter joint angles, projection, analysis and plotting."""

from .analysis import JointAnalysis, analyze_joint
from .miter import MiterAngles, derive_angles
from .plotting import plot_joint
from .projection import (
    Point2D,
    ProjectedHalf,
    ProjectedJoint,
    fit_scale,
    project_half,
    project_joint,
    rotate_points,
    translate_points,
)

__all__ = [
    "MiterAngles",
    "derive_angles",
    "Point2D",
    "ProjectedHalf",
    "ProjectedJoint",
    "rotate_points",
    "translate_points",
    "project_half",
    "project_joint",
    "fit_scale",
    "JointAnalysis",
    "analyze_joint",
    "plot_joint",
]
