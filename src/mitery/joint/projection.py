"""
2D schematic projection of the two mating tube cross-sections.

Coordinates are in the drawing frame of a raster canvas: x to the right, y
down, in pixels (physical mm times `scale`). Rectangles are returned as four
corners starting at the top-left corner and running clockwise on screen; the
closing edge back to the first point is implied.

The cut indicator is a schematic cue for the cut orientation. It is not the
intersection of the real cut plane with the tube.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence
import logging
import math

import numpy as np

from ..config import FIT_SCALE_DIVISOR
from ..tube.parameters import TubeParameters
from .miter import MiterAngles, derive_angles

logger = logging.getLogger(__name__)

Point2D = tuple[float, float]  # (x, y)


@dataclass(frozen=True)
class ProjectedHalf:
    """Drawable geometry for one tube half, already in the shared frame."""

    outer: list[Point2D]
    inner: list[Point2D]
    cut_line: tuple[Point2D, Point2D]

    @property
    def outer_closed(self) -> list[Point2D]:
        """Outer corners with the first point repeated at the end."""
        return [*self.outer, self.outer[0]]

    @property
    def inner_closed(self) -> list[Point2D]:
        """Inner corners with the first point repeated at the end."""
        return [*self.inner, self.inner[0]]


@dataclass(frozen=True)
class ProjectedJoint:
    """Both halves of the joint plus the shared joint centre."""

    reference: ProjectedHalf
    mating: ProjectedHalf
    origin: Point2D = (0.0, 0.0)

    @property
    def outer_a(self) -> list[Point2D]:
        return self.reference.outer

    @property
    def inner_a(self) -> list[Point2D]:
        return self.reference.inner

    @property
    def cut_line_a(self) -> tuple[Point2D, Point2D]:
        return self.reference.cut_line

    @property
    def outer_b(self) -> list[Point2D]:
        return self.mating.outer

    @property
    def inner_b(self) -> list[Point2D]:
        return self.mating.inner

    @property
    def cut_line_b(self) -> tuple[Point2D, Point2D]:
        return self.mating.cut_line

    @property
    def halves(self) -> tuple[ProjectedHalf, ProjectedHalf]:
        return (self.reference, self.mating)


def _centered_rectangle(width: float, height: float) -> list[Point2D]:
    half_w = width / 2.0
    half_h = height / 2.0
    # top-left, top-right, bottom-right, bottom-left (clockwise, y down)
    return [
        (-half_w, -half_h),
        (half_w, -half_h),
        (half_w, half_h),
        (-half_w, half_h),
    ]


def rotate_points(points: Sequence[Point2D], angle_rad: float) -> list[Point2D]:
    """Rotate points about (0, 0) by `angle_rad`."""
    if not points:
        return []
    c = math.cos(angle_rad)
    s = math.sin(angle_rad)
    rotation = np.array([[c, -s], [s, c]], dtype=float)
    rotated = np.asarray(points, dtype=float) @ rotation.T
    return [(float(x), float(y)) for x, y in rotated]


def translate_points(points: Sequence[Point2D], dx: float, dy: float) -> list[Point2D]:
    """Shift points by (dx, dy)."""
    return [(float(x) + dx, float(y) + dy) for x, y in points]


def project_half(
    params: TubeParameters,
    scale: float,
    cut_angle_rad: float,
    rotation_angle_rad: float,
    origin_x: float = 0.0,
    origin_y: float = 0.0,
) -> ProjectedHalf:
    """
    Project one tube half into the shared joint frame.

    Args:
        params: Validated tube parameters
        scale: Pixels per mm (must be positive; not checked)
        cut_angle_rad: Direction of the cut indicator
        rotation_angle_rad: 0 for the reference half, (180 − θ) in radians
            for the mating half
        origin_x: Joint centre x in the drawing frame
        origin_y: Joint centre y in the drawing frame

    Returns:
        `ProjectedHalf` with outer/inner rectangles rotated about the joint
        centre and the cut indicator starting at the joint centre.
    """
    w = params.width * scale
    h = params.height * scale
    t = params.thickness * scale

    outer = _centered_rectangle(w, h)
    inner = _centered_rectangle(w - 2.0 * t, h - 2.0 * t)

    outer = translate_points(rotate_points(outer, rotation_angle_rad), origin_x, origin_y)
    inner = translate_points(rotate_points(inner, rotation_angle_rad), origin_x, origin_y)

    # Drawn without the half's rotation; the mating half points the other way.
    miter_length = max(w, h) / 2.0
    direction = 1.0 if rotation_angle_rad == 0 else -1.0
    cut_end = (
        origin_x + miter_length * math.cos(cut_angle_rad) * direction,
        origin_y + miter_length * math.sin(cut_angle_rad) * direction,
    )
    cut_line = ((float(origin_x), float(origin_y)), cut_end)

    return ProjectedHalf(outer=outer, inner=inner, cut_line=cut_line)


def project_joint(
    params: TubeParameters,
    scale: float,
    origin: Point2D = (0.0, 0.0),
    angles: MiterAngles | None = None,
) -> ProjectedJoint:
    """Project both halves: the fixed reference half and the rotated mating half."""
    if angles is None:
        angles = derive_angles(params.joint_angle)

    origin_x, origin_y = float(origin[0]), float(origin[1])
    cut_rad = angles.cut_angle_rad

    reference = project_half(params, scale, -cut_rad, 0.0, origin_x, origin_y)
    mating = project_half(params, scale, cut_rad, angles.rotation_angle_rad, origin_x, origin_y)

    logger.debug(
        "Projected joint θ=%g at scale %g about (%g, %g)",
        params.joint_angle,
        scale,
        origin_x,
        origin_y,
    )
    return ProjectedJoint(reference=reference, mating=mating, origin=(origin_x, origin_y))


def fit_scale(canvas_width: float, canvas_height: float, params: TubeParameters) -> float:
    """Pixels per mm that fit the joint into a canvas of the given size."""
    if canvas_width <= 0.0 or canvas_height <= 0.0:
        raise ValueError("Canvas width and height must be positive")
    return min(canvas_width, canvas_height) / (params.height * FIT_SCALE_DIVISOR)


__all__ = [
    "Point2D",
    "ProjectedHalf",
    "ProjectedJoint",
    "rotate_points",
    "translate_points",
    "project_half",
    "project_joint",
    "fit_scale",
]
