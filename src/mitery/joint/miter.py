"""Miter cut angle and relative rotation for a two-piece joint."""

from __future__ import annotations

from dataclasses import dataclass
import math


@dataclass(frozen=True)
class MiterAngles:
    """Angles for a miter joint of a given internal angle (degrees).

    Attributes:
        cut_angle_deg: Cut angle α relative to the tube face (θ / 2)
        rotation_angle_deg: Rotation of the mating half relative to the
            reference half (180 − θ)
    """

    cut_angle_deg: float
    rotation_angle_deg: float

    @property
    def cut_angle_rad(self) -> float:
        return math.radians(self.cut_angle_deg)

    @property
    def rotation_angle_rad(self) -> float:
        return math.radians(self.rotation_angle_deg)


def derive_angles(joint_angle_deg: float) -> MiterAngles:
    """Cut and rotation angles for internal joint angle θ.

    A straight joint (θ = 180) gives zero rotation.
    """
    joint_angle_deg = float(joint_angle_deg)
    return MiterAngles(
        cut_angle_deg=joint_angle_deg / 2.0,
        rotation_angle_deg=180.0 - joint_angle_deg,
    )


__all__ = ["MiterAngles", "derive_angles"]
