from __future__ import annotations

import math

import pytest

from mitery import derive_angles


def test_square_corner() -> None:
    angles = derive_angles(90.0)
    assert angles.cut_angle_deg == pytest.approx(45.0)
    assert angles.rotation_angle_deg == pytest.approx(90.0)


def test_acute_joint() -> None:
    angles = derive_angles(45.0)
    assert angles.cut_angle_deg == pytest.approx(22.5)
    assert angles.rotation_angle_deg == pytest.approx(135.0)


def test_obtuse_joint() -> None:
    assert derive_angles(135.0).cut_angle_deg == pytest.approx(67.5)


@pytest.mark.parametrize("theta", [30.0, 45.0, 60.0, 90.0, 120.0, 135.0, 150.0])
def test_formulas_hold_over_domain(theta: float) -> None:
    angles = derive_angles(theta)
    assert angles.cut_angle_deg == pytest.approx(theta / 2.0)
    assert angles.rotation_angle_deg == pytest.approx(180.0 - theta)


def test_straight_joint_has_no_rotation() -> None:
    assert derive_angles(180.0).rotation_angle_deg == 0.0


def test_radian_properties() -> None:
    angles = derive_angles(90)
    assert angles.cut_angle_rad == pytest.approx(math.pi / 4)
    assert angles.rotation_angle_rad == pytest.approx(math.pi / 2)
