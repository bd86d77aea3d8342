"""
Engine constants and input domains.

Units are fixed: lengths in mm, angles in degrees, density in g/mm³,
weight in kg.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ParameterRange:
    """Closed interval accepted for one tube parameter."""

    min: float
    max: float

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max


# Mild steel.
STEEL_DENSITY_G_PER_MM3: float = 0.00785

# Suggested wall thickness after a rejection, as a fraction of min(W, H).
SAFE_THICKNESS_RATIO: float = 0.1

# Drawing fits two tube heights plus margin across the smaller canvas side.
FIT_SCALE_DIVISOR: float = 2.5

PARAMETER_RANGES: dict[str, ParameterRange] = {
    "width": ParameterRange(10.0, 200.0),
    "height": ParameterRange(10.0, 200.0),
    "thickness": ParameterRange(1.0, 20.0),
    "length": ParameterRange(50.0, 800.0),
    "joint_angle": ParameterRange(30.0, 150.0),
}

DEFAULT_PARAMETERS: dict[str, float] = {
    "width": 50.0,
    "height": 100.0,
    "thickness": 5.0,
    "length": 300.0,
    "joint_angle": 90.0,
}

PRESET_ANGLES: tuple[int, ...] = (45, 90, 135)


__all__ = [
    "ParameterRange",
    "STEEL_DENSITY_G_PER_MM3",
    "SAFE_THICKNESS_RATIO",
    "FIT_SCALE_DIVISOR",
    "PARAMETER_RANGES",
    "DEFAULT_PARAMETERS",
    "PRESET_ANGLES",
]
