"""Net cross-section area and weight per metre of a rectangular hollow section."""

from __future__ import annotations

from dataclasses import dataclass
import logging

from ..config import STEEL_DENSITY_G_PER_MM3
from .parameters import TubeParameters

logger = logging.getLogger(__name__)

# Weight is always quoted for a notional 1 m of tube.
_METER_MM = 1000.0
_GRAMS_PER_KG = 1000.0


@dataclass(frozen=True)
class CrossSectionResult:
    """Cross-section quantities (mm, mm², kg/m)."""

    outer_area: float
    inner_width: float
    inner_height: float
    inner_area: float
    net_area: float
    weight_per_meter_kg: float

    @property
    def info(self) -> dict[str, float]:
        return {
            "outer_area_mm2": self.outer_area,
            "inner_width_mm": self.inner_width,
            "inner_height_mm": self.inner_height,
            "inner_area_mm2": self.inner_area,
            "net_area_mm2": self.net_area,
            "weight_per_meter_kg": self.weight_per_meter_kg,
        }


def _inner_dimensions(params: TubeParameters) -> tuple[float, float]:
    inner_width = max(0.0, params.width - 2.0 * params.thickness)
    inner_height = max(0.0, params.height - 2.0 * params.thickness)
    return inner_width, inner_height


def compute_net_area(params: TubeParameters) -> float:
    """Outer rectangle area minus the hollow, in mm².

    The clamps only matter for inputs that skipped validation.
    """
    outer_area = params.width * params.height
    inner_width, inner_height = _inner_dimensions(params)
    return max(0.0, outer_area - inner_width * inner_height)


def compute_weight_per_meter(net_area: float, density: float = STEEL_DENSITY_G_PER_MM3) -> float:
    """Mass of 1000 mm of tube in kg. Tube length plays no part."""
    mass_grams = net_area * density * _METER_MM
    return mass_grams / _GRAMS_PER_KG


def analyze_cross_section(
    params: TubeParameters,
    density: float = STEEL_DENSITY_G_PER_MM3,
) -> CrossSectionResult:
    """Compute all cross-section quantities for `params`."""
    inner_width, inner_height = _inner_dimensions(params)
    net_area = compute_net_area(params)
    result = CrossSectionResult(
        outer_area=params.width * params.height,
        inner_width=inner_width,
        inner_height=inner_height,
        inner_area=inner_width * inner_height,
        net_area=net_area,
        weight_per_meter_kg=compute_weight_per_meter(net_area, density),
    )
    logger.debug("Cross-section %s", result)
    return result


__all__ = [
    "CrossSectionResult",
    "compute_net_area",
    "compute_weight_per_meter",
    "analyze_cross_section",
]
