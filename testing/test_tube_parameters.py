from __future__ import annotations

import logging

import pytest

from mitery import (
    InvalidGeometryError,
    TubeParameters,
    out_of_range_fields,
    require_valid,
    suggested_thickness,
    validate,
    validate_parameters,
)
from mitery.tube.parameters import THICKNESS_TOO_LARGE


def test_default_parameters() -> None:
    params = TubeParameters()
    assert (params.width, params.height, params.thickness) == (50.0, 100.0, 5.0)
    assert params.length == 300.0
    assert params.joint_angle == 90.0


def test_fields_are_coerced_to_float() -> None:
    params = TubeParameters(width=50, height=100, thickness=5, length=300, joint_angle=90)
    assert isinstance(params.width, float)
    assert isinstance(params.joint_angle, float)


def test_parameters_are_immutable(default_tube: TubeParameters) -> None:
    with pytest.raises(AttributeError):
        default_tube.thickness = 2.0  # type: ignore[misc]


def test_with_thickness_returns_copy(default_tube: TubeParameters) -> None:
    thinner = default_tube.with_thickness(3.0)
    assert thinner.thickness == 3.0
    assert default_tube.thickness == 5.0
    assert thinner.width == default_tube.width


def test_valid_parameters_accepted(default_tube: TubeParameters) -> None:
    result = validate_parameters(default_tube)
    assert result.ok
    assert bool(result)
    assert result.reason is None
    assert result.suggested_thickness is None


def test_thickness_too_large_rejected_with_suggestion() -> None:
    # 2 * 25 = 50 >= min(50, 100)
    result = validate(50.0, 100.0, 25.0, 300.0, 90.0)
    assert not result.ok
    assert result.reason == THICKNESS_TOO_LARGE
    assert result.suggested_thickness == pytest.approx(5.0)


def test_boundary_is_rejected() -> None:
    # 2T == min(W, H) must be rejected (strict inequality)
    assert not validate(40.0, 80.0, 20.0, 300.0, 90.0).ok
    assert validate(40.0, 80.0, 19.999, 300.0, 90.0).ok


@pytest.mark.parametrize(
    ("width", "height", "thickness", "expected"),
    [
        (10.0, 10.0, 4.9, True),
        (10.0, 10.0, 5.0, False),
        (200.0, 30.0, 14.0, True),
        (200.0, 30.0, 15.0, False),
        (30.0, 200.0, 20.0, False),
    ],
)
def test_rejects_exactly_when_wall_fills_smaller_side(
    width: float, height: float, thickness: float, expected: bool
) -> None:
    assert validate(width, height, thickness, 300.0, 90.0).ok is expected


def test_rejection_does_not_mutate_input() -> None:
    params = TubeParameters(width=50.0, height=100.0, thickness=25.0)
    validate_parameters(params)
    assert params.thickness == 25.0


def test_require_valid_raises_typed_error() -> None:
    params = TubeParameters(width=50.0, height=100.0, thickness=25.0)

    with pytest.raises(InvalidGeometryError, match=r"wall thickness must be less than half") as excinfo:
        require_valid(params)

    err = excinfo.value
    assert isinstance(err, ValueError)
    assert err.params is params
    assert err.reason == THICKNESS_TOO_LARGE
    assert err.suggested_thickness == pytest.approx(5.0)


def test_require_valid_returns_params(default_tube: TubeParameters) -> None:
    assert require_valid(default_tube) is default_tube


def test_suggested_thickness_uses_smaller_side() -> None:
    assert suggested_thickness(120.0, 80.0) == pytest.approx(8.0)


def test_suggested_thickness_is_itself_valid() -> None:
    params = TubeParameters(width=50.0, height=100.0, thickness=30.0)
    fixed = params.with_thickness(validate_parameters(params).suggested_thickness)
    assert validate_parameters(fixed).ok


def test_rejection_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="mitery"):
        validate(50.0, 100.0, 25.0, 300.0, 90.0)
    assert any("Rejected tube" in rec.getMessage() for rec in caplog.records)


def test_out_of_range_fields() -> None:
    params = TubeParameters(width=5.0, height=100.0, thickness=2.0, length=900.0, joint_angle=170.0)
    assert out_of_range_fields(params) == ["width", "length", "joint_angle"]


def test_out_of_range_fields_empty_for_defaults(default_tube: TubeParameters) -> None:
    assert out_of_range_fields(default_tube) == []
