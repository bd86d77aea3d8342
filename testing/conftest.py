import pytest

from mitery import JointAnalysis, TubeParameters, analyze_joint


@pytest.fixture
def default_tube() -> TubeParameters:
    """50 x 100 x 5 RHS, 300 mm long, square corner."""
    return TubeParameters(width=50.0, height=100.0, thickness=5.0, length=300.0, joint_angle=90.0)


@pytest.fixture
def square_tube() -> TubeParameters:
    """60 x 60 x 5 SHS at 135°."""
    return TubeParameters(width=60.0, height=60.0, thickness=5.0, length=300.0, joint_angle=135.0)


@pytest.fixture
def default_analysis(default_tube: TubeParameters) -> JointAnalysis:
    return analyze_joint(default_tube)
