"""Shared pytest fixtures for test suite."""

import pytest

from stabilizer import BodyKinematics, ControllerConfig, PIDController

DT = 0.02


@pytest.fixture
def dt():
    return DT


@pytest.fixture
def config():
    return ControllerConfig()


@pytest.fixture
def controller(config):
    return PIDController(config=config)


@pytest.fixture
def at_rest():
    """Body exactly on heading with no motion."""
    return BodyKinematics(orientation_yaw=0.0, body_angular_velocity=0.0, wheel_angular_velocity=0.0)


@pytest.fixture
def make_kinematics():
    def _make(yaw=0.0, body_rate=0.0, wheel_rate=0.0):
        return BodyKinematics(
            orientation_yaw=yaw,
            body_angular_velocity=body_rate,
            wheel_angular_velocity=wheel_rate,
        )

    return _make
