"""Shared fixtures for visualization tests."""

import matplotlib
import pytest

matplotlib.use("Agg")  # Use non-interactive backend for testing

from stabilizer import BodyKinematics, ControlTelemetry  # noqa: E402


@pytest.fixture
def recorded_telemetry(controller, dt):
    telemetry = ControlTelemetry()
    for yaw in (340.0, 345.0, 350.0, 355.0, 0.0, 0.0):
        controller.step(BodyKinematics(yaw, 0.0, 50.0), dt)
        telemetry.record(controller.housekeeping())
    return telemetry
