import math

import numpy as np
import pytest

from stabilizer import ControlMode, ControlTelemetry, ControllerHousekeeping


def test_housekeeping_after_active_tick(controller, make_kinematics, dt):
    controller.step(make_kinematics(yaw=10.0, wheel_rate=500.0), dt)
    hk = controller.housekeeping()
    assert hk.tick == 1
    assert hk.error == pytest.approx(-10.0)
    assert hk.body_torque == -11.0
    assert hk.wheel_torque == -11.0
    assert hk.control_torque == -11.0
    assert hk.mode == ControlMode.ACTIVE
    assert hk.wheel_braking is True
    assert hk.current_rpm == pytest.approx(500.0 * 60 / (2 * math.pi))


def test_housekeeping_in_deadband(controller, at_rest, dt):
    controller.step(at_rest, dt)
    hk = controller.housekeeping()
    assert hk.mode == ControlMode.DEADBAND
    assert hk.body_torque == 0.0
    assert hk.integral_accumulator == 0.0


class TestControlTelemetry:
    def test_record_and_extract(self, controller, make_kinematics, dt):
        telemetry = ControlTelemetry()
        for yaw in (350.0, 355.0, 0.0):
            controller.step(make_kinematics(yaw=yaw), dt)
            telemetry.record(controller.housekeeping())

        assert len(telemetry) == 3
        errors = telemetry.extract_field("error")
        assert isinstance(errors, np.ndarray)
        np.testing.assert_allclose(errors, [10.0, 5.0, 0.0], atol=1e-9)

        fields = telemetry.extract_fields(["tick", "mode"])
        np.testing.assert_array_equal(fields["tick"], [1, 2, 3])
        assert fields["mode"][-1] == ControlMode.DEADBAND
        assert telemetry[0].body_torque == 11.0
        assert [hk.tick for hk in telemetry] == [1, 2, 3]

    def test_extract_unknown_field(self):
        telemetry = ControlTelemetry(housekeeping=[ControllerHousekeeping()])
        with pytest.raises(AttributeError):
            telemetry.extract_field("not_a_field")

    def test_summary(self):
        telemetry = ControlTelemetry()
        telemetry.record(
            ControllerHousekeeping(error=-4.0, body_torque=-11.0, current_rpm=100.0, mode=ControlMode.ACTIVE)
        )
        telemetry.record(ControllerHousekeeping(error=1.0, body_torque=2.0, current_rpm=250.0, mode=ControlMode.ACTIVE))
        telemetry.record(ControllerHousekeeping(mode=ControlMode.DEADBAND))
        telemetry.record(ControllerHousekeeping(mode=ControlMode.DEADBAND))

        summary = telemetry.summary()
        assert summary["ticks"] == 4
        assert summary["max_abs_error"] == 4.0
        assert summary["max_abs_body_torque"] == 11.0
        assert summary["max_rpm"] == 250.0
        assert summary["deadband_fraction"] == 0.5

    def test_summary_empty(self):
        assert ControlTelemetry().summary()["ticks"] == 0

    def test_clear(self):
        telemetry = ControlTelemetry(housekeeping=[ControllerHousekeeping()])
        telemetry.clear()
        assert len(telemetry) == 0
