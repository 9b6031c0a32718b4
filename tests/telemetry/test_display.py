import math

from stabilizer import BodyKinematics, format_current_rpm, format_pid_output


def test_format_pid_output():
    assert format_pid_output(1.234) == "PID Output: 1.23 Nm"
    assert format_pid_output(-11.0) == "PID Output: -11.00 Nm"


def test_format_current_rpm():
    assert format_current_rpm(60.0) == "Current RPM: 60.00 RPM"


def test_display_from_controller(controller, dt):
    controller.step(BodyKinematics(350.0, 0.0, 2 * math.pi), dt)
    assert format_pid_output(controller.state.control_torque) == "PID Output: 11.00 Nm"
    assert format_current_rpm(controller.state.current_rpm) == "Current RPM: 60.00 RPM"
