def format_pid_output(torque: float) -> str:
    """Display line for the body control torque, e.g. ``PID Output: 1.23 Nm``."""
    return f"PID Output: {torque:.2f} Nm"


def format_current_rpm(rpm: float) -> str:
    """Display line for the wheel speed, e.g. ``Current RPM: 60.00 RPM``."""
    return f"Current RPM: {rpm:.2f} RPM"
