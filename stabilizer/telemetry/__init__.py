from .display import format_current_rpm, format_pid_output
from .housekeeping import ControllerHousekeeping, ControlTelemetry

__all__ = [
    "ControlTelemetry",
    "ControllerHousekeeping",
    "format_current_rpm",
    "format_pid_output",
]
