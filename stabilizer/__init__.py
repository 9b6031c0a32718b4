from .common import ControlMode, ManualDirection
from .config import (
    ControllerConfig,
    InertiaModel,
    RigidDisk,
    StabilizerConfig,
    disk_moment_of_inertia,
)
from .simulation import (
    BodyKinematics,
    ControllerState,
    PIDController,
    TorqueCommand,
    apply_parameter_text,
    parse_parameter,
)
from .telemetry import (
    ControllerHousekeeping,
    ControlTelemetry,
    format_current_rpm,
    format_pid_output,
)

__all__ = [
    "BodyKinematics",
    "ControlMode",
    "ControlTelemetry",
    "ControllerConfig",
    "ControllerHousekeeping",
    "ControllerState",
    "InertiaModel",
    "ManualDirection",
    "PIDController",
    "RigidDisk",
    "StabilizerConfig",
    "TorqueCommand",
    "apply_parameter_text",
    "disk_moment_of_inertia",
    "format_current_rpm",
    "format_pid_output",
    "parse_parameter",
]
