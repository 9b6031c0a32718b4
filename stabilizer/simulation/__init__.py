from .parameter_input import TUNABLE_PARAMETERS, apply_parameter_text, parse_parameter
from .pid_controller import (
    BodyKinematics,
    ControllerState,
    PIDController,
    TorqueCommand,
)

__all__ = [
    "BodyKinematics",
    "ControllerState",
    "PIDController",
    "TUNABLE_PARAMETERS",
    "TorqueCommand",
    "apply_parameter_text",
    "parse_parameter",
]
