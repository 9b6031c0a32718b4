from enum import Enum


class ManualDirection(int, Enum):
    """Manual override directions about the control axis"""

    NEGATIVE = -1
    POSITIVE = 1


class ControlMode(int, Enum):
    """Controller modes, re-evaluated every tick"""

    ACTIVE = 0
    DEADBAND = 1
