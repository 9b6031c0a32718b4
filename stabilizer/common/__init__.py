from .angles import clamp, normalize_angle, rad_s_to_rpm, rpm_to_rad_s, sign
from .enums import ControlMode, ManualDirection

__all__ = [
    "ControlMode",
    "ManualDirection",
    "clamp",
    "normalize_angle",
    "rad_s_to_rpm",
    "rpm_to_rad_s",
    "sign",
]
