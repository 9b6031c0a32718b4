from math import copysign, pi


def normalize_angle(angle_deg: float) -> float:
    """Map an angle in the 0-360 convention onto (-180, 180].

    Only values above 180 are shifted, so 180 itself is kept.
    """
    if angle_deg > 180.0:
        return angle_deg - 360.0
    return angle_deg


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def sign(value: float) -> float:
    """Return -1.0, 0.0 or 1.0."""
    if value == 0:
        return 0.0
    return copysign(1.0, value)


def rad_s_to_rpm(rate: float) -> float:
    return rate * 60.0 / (2.0 * pi)


def rpm_to_rad_s(rpm: float) -> float:
    return rpm * 2.0 * pi / 60.0
