import math

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..common import rpm_to_rad_s


class ControllerConfig(BaseModel):
    """
    Gains and actuator limits of the single-axis PID stabilizer.

    Assignments are validated, so a rejected value leaves the previous one
    in place.

    Attributes:
        kp: Proportional gain (Nm/deg)
        kd: Derivative gain (Nm*s/deg)
        ki: Integral gain (Nm/(deg*s))
        target_angular_velocity: Tunable target rate in rad/s. Stored only;
            the control law does not read it.
        max_torque: Torque limit shared by body and wheel commands (Nm)
        max_wheel_rpm: Wheel speed above which the wheel is braked (RPM)
        manual_torque_multiplier: Body torque applied by a manual override (Nm)
        deadband_error_deg: Error magnitude below which control is suppressed
        deadband_rate: Body rate magnitude below which control is suppressed
    """

    model_config = ConfigDict(validate_assignment=True)

    kp: float = 19.1
    kd: float = 9.5
    ki: float = 0.0
    target_angular_velocity: float = 0.0  # rad/s
    max_torque: float = Field(default=11.0, gt=0)  # Nm
    max_wheel_rpm: float = Field(default=4000.0, gt=0)
    manual_torque_multiplier: float = 2000.0  # Nm
    deadband_error_deg: float = Field(default=0.1, ge=0)
    deadband_rate: float = Field(default=0.1, ge=0)  # rad/s

    @field_validator(
        "kp",
        "kd",
        "ki",
        "target_angular_velocity",
        "max_torque",
        "max_wheel_rpm",
        "manual_torque_multiplier",
        "deadband_error_deg",
        "deadband_rate",
    )
    @classmethod
    def validate_finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError(f"Expected a finite value, got {v!r}")
        return v

    @property
    def wheel_speed_limit(self) -> float:
        """Wheel speed limit in rad/s derived from max_wheel_rpm."""
        return rpm_to_rad_s(self.max_wheel_rpm)
