"""Telemetry records for the stabilizer control loop."""

from collections.abc import Iterator
from typing import Any

import numpy as np
from pydantic import BaseModel, Field

from ..common import ControlMode


class ControllerHousekeeping(BaseModel):
    """
    Housekeeping telemetry record from the stabilizer.

    Records controller state and commanded torques at a single tick.

    Attributes:
        tick: Number of control ticks executed so far
        error: Orientation error in degrees
        integral_accumulator: Integral term in deg*s
        control_torque: Last active-mode body torque in Nm
        body_torque: Body torque of the last returned command in Nm
        wheel_torque: Wheel torque of the last returned command in Nm
        current_rpm: Wheel speed in RPM
        mode: Controller mode evaluated at this tick
        wheel_braking: True when the wheel speed limit overrode the wheel torque
    """

    tick: int = Field(default=0, description="Control tick count")
    error: float = Field(default=0.0, description="Orientation error in degrees")
    integral_accumulator: float = Field(
        default=0.0, description="Integral accumulator in deg*s"
    )
    control_torque: float = Field(
        default=0.0, description="Last active-mode body torque in Nm"
    )
    body_torque: float = Field(default=0.0, description="Commanded body torque in Nm")
    wheel_torque: float = Field(
        default=0.0, description="Commanded wheel torque in Nm"
    )
    current_rpm: float = Field(default=0.0, description="Wheel speed in RPM")
    mode: ControlMode = Field(default=ControlMode.DEADBAND, description="Control mode")
    wheel_braking: bool = Field(
        default=False, description="Wheel speed limit override active"
    )


class ControlTelemetry(BaseModel):
    """Ordered collection of ControllerHousekeeping records."""

    housekeeping: list[ControllerHousekeeping] = Field(
        default_factory=list, description="Recorded housekeeping"
    )

    def record(self, hk: ControllerHousekeeping) -> None:
        self.housekeeping.append(hk)

    def extract_field(self, field_name: str) -> np.ndarray:
        """
        Extract one field across all records as an array.

        Parameters
        ----------
        field_name : str
            Name of a ControllerHousekeeping attribute

        Returns
        -------
        np.ndarray
            One value per recorded tick

        Raises
        ------
        AttributeError
            If field_name is not a ControllerHousekeeping attribute
        """
        return np.array([getattr(hk, field_name) for hk in self.housekeeping])

    def extract_fields(self, field_names: list[str]) -> dict[str, np.ndarray]:
        return {name: self.extract_field(name) for name in field_names}

    def clear(self) -> None:
        self.housekeeping.clear()

    def __len__(self) -> int:
        return len(self.housekeeping)

    def __iter__(self) -> Iterator[ControllerHousekeeping]:  # type: ignore[override]
        return iter(self.housekeeping)

    def __getitem__(self, index: int) -> ControllerHousekeeping:
        return self.housekeeping[index]

    def summary(self) -> dict[str, Any]:
        """Peak values over the recorded run."""
        if not self.housekeeping:
            return {
                "ticks": 0,
                "max_abs_error": 0.0,
                "max_abs_body_torque": 0.0,
                "max_rpm": 0.0,
                "deadband_fraction": 0.0,
            }
        errors = self.extract_field("error")
        body = self.extract_field("body_torque")
        rpm = self.extract_field("current_rpm")
        modes = self.extract_field("mode")
        return {
            "ticks": len(self.housekeeping),
            "max_abs_error": float(np.max(np.abs(errors))),
            "max_abs_body_torque": float(np.max(np.abs(body))),
            "max_rpm": float(np.max(rpm)),
            "deadband_fraction": float(np.mean(modes == ControlMode.DEADBAND)),
        }
