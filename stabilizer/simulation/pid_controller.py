"""Single-axis PID stabilizer for a body actuated by a reaction wheel.

Each control tick the controller reads the body yaw and the body and wheel
rates, and returns the torque to apply to the body together with the
reaction torque for the wheel. Torques are saturated at ``max_torque`` and
the wheel is braked once it spins faster than ``max_wheel_rpm``.

The controller is driven by a single caller at a fixed timestep. Calls to
``step`` and the gain setters must be serialized by the host.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from ..common import (
    ControlMode,
    ManualDirection,
    clamp,
    normalize_angle,
    rad_s_to_rpm,
    sign,
)
from ..config import ControllerConfig, InertiaModel
from ..telemetry import ControllerHousekeeping

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BodyKinematics:
    """Per-tick measurement of the body and wheel about the control axis."""

    orientation_yaw: float  # deg, 0-360 convention
    body_angular_velocity: float  # rad/s
    wheel_angular_velocity: float  # rad/s

    def is_finite(self) -> bool:
        return all(
            math.isfinite(v)
            for v in (
                self.orientation_yaw,
                self.body_angular_velocity,
                self.wheel_angular_velocity,
            )
        )


@dataclass(frozen=True)
class TorqueCommand:
    """Torques (N*m) to apply to the body and the reaction wheel."""

    body_torque: float
    wheel_torque: float

    @classmethod
    def zero(cls) -> TorqueCommand:
        return cls(0.0, 0.0)


@dataclass
class ControllerState:
    """Mutable controller state.

    previous_error and integral_accumulator feed the PID law; the remaining
    fields are telemetry and are never read back by the law.
    """

    previous_error: float = 0.0  # deg
    integral_accumulator: float = 0.0  # deg*s
    current_rpm: float = 0.0
    control_torque: float = 0.0  # last active-mode body torque, N*m
    mode: ControlMode = ControlMode.DEADBAND
    wheel_braking: bool = False
    tick_count: int = 0
    skipped_ticks: int = 0


class PIDController:
    """PID attitude controller with torque saturation and wheel braking.

    The orientation error is the negated yaw, normalized to (-180, 180].
    Inside the deadband (small error and small body rate) no torque is
    commanded and the integral is reset. The mode is re-evaluated from the
    instantaneous error and rate every tick, without hysteresis.

    The integral accumulator is not clamped on its own; only the final
    torque is saturated.
    """

    def __init__(
        self,
        config: ControllerConfig | None = None,
        inertia: InertiaModel | None = None,
    ) -> None:
        self.config = config if config is not None else ControllerConfig()
        self.inertia = inertia if inertia is not None else InertiaModel()
        # Reported only, the control law does not use them
        self.j_body = self.inertia.body_inertia
        self.j_wheel = self.inertia.wheel_inertia
        self.state = ControllerState()
        self.last_command = TorqueCommand.zero()
        self.last_error = 0.0

    def reset(self) -> None:
        """Return the controller to its freshly constructed state."""
        self.state = ControllerState()
        self.last_command = TorqueCommand.zero()
        self.last_error = 0.0

    def compute_error(self, orientation_yaw: float) -> float:
        """Orientation error in degrees for a yaw in the 0-360 convention."""
        return -normalize_angle(orientation_yaw)

    def in_deadband(self, error: float, body_angular_velocity: float) -> bool:
        return (
            abs(error) < self.config.deadband_error_deg
            and abs(body_angular_velocity) < self.config.deadband_rate
        )

    def step(self, kinematics: BodyKinematics, dt: float) -> TorqueCommand:
        """Advance the controller by one tick of length dt (s).

        dt is expected to be the same fixed timestep on every call. A tick
        with a non-positive or non-finite dt is skipped: the state is left
        untouched and the previous command is returned again. The same
        applies when any kinematics reading is non-finite.
        """
        if not math.isfinite(dt) or dt <= 0:
            self.state.skipped_ticks += 1
            logger.warning(
                "Skipping control tick with invalid dt=%s (skipped=%d)",
                dt,
                self.state.skipped_ticks,
            )
            return self.last_command

        if not kinematics.is_finite():
            self.state.skipped_ticks += 1
            logger.warning(
                "Skipping control tick with non-finite kinematics %s (skipped=%d)",
                kinematics,
                self.state.skipped_ticks,
            )
            return self.last_command

        cfg = self.config
        state = self.state
        state.tick_count += 1

        error = self.compute_error(kinematics.orientation_yaw)
        self.last_error = error

        if self.in_deadband(error, kinematics.body_angular_velocity):
            if state.mode != ControlMode.DEADBAND:
                logger.debug(
                    "Entering deadband: error=%.4f deg rate=%.4f rad/s",
                    error,
                    kinematics.body_angular_velocity,
                )
            state.mode = ControlMode.DEADBAND
            state.wheel_braking = False
            state.integral_accumulator = 0.0
            state.previous_error = error
            self.last_command = TorqueCommand.zero()
            return self.last_command

        state.mode = ControlMode.ACTIVE
        state.integral_accumulator += error * dt
        derivative = (error - state.previous_error) / dt

        control_torque = (
            cfg.kp * error + cfg.kd * derivative + cfg.ki * state.integral_accumulator
        )
        control_torque = clamp(control_torque, -cfg.max_torque, cfg.max_torque)

        # Reaction pair
        wheel_torque = -control_torque

        wheel_rate = kinematics.wheel_angular_velocity
        state.wheel_braking = abs(wheel_rate) > cfg.wheel_speed_limit
        if state.wheel_braking:
            wheel_torque = -sign(wheel_rate) * cfg.max_torque
            logger.debug(
                "Wheel over speed limit: rate=%.2f rad/s limit=%.2f rad/s, braking with %.2f Nm",
                wheel_rate,
                cfg.wheel_speed_limit,
                wheel_torque,
            )

        state.current_rpm = rad_s_to_rpm(abs(wheel_rate))
        state.control_torque = control_torque
        state.previous_error = error

        self.last_command = TorqueCommand(control_torque, wheel_torque)
        return self.last_command

    def apply_manual_torque(self, direction: ManualDirection) -> TorqueCommand:
        """Body-only torque for a manual override input.

        Independent of the PID state: neither the previous error nor the
        integral accumulator is changed.
        """
        direction = ManualDirection(direction)
        torque = direction.value * self.config.manual_torque_multiplier
        logger.debug("Manual torque %s: %.2f Nm", direction.name, torque)
        return TorqueCommand(torque, 0.0)

    def set_kp(self, value: float) -> None:
        self.config.kp = value

    def set_kd(self, value: float) -> None:
        self.config.kd = value

    def set_ki(self, value: float) -> None:
        self.config.ki = value

    def set_target_angular_velocity(self, value: float) -> None:
        # TODO: decide whether this should bound the wheel speed instead of
        # max_wheel_rpm; currently stored for display only.
        self.config.target_angular_velocity = value

    def housekeeping(self) -> ControllerHousekeeping:
        """Snapshot of the controller state and last command."""
        return ControllerHousekeeping(
            tick=self.state.tick_count,
            error=self.last_error,
            integral_accumulator=self.state.integral_accumulator,
            control_torque=self.state.control_torque,
            body_torque=self.last_command.body_torque,
            wheel_torque=self.last_command.wheel_torque,
            current_rpm=self.state.current_rpm,
            mode=self.state.mode,
            wheel_braking=self.state.wheel_braking,
        )
