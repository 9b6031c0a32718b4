"""Closed-loop demo: stabilize a body knocked 30 degrees off its heading.

The body and wheel are integrated about a single axis with explicit Euler
steps at a fixed 50 Hz tick, a manual push is applied for a short while,
and the controller brings the body back.

Run with: python3 examples/stabilize_demo.py [--plot]
"""

import argparse
import logging
import math

from stabilizer import (
    BodyKinematics,
    ControlTelemetry,
    ManualDirection,
    PIDController,
    StabilizerConfig,
    format_current_rpm,
    format_pid_output,
)

# Plant inertia about the control axis (kg*m^2). The disk values from the
# inertia model are far smaller than a real airframe with its payload.
BODY_MOI = 5.0
DT = 0.02


def run_demo(duration: float = 20.0, plot: bool = False) -> ControlTelemetry:
    cfg = StabilizerConfig()
    cfg.controller.manual_torque_multiplier = 2.0
    controller = PIDController(config=cfg.controller, inertia=cfg.inertia)
    telemetry = ControlTelemetry()

    yaw = 330.0  # deg
    body_rate = 0.0  # rad/s
    wheel_rate = 0.0  # rad/s
    wheel_moi = controller.j_wheel

    print(f"Body inertia (disk model): {controller.j_body:.6f} kg*m^2")
    print(f"Wheel inertia (disk model): {wheel_moi:.6f} kg*m^2")

    steps = int(duration / DT)
    for i in range(steps):
        command = controller.step(BodyKinematics(yaw, body_rate, wheel_rate), DT)
        body_torque = command.body_torque

        # Push the body for a quarter second at t = 10 s
        if 500 <= i < 512:
            body_torque += controller.apply_manual_torque(
                ManualDirection.POSITIVE
            ).body_torque

        body_rate += body_torque / BODY_MOI * DT
        wheel_rate += command.wheel_torque / wheel_moi * DT
        yaw = (yaw + math.degrees(body_rate * DT)) % 360.0
        telemetry.record(controller.housekeeping())

        if i % 100 == 0:
            print(
                f"t={i * DT:6.2f}s yaw={yaw:7.2f} "
                f"{format_pid_output(controller.state.control_torque)} "
                f"{format_current_rpm(controller.state.current_rpm)}"
            )

    summary = telemetry.summary()
    print(
        f"Max |error|: {summary['max_abs_error']:.2f} deg, "
        f"max wheel speed: {summary['max_rpm']:.0f} RPM, "
        f"deadband fraction: {summary['deadband_fraction']:.2f}"
    )

    if plot:
        import matplotlib.pyplot as plt

        from stabilizer.visualization import plot_control_response

        plot_control_response(telemetry, DT)
        plt.show()

    return telemetry


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--duration", type=float, default=20.0)
    parser.add_argument("--plot", action="store_true")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    run_demo(duration=args.duration, plot=args.plot)
