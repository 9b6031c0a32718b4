"""Plots of stabilizer telemetry recorded over a run."""

import numpy as np
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from ..common import ControlMode
from ..telemetry import ControlTelemetry


def plot_control_response(
    telemetry: ControlTelemetry,
    dt: float,
    figsize: tuple[float, float] = (10, 9),
) -> tuple[Figure, list[Axes]]:
    """Plot the closed-loop response recorded in a ControlTelemetry.

    Creates a 3-panel figure showing:
    - Orientation error, with deadband ticks shaded
    - Body and wheel torque commands
    - Wheel speed in RPM

    Args:
        telemetry: Recorded housekeeping, one record per tick.
        dt: Control timestep in seconds, used for the time axis.
        figsize: Tuple of (width, height) for the figure size.

    Returns:
        tuple: (fig, axes) - The matplotlib figure and list of axes objects.
    """
    import matplotlib.pyplot as plt

    fields = telemetry.extract_fields(
        ["error", "body_torque", "wheel_torque", "current_rpm", "mode"]
    )
    t = np.arange(len(telemetry)) * dt

    fig, axes_arr = plt.subplots(3, 1, figsize=figsize, sharex=True)
    axes: list[Axes] = list(axes_arr)

    ax = axes[0]
    ax.plot(t, fields["error"], color="tab:blue", label="error")
    deadband = fields["mode"] == ControlMode.DEADBAND
    if deadband.any():
        ax.fill_between(
            t,
            0,
            1,
            where=deadband,
            color="tab:gray",
            alpha=0.2,
            transform=ax.get_xaxis_transform(),
            label="deadband",
        )
    ax.set_ylabel("Error (deg)")
    ax.legend(loc="upper right")
    ax.grid(True, alpha=0.3)

    ax = axes[1]
    ax.plot(t, fields["body_torque"], color="tab:orange", label="body")
    ax.plot(t, fields["wheel_torque"], color="tab:green", linestyle="--", label="wheel")
    ax.set_ylabel("Torque (Nm)")
    ax.legend(loc="upper right")
    ax.grid(True, alpha=0.3)

    ax = axes[2]
    ax.plot(t, fields["current_rpm"], color="tab:red")
    ax.set_ylabel("Wheel speed (RPM)")
    ax.set_xlabel("Time (s)")
    ax.grid(True, alpha=0.3)

    fig.tight_layout()
    return fig, axes
