"""Visualization utilities for stabilizer runs."""

from .control_response import plot_control_response

__all__ = ["plot_control_response"]
