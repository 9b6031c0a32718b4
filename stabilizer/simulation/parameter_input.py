from __future__ import annotations

import logging
import math
from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .pid_controller import PIDController

logger = logging.getLogger(__name__)

TUNABLE_PARAMETERS = ("kp", "kd", "ki", "target_angular_velocity")


def parse_parameter(text: str) -> float | None:
    """Parse user-entered text as a finite float, or return None."""
    # Underscore digit grouping is Python syntax, not user input
    if text is None or "_" in text:
        return None
    try:
        value = float(text.strip())
    except (AttributeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return value


def _setter_for(controller: PIDController, name: str) -> Callable[[float], None]:
    if name not in TUNABLE_PARAMETERS:
        raise KeyError(f"Unknown tunable parameter {name!r}")
    return getattr(controller, f"set_{name}")


def apply_parameter_text(controller: PIDController, name: str, text: str) -> bool:
    """Update a tunable parameter from text entered by the user.

    The setter is only called when the text parses; otherwise the current
    value is kept and False is returned.

    Raises:
        KeyError: If name is not one of TUNABLE_PARAMETERS.
    """
    setter = _setter_for(controller, name)
    value = parse_parameter(text)
    if value is None:
        logger.debug("Ignoring unparseable %s input %r", name, text)
        return False
    setter(value)
    logger.debug("Updated %s to %s", name, value)
    return True
