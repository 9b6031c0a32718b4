from .config import StabilizerConfig
from .controller import ControllerConfig
from .inertia import InertiaModel, RigidDisk, disk_moment_of_inertia

__all__ = [
    "ControllerConfig",
    "InertiaModel",
    "RigidDisk",
    "StabilizerConfig",
    "disk_moment_of_inertia",
]
