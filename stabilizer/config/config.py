from pathlib import Path

from pydantic import BaseModel, Field

from .controller import ControllerConfig
from .inertia import InertiaModel


class StabilizerConfig(BaseModel):
    """Top-level configuration for a reaction-wheel stabilizer."""

    name: str = "Default Stabilizer"
    controller: ControllerConfig = Field(default_factory=ControllerConfig)
    inertia: InertiaModel = Field(default_factory=InertiaModel)

    @classmethod
    def from_json_file(cls, filename: str | Path) -> "StabilizerConfig":
        """Load a configuration from a JSON file.

        Missing sections fall back to their defaults.
        """
        with open(filename) as f:
            return cls.model_validate_json(f.read())

    def to_json_file(self, filename: str | Path) -> None:
        with open(filename, "w") as f:
            f.write(self.model_dump_json(indent=2))
