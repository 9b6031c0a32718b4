from pydantic import BaseModel, Field


def disk_moment_of_inertia(mass: float, radius: float) -> float:
    """Moment of inertia (kg*m^2) of a solid disk about its symmetry axis."""
    return 0.5 * mass * radius**2


class RigidDisk(BaseModel):
    """Solid disk described by its mass and radius."""

    mass: float = Field(gt=0, description="Mass in kg")
    radius: float = Field(gt=0, description="Radius in m")

    @property
    def moment_of_inertia(self) -> float:
        return disk_moment_of_inertia(self.mass, self.radius)


class InertiaModel(BaseModel):
    """
    Mass properties of the stabilized body and its reaction wheel.

    Both are modelled as solid disks. The resulting inertias are reported
    as telemetry; the control law does not use them.
    """

    body: RigidDisk = Field(
        default_factory=lambda: RigidDisk(mass=5.0, radius=0.06),
        description="Rocket body",
    )
    wheel: RigidDisk = Field(
        default_factory=lambda: RigidDisk(mass=0.370, radius=0.05),
        description="Reaction wheel",
    )

    @property
    def body_inertia(self) -> float:
        return self.body.moment_of_inertia

    @property
    def wheel_inertia(self) -> float:
        return self.wheel.moment_of_inertia
