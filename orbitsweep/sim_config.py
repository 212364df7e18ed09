from __future__ import annotations
from dataclasses import dataclass, replace

from .orbit_constants import (
	EARTH_MASS,
	HUBBLE_MASS,
	ORBITAL_RADIUS,
	TIME_STEP,
	ORBITS_TO_COMPLETE,
	NUM_VELOCITIES,
	MIN_TAN_VELOCITY,
	MAX_TAN_VELOCITY,
	MAX_STEPS_DEFAULT,
)

"""
This central configuration module defines every parameter of a velocity sweep through the frozen SweepConfig dataclass. Key parameters include the primary and satellite masses, the initial orbital radius, the leapfrog time step, the number of orbits each sample must complete, the swept tangential velocity range and its sampling, the midpoint skip policy, the per-sample step ceiling, the optional collision radius and the angle measure used by the orbit detector. The class is passed explicitly into the integration and sweep entry points instead of relying on module-level constants, so tests can run alternate masses and time steps. It assumes SI units and leaves physical validation of the values to SimulationValidator.

"""

_ALLOWED_ANGLE_MEASURES = {
	"unsigned",
	"signed",
}


@dataclass(frozen=True)
class SweepConfig:
	primary_mass: float = EARTH_MASS
	satellite_mass: float = HUBBLE_MASS
	orbital_radius: float = ORBITAL_RADIUS
	dt: float = TIME_STEP
	orbits_to_complete: int = ORBITS_TO_COMPLETE
	num_velocities: int = NUM_VELOCITIES
	min_tangential_velocity: float = MIN_TAN_VELOCITY
	max_tangential_velocity: float = MAX_TAN_VELOCITY
	skip_midpoint: bool = True
	max_steps: int | None = MAX_STEPS_DEFAULT
	collision_radius: float = 0.0
	angle_measure: str = "unsigned"
	n_workers: int = 1
	energy_drift_warn_threshold: float = 1e-3
	verbose: bool = True

	def __post_init__(self) -> None:
		mode = str(self.angle_measure).lower()
		if mode not in _ALLOWED_ANGLE_MEASURES:
			print(f"[warning] Unknown angle_measure '{self.angle_measure}'; falling back to 'unsigned'")
			mode = "unsigned"
		object.__setattr__(self, "angle_measure", mode)

	@property
	def velocity_step(self) -> float:
		if self.num_velocities <= 0:
			return 0.0
		return (self.max_tangential_velocity - self.min_tangential_velocity) / float(self.num_velocities)

	@property
	def midpoint_index(self) -> int:
		return int(self.num_velocities) // 2

	def copy(self, **overrides) -> "SweepConfig":
		return replace(self, **overrides)


__all__ = ["SweepConfig"]
