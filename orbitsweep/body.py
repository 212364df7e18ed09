"""
This module defines the Body and TwoBodySystem containers for a single sweep sample.

Body stores a fixed mass together with position, velocity and cached acceleration
3-vectors as float64 arrays that the integrator mutates in place. TwoBodySystem owns the
primary/satellite pair and one scratch vector reused by the force model and the leapfrog
scheme, so a step allocates no temporaries. A system is built fresh for every sweep
sample via from_config and is never shared between samples or worker processes. The
classes make no physical checks themselves; SimulationValidator handles that.
"""

from __future__ import annotations
from typing import TYPE_CHECKING
import numpy as np

from .vector_math import as_vec, zero_vec, subtract_vecs, norm

if TYPE_CHECKING:
	from .sim_config import SweepConfig


class Body:
	__slots__ = ("_mass", "position", "velocity", "acceleration")

	def __init__(self, mass: float, position, velocity, acceleration=None):
		self._mass = float(mass)
		self.position = as_vec(position)
		self.velocity = as_vec(velocity)
		if acceleration is None:
			self.acceleration = zero_vec()
		else:
			self.acceleration = as_vec(acceleration)

	@property
	def mass(self) -> float:
		return self._mass

	def kinetic_energy(self) -> float:
		v = self.velocity
		return 0.5 * self._mass * float(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])

	def __repr__(self) -> str:
		return (f"Body(mass={self.mass}, position={self.position.tolist()}, "
				f"velocity={self.velocity.tolist()})")


class TwoBodySystem:
	def __init__(self, primary: Body, satellite: Body):
		self.primary = primary
		self.satellite = satellite
		self.transfer = zero_vec()

	@classmethod
	def from_config(cls, config: "SweepConfig", tangential_velocity: float) -> "TwoBodySystem":
		primary = Body(
			config.primary_mass,
			[0.0, 0.0, 0.0],
			[0.0, 0.0, 0.0],
		)
		satellite = Body(
			config.satellite_mass,
			[0.0, float(config.orbital_radius), 0.0],
			[float(tangential_velocity), 0.0, 0.0],
		)
		return cls(primary, satellite)

	@property
	def bodies(self):
		return (self.primary, self.satellite)

	def displacement(self, out: np.ndarray | None = None) -> np.ndarray:
		return subtract_vecs(self.satellite.position, self.primary.position, out=out)

	def separation(self) -> float:
		return norm(self.displacement())

	def __repr__(self) -> str:
		return f"TwoBodySystem(primary={self.primary!r}, satellite={self.satellite!r})"
