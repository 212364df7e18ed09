"""
This base class defines the shared operators of fixed-step integration schemes for a two-body system.

The IntegrationScheme class holds the system, the constant time step and the
gravitational constant, and provides kick for velocity updates from the cached
accelerations, drift for position updates from the current velocities,
refresh_accelerations for recomputing both accelerations through the gravity model, and
prime for the one-time acceleration initialization that must precede the first step.
All updates are written in place through the system's scratch vector. Subclasses
implement step; the class assumes the system is owned exclusively by the current sweep
sample.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from .orbit_constants import GRAVITATIONAL_CONST
from .forces import set_accelerations
from .vector_math import multiply_vec, add_vec_into

if TYPE_CHECKING:
	from .body import TwoBodySystem



class IntegrationScheme:
	def __init__(self, system: "TwoBodySystem", dt: float, G: float = GRAVITATIONAL_CONST) -> None:
		self.system = system
		self.dt = float(dt)
		self.G = float(G)
		self.step_count = 0
		self._primed = False
		self._warned_unprimed = False

	@property
	def primed(self) -> bool:
		return self._primed

	def prime(self) -> None:
		self.refresh_accelerations()
		self._primed = True

	def refresh_accelerations(self) -> None:
		set_accelerations(self.system, self.G)

	def kick(self, h: float) -> None:
		transfer = self.system.transfer
		for body in self.system.bodies:
			multiply_vec(body.acceleration, h, out=transfer)
			add_vec_into(transfer, body.velocity)

	def drift(self, h: float) -> None:
		transfer = self.system.transfer
		for body in self.system.bodies:
			multiply_vec(body.velocity, h, out=transfer)
			add_vec_into(transfer, body.position)

	def _ensure_primed(self) -> None:
		if self._primed:
			return
		if not self._warned_unprimed:
			print("[warning] step called before prime(); initialising accelerations from current positions")
			self._warned_unprimed = True
		self.prime()

	def step(self) -> None:
		raise NotImplementedError

	def run(self, n_steps: int) -> None:
		i = 0
		while i < int(n_steps):
			self.step()
			i += 1
