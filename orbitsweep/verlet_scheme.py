"""
This module implements the kick-drift-kick leapfrog (velocity Verlet) scheme.

The LeapfrogIntegrator class extends IntegrationScheme with the standard second-order
symplectic step: a half kick with the acceleration cached from the previous step, a
full drift with the half-updated velocity, an acceleration refresh at the new
positions, and a second half kick. The scheme keeps energy and angular momentum bounded
over the many thousands of steps a multi-orbit sample takes. It assumes prime has been
called once from the initial positions; an unprimed first step primes itself and warns.
"""

from __future__ import annotations
from .integration_scheme_base import IntegrationScheme



class LeapfrogIntegrator(IntegrationScheme):
	def step(self) -> None:
		self._ensure_primed()
		h2 = 0.5 * self.dt
		self.kick(h2)
		self.drift(self.dt)
		self.refresh_accelerations()
		self.kick(h2)
		self.step_count += 1
