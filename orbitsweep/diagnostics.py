from __future__ import annotations
import math
import numpy as np
from typing import Dict, TYPE_CHECKING

from .orbit_constants import GRAVITATIONAL_CONST
from .forces import potential_energy
from .vector_math import zero_vec, cross, norm

if TYPE_CHECKING:
    from .body import TwoBodySystem

"""
This module computes the conserved quantities of a two-body system so the symplectic behaviour of the leapfrog scheme can be checked. The Diagnostics class provides kinetic and potential energy, total mechanical energy, total angular momentum about the origin and total linear momentum, together with relative drift helpers against reference values captured at the start of a sample and a baseline/measure pair used by the sweep driver to warn about samples whose energy wandered beyond the configured threshold. Drifts are relative where the reference is non-zero and absolute otherwise. It assumes the system has not degenerated; on NaN states every quantity is NaN and the drift helpers return inf.

"""


class Diagnostics:
	def __init__(self, system: "TwoBodySystem", G: float = GRAVITATIONAL_CONST):
		self.system = system
		self.G = float(G)
		self._E0 = None
		self._L0 = None

	def kinetic_energy(self) -> float:
		s = 0.0
		for b in self.system.bodies:
			s += b.kinetic_energy()
		return s

	def potential_energy(self) -> float:
		p = self.system.primary
		s = self.system.satellite
		return potential_energy(p.position, s.position, p.mass, s.mass, self.G)

	def energy(self) -> float:
		return self.kinetic_energy() + self.potential_energy()

	def angular_momentum(self) -> np.ndarray:
		L = zero_vec()
		for b in self.system.bodies:
			L += b.mass * cross(b.position, b.velocity)
		return L

	def linear_momentum(self) -> np.ndarray:
		P = zero_vec()
		for b in self.system.bodies:
			P += b.mass * b.velocity
		return P

	@staticmethod
	def relative_energy_drift(E0: float, E1: float) -> float:
		E0f = float(E0)
		E1f = float(E1)
		if not (math.isfinite(E0f) and math.isfinite(E1f)):
			return float("inf")
		if E0f != 0.0:
			return abs((E1f - E0f) / E0f)
		return abs(E1f - E0f)

	@staticmethod
	def relative_angular_momentum_drift(L0: np.ndarray, L1: np.ndarray) -> float:
		L0 = np.asarray(L0, dtype=float)
		L1 = np.asarray(L1, dtype=float)
		if not (np.all(np.isfinite(L0)) and np.all(np.isfinite(L1))):
			return float("inf")
		ref = norm(L0)
		diff = norm(L1 - L0)
		if ref > 0.0:
			return diff / ref
		return diff

	def capture_baseline(self) -> None:
		self._E0 = self.energy()
		self._L0 = self.angular_momentum()

	def drift_from_baseline(self) -> Dict[str, float]:
		if self._E0 is None:
			self.capture_baseline()
		return {
			"energy_drift": self.relative_energy_drift(self._E0, self.energy()),
			"ang_mom_drift": self.relative_angular_momentum_drift(self._L0, self.angular_momentum()),
		}
