"""
This module provides validation utilities for sweep configurations and two-body states.

The SimulationValidator class offers static methods to check configuration validity
(positive masses, radius, time step and orbit count, a finite and ordered velocity
range, a positive or disabled step ceiling, a non-negative collision radius) and state
validity (positive finite masses, finite 3-vectors for every body), plus a report
helper that prints the offending fields. Validation runs once before a sweep starts and
once per freshly initialized sample; it never raises, so callers decide how to react.
"""

from __future__ import annotations
import math
from typing import TYPE_CHECKING
import numpy as np

if TYPE_CHECKING:
	from .sim_config import SweepConfig
	from .body import TwoBodySystem



def _positive_finite(value) -> bool:
	if isinstance(value, bool) or not isinstance(value, (int, float, np.integer, np.floating)):
		return False
	v = float(value)
	return math.isfinite(v) and v > 0.0


class SimulationValidator:
	@staticmethod
	def config_problems(config: "SweepConfig") -> list:
		problems = []

		for name in ("primary_mass", "satellite_mass", "orbital_radius", "dt"):
			if not _positive_finite(getattr(config, name, None)):
				problems.append(f"{name} must be positive and finite, got {getattr(config, name, None)!r}")

		if int(config.orbits_to_complete) < 1:
			problems.append(f"orbits_to_complete must be >= 1, got {config.orbits_to_complete!r}")
		if int(config.num_velocities) < 1:
			problems.append(f"num_velocities must be >= 1, got {config.num_velocities!r}")

		v_min = float(config.min_tangential_velocity)
		v_max = float(config.max_tangential_velocity)
		if not (math.isfinite(v_min) and math.isfinite(v_max)):
			problems.append("tangential velocity bounds must be finite")
		elif v_min > v_max:
			problems.append(f"min_tangential_velocity {v_min} exceeds max_tangential_velocity {v_max}")

		if config.max_steps is not None and int(config.max_steps) < 1:
			problems.append(f"max_steps must be None or >= 1, got {config.max_steps!r}")

		c_rad = float(config.collision_radius)
		if not math.isfinite(c_rad) or c_rad < 0.0:
			problems.append(f"collision_radius must be >= 0, got {config.collision_radius!r}")
		elif c_rad >= float(config.orbital_radius):
			problems.append("collision_radius must be smaller than orbital_radius")

		if int(config.n_workers) < 1:
			problems.append(f"n_workers must be >= 1, got {config.n_workers!r}")

		return problems

	@staticmethod
	def config_is_valid(config: "SweepConfig") -> bool:
		return not SimulationValidator.config_problems(config)

	@staticmethod
	def state_is_valid(system: "TwoBodySystem") -> bool:
		if system is None:
			return False
		for body in system.bodies:
			if not _positive_finite(body.mass):
				return False
			for vec in (body.position, body.velocity, body.acceleration):
				arr = np.asarray(vec, dtype=float)
				if arr.shape != (3,):
					return False
				if not np.all(np.isfinite(arr)):
					return False
		return True

	@staticmethod
	def report_invalid_config(label: str, config: "SweepConfig") -> None:
		print(f"[invalid] {label}")
		for problem in SimulationValidator.config_problems(config):
			print(f"  {problem}")

	@staticmethod
	def report_invalid_state(label: str, system: "TwoBodySystem") -> None:
		print(f"[invalid] {label}")
		if system is None:
			print("  system is None")
			return
		for name, body in (("primary", system.primary), ("satellite", system.satellite)):
			print(f"  {name}: mass={body.mass} position={body.position.tolist()} "
				  f"velocity={body.velocity.tolist()}")
