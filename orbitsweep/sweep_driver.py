import time
import numpy as np
import pandas as pd
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from typing import Dict, List, Tuple

from .sim_config import SweepConfig
from .body import TwoBodySystem
from .verlet_scheme import LeapfrogIntegrator
from .orbit_detector import (
	OrbitPeriodDetector,
	STATUS_COMPLETED,
	STATUS_DEGENERATE,
	STATUS_DID_NOT_CONVERGE,
)
from .diagnostics import Diagnostics
from .simulation_validator import SimulationValidator
from .physics_utils import periods_from_completion_times
from .result_writer import ResultWriter, samples_to_frame, VELOCITY_COLUMN
from .vector_math import zero_vec, dot, cross, subtract_vecs

"""
This module drives the velocity sweep. velocity_indices and tangential_velocity map the configured range onto sample indices (ascending, with the midpoint index skipped when the skip policy is on), run_sample integrates one fresh two-body system with the leapfrog scheme while the orbit detector records completion times until the target orbit count is reached, the trajectory degenerates, the satellite falls inside the collision radius, or the step ceiling is hit, and SweepDriver runs every sample serially or in a process pool, prints progress and warnings, and collects the SweepSample rows into a pandas DataFrame for the result writer. Degenerate and non-converged samples are valid outcomes encoded as NaN slots, never exceptions. It assumes the configuration has been validated and that samples share no mutable state.


"""


@dataclass(frozen=True)
class SweepSample:
	tangential_velocity: float
	completion_times: Tuple[float, ...]
	status: str = STATUS_COMPLETED
	steps: int = 0
	energy_drift: float = float("nan")

	@property
	def orbits_completed(self) -> int:
		return int(np.count_nonzero(np.isfinite(np.asarray(self.completion_times, dtype=float))))

	def periods(self) -> np.ndarray:
		return periods_from_completion_times(self.completion_times)

	def as_row(self) -> Dict[str, float]:
		row = {VELOCITY_COLUMN: float(self.tangential_velocity)}
		for k, t in enumerate(self.completion_times, start=1):
			row[f"time_{k}"] = float(t)
		return row


def velocity_indices(config: SweepConfig) -> List[int]:
	n = int(config.num_velocities)
	skip = config.midpoint_index if config.skip_midpoint else None
	return [i for i in range(n + 1) if i != skip]


def tangential_velocity(config: SweepConfig, index: int) -> float:
	return float(config.min_tangential_velocity) + config.velocity_step * float(index)


def _orbit_normal(system: TwoBodySystem) -> np.ndarray:
	r = system.displacement()
	v = subtract_vecs(system.satellite.velocity, system.primary.velocity)
	return cross(r, v)


def run_sample(config: SweepConfig, v_tan: float) -> SweepSample:
	"""
	Integrate one launch velocity until the target orbit count, degeneracy or the step ceiling.

	A radial or near-radial launch (v_tan close to 0) is only reported as degenerate when
	config.collision_radius is non-zero. With the default of 0 the point-mass infall usually
	steps past the singularity, so the sample ends as did_not_converge at max_steps (or, with
	the unsigned measure, a radial bounce can even be counted as orbits). Either way the
	unfilled completion slots are NaN.
	"""
	n_orbits = int(config.orbits_to_complete)
	system = TwoBodySystem.from_config(config, v_tan)

	if not SimulationValidator.state_is_valid(system):
		SimulationValidator.report_invalid_state(f"initial state for v_tan = {v_tan}", system)
		return SweepSample(float(v_tan), tuple([float("nan")] * n_orbits), STATUS_DEGENERATE, 0)

	integ = LeapfrogIntegrator(system, config.dt)
	normal = None
	if config.angle_measure == "signed":
		normal = _orbit_normal(system)
	detector = OrbitPeriodDetector(
		n_orbits,
		config.dt,
		angle_measure=config.angle_measure,
		normal=normal,
		verbose=config.verbose,
	)

	diag = Diagnostics(system, integ.G)
	diag.capture_baseline()
	integ.prime()

	c_rad = float(config.collision_radius)
	collision_r2 = c_rad * c_rad
	max_steps = config.max_steps

	old_disp = system.displacement()
	new_disp = zero_vec()

	while not detector.finished:
		if max_steps is not None and integ.step_count >= max_steps:
			detector.mark_unconverged()
			break
		integ.step()
		system.displacement(out=new_disp)
		detector.observe(old_disp, new_disp)
		if c_rad > 0.0 and not detector.finished and dot(new_disp, new_disp) < collision_r2:
			detector.mark_degenerate()
		old_disp, new_disp = new_disp, old_disp

	tracker = detector.tracker
	if tracker.status == STATUS_DEGENERATE:
		if config.verbose:
			print(f"[warning] v_tan = {v_tan}: trajectory degenerated after {tracker.orbits_completed} orbits; "
				  f"remaining slots set to NaN")
		energy_drift = float("nan")
	elif tracker.status == STATUS_DID_NOT_CONVERGE:
		if config.verbose:
			print(f"[warning] v_tan = {v_tan}: did not complete {n_orbits} orbits within {max_steps} steps")
		energy_drift = float("nan")
	else:
		energy_drift = diag.drift_from_baseline()["energy_drift"]
		if config.verbose and energy_drift > config.energy_drift_warn_threshold:
			print(f"[warning] v_tan = {v_tan}: energy drift {energy_drift:.3e} exceeds "
				  f"{config.energy_drift_warn_threshold:.1e}")

	return SweepSample(
		tangential_velocity=float(v_tan),
		completion_times=tuple(float(t) for t in tracker.completion_times),
		status=tracker.status,
		steps=int(integ.step_count),
		energy_drift=float(energy_drift),
	)


class SweepDriver:
	def __init__(self, config: SweepConfig | None = None) -> None:
		self.config = config or SweepConfig()
		self.samples: List[SweepSample] = []

	def velocities(self) -> List[float]:
		return [tangential_velocity(self.config, i) for i in velocity_indices(self.config)]

	def run(self) -> pd.DataFrame:
		cfg = self.config
		self.samples = []
		if not SimulationValidator.config_is_valid(cfg):
			SimulationValidator.report_invalid_config("sweep configuration", cfg)
			print("[error] Invalid configuration, no samples run")
			return samples_to_frame([], cfg.orbits_to_complete)

		indices = velocity_indices(cfg)
		velocities = [tangential_velocity(cfg, i) for i in indices]

		if cfg.verbose:
			print("Starting calculations")
		start = time.perf_counter()

		if int(cfg.n_workers) > 1:
			with ProcessPoolExecutor(max_workers=int(cfg.n_workers)) as pool:
				for i, sample in zip(indices, pool.map(run_sample, [cfg] * len(velocities), velocities)):
					if cfg.verbose:
						print(f"index: {i}, v_tan = {sample.tangential_velocity}, status = {sample.status}")
					self.samples.append(sample)
		else:
			for i, v_tan in zip(indices, velocities):
				if cfg.verbose:
					print(f"index: {i}, v_tan = {v_tan}")
				self.samples.append(run_sample(cfg, v_tan))

		if cfg.verbose:
			elapsed = time.perf_counter() - start
			n_bad = sum(1 for s in self.samples if s.status != STATUS_COMPLETED)
			print(f"Completed: {len(self.samples)} samples ({n_bad} degenerate or unconverged) "
				  f"in {elapsed:.2f} s")
		return self.results_frame()

	def results_frame(self) -> pd.DataFrame:
		return samples_to_frame(self.samples, self.config.orbits_to_complete)

	def save_results(self, path: str) -> pd.DataFrame | None:
		if not self.samples:
			print("[error] No results to save. Run the sweep first.")
			return None
		return ResultWriter(path).write(self.samples, self.config.orbits_to_complete)


__all__ = [
	"SweepSample",
	"SweepDriver",
	"velocity_indices",
	"tangential_velocity",
	"run_sample",
]
