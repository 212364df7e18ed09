from __future__ import annotations
import math
from dataclasses import dataclass, field
import numpy as np

from .vector_math import dot, cross

"""
This module turns a stepped trajectory into discrete orbit-completion events. The OrbitTracker dataclass holds the per-sample state (accumulated swept angle, elapsed time, completed orbit count, the completion-time slots and the sample status). The OrbitPeriodDetector consumes the satellite displacement before and after every integration step, adds the swept angle and the time step, records the elapsed time whenever the accumulated angle passes a full turn and carries the remainder forward, and marks the sample degenerate as soon as the accumulated angle becomes NaN, filling every unfilled slot with NaN. The baseline angle measure is the unsigned arccos of the normalized dot product, which measures the size of each angle step but cannot see direction reversal; an optional signed measure uses atan2 about a fixed orbital-plane normal. It assumes consecutive displacements are close enough that the direction change per step is well below pi.

"""

TWO_PI = 2.0 * math.pi

STATUS_RUNNING = "running"
STATUS_COMPLETED = "completed"
STATUS_DEGENERATE = "degenerate"
STATUS_DID_NOT_CONVERGE = "did_not_converge"


def swept_angle(old_disp: np.ndarray, new_disp: np.ndarray) -> float:
	denom = math.sqrt(dot(old_disp, old_disp)) * math.sqrt(dot(new_disp, new_disp))
	with np.errstate(divide="ignore", invalid="ignore"):
		cos_theta = np.float64(dot(old_disp, new_disp)) / np.float64(denom)
		# no clipping: |cos| > 1 from rounding or 0/0 must surface as NaN
		return float(np.arccos(cos_theta))


def signed_swept_angle(old_disp: np.ndarray, new_disp: np.ndarray, normal: np.ndarray) -> float:
	# atan2(0, 0) is 0, so a zero-length displacement has to be caught here
	sq = dot(old_disp, old_disp) * dot(new_disp, new_disp)
	if not (math.isfinite(sq) and sq > 0.0):
		return float("nan")
	c = cross(old_disp, new_disp)
	return float(np.arctan2(dot(normal, c), dot(old_disp, new_disp)))


@dataclass
class OrbitTracker:
	target_orbits: int
	accumulated_angle: float = 0.0
	elapsed_time: float = 0.0
	orbits_completed: int = 0
	status: str = STATUS_RUNNING
	completion_times: np.ndarray = field(init=False, repr=False)

	def __post_init__(self) -> None:
		self.target_orbits = max(0, int(self.target_orbits))
		self.completion_times = np.full(self.target_orbits, np.nan, dtype=np.float64)
		if self.target_orbits == 0:
			self.status = STATUS_COMPLETED

	@property
	def finished(self) -> bool:
		return self.status != STATUS_RUNNING

	@property
	def degenerate(self) -> bool:
		return self.status == STATUS_DEGENERATE

	def fill_remaining_nan(self) -> None:
		self.completion_times[self.orbits_completed:] = np.nan


class OrbitPeriodDetector:
	def __init__(
		self,
		target_orbits: int,
		dt: float,
		*,
		angle_measure: str = "unsigned",
		normal: np.ndarray | None = None,
		verbose: bool = True,
	) -> None:
		self.dt = float(dt)
		self.tracker = OrbitTracker(target_orbits)
		self.angle_measure = angle_measure
		self.normal = None
		if angle_measure == "signed":
			self.normal = self._unit_normal(normal, verbose)

	@staticmethod
	def _unit_normal(normal, verbose: bool = True) -> np.ndarray:
		n = np.zeros(3, dtype=np.float64)
		if normal is not None:
			n[:] = np.asarray(normal, dtype=np.float64).reshape(3)
		length = math.sqrt(dot(n, n))
		if not (math.isfinite(length) and length > 0.0):
			if verbose:
				print("[warning] Signed angle measure needs a non-zero orbital normal; using +z")
			n[:] = (0.0, 0.0, 1.0)
			return n
		return n / length

	@property
	def finished(self) -> bool:
		return self.tracker.finished

	def angle_step(self, old_disp: np.ndarray, new_disp: np.ndarray) -> float:
		if self.normal is not None:
			return signed_swept_angle(old_disp, new_disp, self.normal)
		return swept_angle(old_disp, new_disp)

	def observe(self, old_disp: np.ndarray, new_disp: np.ndarray) -> bool:
		t = self.tracker
		if t.finished:
			return False

		t.accumulated_angle += self.angle_step(old_disp, new_disp)
		t.elapsed_time += self.dt

		if math.isnan(t.accumulated_angle):
			self.mark_degenerate()
			return False

		if t.accumulated_angle >= TWO_PI:
			t.completion_times[t.orbits_completed] = t.elapsed_time
			t.orbits_completed += 1
			t.accumulated_angle -= TWO_PI
			if t.orbits_completed >= t.target_orbits:
				t.status = STATUS_COMPLETED
			return True
		return False

	def mark_degenerate(self) -> None:
		t = self.tracker
		t.fill_remaining_nan()
		t.status = STATUS_DEGENERATE

	def mark_unconverged(self) -> None:
		t = self.tracker
		t.fill_remaining_nan()
		t.status = STATUS_DID_NOT_CONVERGE
