import math
import numpy as np

from .orbit_constants import GRAVITATIONAL_CONST

"""
This module provides analytic two-body reference values used to set up and check a sweep: circular_velocity and escape_velocity at a given separation, circular_period from Kepler's third law for the reduced two-body problem, and periods_from_completion_times which turns the cumulative completion times recorded by the orbit detector into per-orbit periods. The primary_only flag reproduces the test-particle values sqrt(G M / r) that ignore the satellite mass. Non-positive radii or total masses return NaN.


"""

def _mu(primary_mass: float, satellite_mass: float, G: float, primary_only: bool) -> float:
	if primary_only:
		return float(G) * float(primary_mass)
	return float(G) * (float(primary_mass) + float(satellite_mass))


def circular_velocity(
	primary_mass: float,
	satellite_mass: float,
	radius: float,
	G: float = GRAVITATIONAL_CONST,
	primary_only: bool = False,
) -> float:
	mu = _mu(primary_mass, satellite_mass, G, primary_only)
	if radius <= 0.0 or mu <= 0.0:
		return float("nan")
	return math.sqrt(mu / float(radius))


def escape_velocity(
	primary_mass: float,
	satellite_mass: float,
	radius: float,
	G: float = GRAVITATIONAL_CONST,
	primary_only: bool = False,
) -> float:
	mu = _mu(primary_mass, satellite_mass, G, primary_only)
	if radius <= 0.0 or mu <= 0.0:
		return float("nan")
	return math.sqrt(2.0 * mu / float(radius))


def circular_period(
	primary_mass: float,
	satellite_mass: float,
	radius: float,
	G: float = GRAVITATIONAL_CONST,
) -> float:
	mu = _mu(primary_mass, satellite_mass, G, False)
	if radius <= 0.0 or mu <= 0.0:
		return float("nan")
	return 2.0 * math.pi * math.sqrt(float(radius) ** 3 / mu)


def periods_from_completion_times(times) -> np.ndarray:
	t = np.asarray(times, dtype=float).ravel()
	if t.size == 0:
		return t.copy()
	return np.diff(t, prepend=0.0)
