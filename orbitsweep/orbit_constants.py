from __future__ import annotations

import os
from typing import Final

"""
This module defines the physical constants and experiment defaults for the orbital period sweep. It includes the gravitational constant, the masses and radii of the reference primary (Earth) and satellite (Hubble-sized), the default leapfrog time step, the orbit target count and the tangential velocity range swept by default. The output path can be overridden through the ORBITSWEEP_OUTPUT environment variable. All values are SI units and are only used as defaults for SweepConfig; nothing in the integration core reads them directly except the gravitational constant.


"""


DIMENSIONALITY: Final[int] = 3
GRAVITATIONAL_CONST: Final[float] = 6.674_3e-11

EARTH_MASS: float = 5.972e24
HUBBLE_MASS: float = 11_110_000.0
RADIUS_EARTH: float = 6_378_000.0
ORBITAL_RADIUS: float = 100_000.0 + RADIUS_EARTH

TIME_STEP: float = 0.01
ORBITS_TO_COMPLETE: int = 5
NUM_VELOCITIES: int = 400

# sqrt(G M / r) and sqrt(2 G M / r) at ORBITAL_RADIUS
V_CIRC_ORBIT: float = 7844.08497109
V_ESCAPE: float = 11093.2113505

MAX_TAN_VELOCITY: float = V_CIRC_ORBIT * (5.0 / 4.0)
MIN_TAN_VELOCITY: float = -MAX_TAN_VELOCITY

MAX_STEPS_DEFAULT: int = 10_000_000


def _parse_output_path(default: str = "orbital_periods_output.csv") -> str:
	env_val = os.getenv("ORBITSWEEP_OUTPUT", "")
	if env_val.strip() != "":
		return env_val.strip()
	return default


DEFAULT_OUTPUT_PATH: str = _parse_output_path()


__all__ = [
	"DIMENSIONALITY",
	"GRAVITATIONAL_CONST",
	"EARTH_MASS",
	"HUBBLE_MASS",
	"RADIUS_EARTH",
	"ORBITAL_RADIUS",
	"TIME_STEP",
	"ORBITS_TO_COMPLETE",
	"NUM_VELOCITIES",
	"V_CIRC_ORBIT",
	"V_ESCAPE",
	"MAX_TAN_VELOCITY",
	"MIN_TAN_VELOCITY",
	"MAX_STEPS_DEFAULT",
	"DEFAULT_OUTPUT_PATH",
]
