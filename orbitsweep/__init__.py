"""
This initialization file serves as the main entry point for the orbital period sweep
package, exposing its public API through a single namespace.

It imports and re-exports the configuration (SweepConfig) and physical constants, the
3-vector primitives, the two-body containers (Body, TwoBodySystem), the gravity model,
the leapfrog integrator, the orbit-completion detector and its tracker, conservation
diagnostics, analytic reference values, validation utilities, the sweep driver with its
SweepSample rows, the CSV result writer and the command line entry point. Users can
import any of these directly from the package root.
"""

from .orbit_constants import (
	GRAVITATIONAL_CONST,
	EARTH_MASS,
	HUBBLE_MASS,
	RADIUS_EARTH,
	ORBITAL_RADIUS,
	V_CIRC_ORBIT,
	V_ESCAPE,
)
from .sim_config import SweepConfig
from .simulation_validator import SimulationValidator

from . import vector_math
from .body import Body, TwoBodySystem
from .forces import compute_mutual_acceleration, set_accelerations, potential_energy
from .integration_scheme_base import IntegrationScheme
from .verlet_scheme import LeapfrogIntegrator
from .orbit_detector import (
	OrbitTracker,
	OrbitPeriodDetector,
	swept_angle,
	signed_swept_angle,
	STATUS_RUNNING,
	STATUS_COMPLETED,
	STATUS_DEGENERATE,
	STATUS_DID_NOT_CONVERGE,
)
from .diagnostics import Diagnostics
from .physics_utils import (
	circular_velocity,
	escape_velocity,
	circular_period,
	periods_from_completion_times,
)

from .sweep_driver import (
	SweepSample,
	SweepDriver,
	velocity_indices,
	tangential_velocity,
	run_sample,
)
from .result_writer import ResultWriter, column_names, samples_to_frame, read_results
from .cli import main


__all__ = [
	"GRAVITATIONAL_CONST",
	"EARTH_MASS",
	"HUBBLE_MASS",
	"RADIUS_EARTH",
	"ORBITAL_RADIUS",
	"V_CIRC_ORBIT",
	"V_ESCAPE",
	"SweepConfig",
	"SimulationValidator",
	"vector_math",
	"Body",
	"TwoBodySystem",
	"compute_mutual_acceleration",
	"set_accelerations",
	"potential_energy",
	"IntegrationScheme",
	"LeapfrogIntegrator",
	"OrbitTracker",
	"OrbitPeriodDetector",
	"swept_angle",
	"signed_swept_angle",
	"STATUS_RUNNING",
	"STATUS_COMPLETED",
	"STATUS_DEGENERATE",
	"STATUS_DID_NOT_CONVERGE",
	"Diagnostics",
	"circular_velocity",
	"escape_velocity",
	"circular_period",
	"periods_from_completion_times",
	"SweepSample",
	"SweepDriver",
	"velocity_indices",
	"tangential_velocity",
	"run_sample",
	"ResultWriter",
	"column_names",
	"samples_to_frame",
	"read_results",
	"main",
]
