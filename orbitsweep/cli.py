from __future__ import annotations

import argparse
import textwrap
from typing import List, Optional

from .orbit_constants import DEFAULT_OUTPUT_PATH
from .sim_config import SweepConfig
from .sweep_driver import SweepDriver

"""
This module implements the command line entry point. main parses the sweep options with argparse, builds a SweepConfig from the defaults plus any overrides, runs the SweepDriver and writes the result table. It returns 0 on success and 1 when the configuration is rejected; errors writing the output file propagate and abort the run.

"""


def build_parser() -> argparse.ArgumentParser:
	defaults = SweepConfig()
	parser = argparse.ArgumentParser(
		prog="orbitsweep",
		description="Measure two-body orbital periods over a sweep of tangential launch velocities.",
		formatter_class=argparse.RawDescriptionHelpFormatter,
		epilog=textwrap.dedent("""\
			Writes one CSV row per launch velocity: tangential_velocity followed by
			the elapsed time at each completed orbit (NaN once a sample degenerates).
		"""),
	)
	parser.add_argument("--output", type=str, default=DEFAULT_OUTPUT_PATH,
						help=f"Output CSV path (default: {DEFAULT_OUTPUT_PATH})")
	parser.add_argument("--dt", type=float, default=defaults.dt, help="Leapfrog time step in seconds")
	parser.add_argument("--orbits", type=int, default=defaults.orbits_to_complete,
						help="Orbits each sample must complete")
	parser.add_argument("--num-velocities", type=int, default=defaults.num_velocities,
						help="Number of velocity intervals in the sweep")
	parser.add_argument("--min-velocity", type=float, default=defaults.min_tangential_velocity,
						help="Lowest tangential velocity (m/s)")
	parser.add_argument("--max-velocity", type=float, default=defaults.max_tangential_velocity,
						help="Highest tangential velocity (m/s)")
	parser.add_argument("--keep-midpoint", action="store_true", help="Do not skip the midpoint sample")
	parser.add_argument("--max-steps", type=int, default=defaults.max_steps,
						help="Per-sample step ceiling; 0 disables the guard")
	parser.add_argument("--collision-radius", type=float, default=defaults.collision_radius,
						help="Separation (m) treated as a collision; 0 disables. Without it a radial launch "
							 "ends as did_not_converge at the step ceiling rather than degenerate")
	parser.add_argument("--angle-measure", choices=["unsigned", "signed"], default=defaults.angle_measure,
						help="Swept angle measure used by the orbit detector")
	parser.add_argument("--workers", type=int, default=defaults.n_workers, help="Worker processes")
	parser.add_argument("--quiet", action="store_true", help="Suppress per-sample progress output")
	return parser


def config_from_args(args: argparse.Namespace) -> SweepConfig:
	max_steps = args.max_steps
	if max_steps is not None and int(max_steps) == 0:
		max_steps = None
	return SweepConfig(
		dt=args.dt,
		orbits_to_complete=args.orbits,
		num_velocities=args.num_velocities,
		min_tangential_velocity=args.min_velocity,
		max_tangential_velocity=args.max_velocity,
		skip_midpoint=not args.keep_midpoint,
		max_steps=max_steps,
		collision_radius=args.collision_radius,
		angle_measure=args.angle_measure,
		n_workers=args.workers,
		verbose=not args.quiet,
	)


def main(argv: Optional[List[str]] = None) -> int:
	args = build_parser().parse_args(argv)
	config = config_from_args(args)

	driver = SweepDriver(config)
	driver.run()
	if not driver.samples:
		print("[error] Sweep produced no samples")
		return 1

	driver.save_results(args.output)
	return 0
