"""
This module implements the Newtonian gravity model for a pair of point masses.

The compute_mutual_acceleration function returns the equal-and-opposite accelerations
of two bodies from their positions and masses, reusing an optional transfer vector for
the displacement/unit-vector temporaries. set_accelerations writes those accelerations
straight into a TwoBodySystem's cached acceleration arrays, which is what the leapfrog
scheme calls after every drift. potential_energy gives the pair potential used by the
diagnostics. No softening is applied: coincident positions divide by zero and the
resulting inf/NaN values are propagated silently for the orbit detector to report.
"""

from __future__ import annotations
import math
from typing import Tuple, TYPE_CHECKING
import numpy as np

from .orbit_constants import GRAVITATIONAL_CONST
from .vector_math import (
    zero_vec,
    subtract_vecs,
    dot,
    transfer_to_unit,
    multiply_vec,
    scale_vec,
)

if TYPE_CHECKING:
    from .body import TwoBodySystem




def compute_mutual_acceleration(
    pos_a: np.ndarray,
    pos_b: np.ndarray,
    mass_a: float,
    mass_b: float,
    G: float = GRAVITATIONAL_CONST,
    transfer: np.ndarray | None = None,
    accel_a: np.ndarray | None = None,
    accel_b: np.ndarray | None = None,
) -> Tuple[np.ndarray, np.ndarray]:
    if transfer is None:
        transfer = zero_vec()
    if accel_a is None:
        accel_a = zero_vec()
    if accel_b is None:
        accel_b = zero_vec()

    # transfer holds d = a - b, then the unit vector from b to a
    subtract_vecs(pos_a, pos_b, out=transfer)
    r2 = np.float64(dot(transfer, transfer))
    transfer_to_unit(transfer, np.sqrt(r2))

    with np.errstate(divide="ignore", invalid="ignore"):
        coeff_a = -np.float64(G) * np.float64(mass_b) / r2
        coeff_b = -np.float64(G) * np.float64(mass_a) / r2
        multiply_vec(transfer, coeff_a, out=accel_a)
        scale_vec(transfer, -1.0)
        multiply_vec(transfer, coeff_b, out=accel_b)

    return accel_a, accel_b


def set_accelerations(system: "TwoBodySystem", G: float = GRAVITATIONAL_CONST) -> None:
    primary = system.primary
    satellite = system.satellite
    compute_mutual_acceleration(
        primary.position,
        satellite.position,
        primary.mass,
        satellite.mass,
        G=G,
        transfer=system.transfer,
        accel_a=primary.acceleration,
        accel_b=satellite.acceleration,
    )


def potential_energy(
    pos_a: np.ndarray,
    pos_b: np.ndarray,
    mass_a: float,
    mass_b: float,
    G: float = GRAVITATIONAL_CONST,
) -> float:
    d = subtract_vecs(pos_a, pos_b)
    r = math.sqrt(dot(d, d))
    if r == 0.0:
        return float("-inf")
    return -float(G) * float(mass_a) * float(mass_b) / r
