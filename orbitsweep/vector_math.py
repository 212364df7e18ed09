"""
This module provides the fixed-arity vector primitives used by the two-body integrator.

All functions operate on length-3 float64 numpy arrays. Functions that produce a
vector accept an optional ``out`` array so the force model and the leapfrog scheme can
reuse a single scratch vector per system instead of allocating temporaries every step.
In-place variants (add_vec_into, scale_vec, transfer_to_unit) mutate their first
argument. Normalizing by a zero divisor produces inf/NaN components without raising or
emitting floating-point warnings; callers treat that as a degenerate input.
"""

from __future__ import annotations
import math
import numpy as np

from .orbit_constants import DIMENSIONALITY



def zero_vec() -> np.ndarray:
    return np.zeros(DIMENSIONALITY, dtype=np.float64)


def as_vec(values) -> np.ndarray:
    # wrong-length input is passed through unchanged; SimulationValidator rejects it
    return np.array(values, dtype=np.float64).reshape(-1)


def subtract_vecs(vec1: np.ndarray, vec2: np.ndarray, out: np.ndarray | None = None) -> np.ndarray:
    if out is None:
        return vec1 - vec2
    np.subtract(vec1, vec2, out=out)
    return out


def add_vec_into(vec: np.ndarray, acc: np.ndarray) -> np.ndarray:
    acc += vec
    return acc


def multiply_vec(vec: np.ndarray, mult: float, out: np.ndarray | None = None) -> np.ndarray:
    if out is None:
        return vec * float(mult)
    np.multiply(vec, float(mult), out=out)
    return out


def scale_vec(vec: np.ndarray, mult: float) -> np.ndarray:
    vec *= float(mult)
    return vec


def dot(vec1: np.ndarray, vec2: np.ndarray) -> float:
    return float(vec1[0] * vec2[0] + vec1[1] * vec2[1] + vec1[2] * vec2[2])


def norm(vec: np.ndarray) -> float:
    return math.sqrt(dot(vec, vec))


def cross(vec1: np.ndarray, vec2: np.ndarray, out: np.ndarray | None = None) -> np.ndarray:
    if out is None:
        out = zero_vec()
    x = vec1[1] * vec2[2] - vec1[2] * vec2[1]
    y = vec1[2] * vec2[0] - vec1[0] * vec2[2]
    z = vec1[0] * vec2[1] - vec1[1] * vec2[0]
    out[0] = x
    out[1] = y
    out[2] = z
    return out


def transfer_to_unit(vec: np.ndarray, divisor: float) -> np.ndarray:
    with np.errstate(divide="ignore", invalid="ignore"):
        np.divide(vec, np.float64(divisor), out=vec)
    return vec


__all__ = [
    "zero_vec",
    "as_vec",
    "subtract_vecs",
    "add_vec_into",
    "multiply_vec",
    "scale_vec",
    "dot",
    "norm",
    "cross",
    "transfer_to_unit",
]
