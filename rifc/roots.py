"""
Root Selection
Enumerates the n-th roots of a complex coordinate and recovers which branch
produced a given root. The Encoder applies complex_root once per symbol and
the Decoder uses find_branch to undo it.
"""

import math
import numpy as np

from .constants import TWO_PI
from .errors import NumericOverflowError


def complex_root(w, branch, base):
    """
    Select one base-th root of a complex value.

    Args:
        w: Complex value to take the root of
        branch: Branch index in [0, base)
        base: Number of root branches

    Returns:
        complex: Root with radius |w|^(1/base) and angle
                 arg(w)/base + branch * 2*pi/base
    """
    angle_base = np.angle(w) / base
    angle_step = TWO_PI / base

    angle = angle_base + angle_step * branch
    radius = np.abs(w) ** (1.0 / base)

    return complex(np.cos(angle) * radius, np.sin(angle) * radius)


def branch_roots(w, base):
    """
    Compute every base-th root of w in branch order.

    Args:
        w: Complex value
        base: Number of root branches

    Returns:
        np.array: Complex array of length base, element i is branch i
    """
    angles = np.angle(w) / base + (TWO_PI / base) * np.arange(base)
    radius = np.abs(w) ** (1.0 / base)

    return radius * (np.cos(angles) + 1j * np.sin(angles))


def compare_complex(a, b, epsilon):
    """
    Check two coordinates for equality within an absolute tolerance.

    Real and imaginary parts are compared independently.
    """
    return abs(b.real - a.real) < epsilon and abs(b.imag - a.imag) < epsilon


def find_branch(candidate, target, base, epsilon):
    """
    Find the branch index whose root of candidate reproduces target.

    Args:
        candidate: Preimage coordinate (target ** base in exact arithmetic)
        target: Root to match
        base: Number of root branches
        epsilon: Componentwise absolute tolerance

    Returns:
        int: Lowest matching branch index, or None if no branch matches
    """
    roots = branch_roots(candidate, base)

    matches = (
        (np.abs(roots.real - target.real) < epsilon) &
        (np.abs(roots.imag - target.imag) < epsilon)
    )
    hits = np.flatnonzero(matches)

    if hits.size == 0:
        return None

    return int(hits[0])


def ensure_finite(z, context=""):
    """
    Reject coordinates with infinite or NaN components.

    Raises:
        NumericOverflowError: If either component is not finite
    """
    if not (math.isfinite(z.real) and math.isfinite(z.imag)):
        where = f" during {context}" if context else ""
        raise NumericOverflowError(f"Coordinate became non-finite{where}: {z!r}")

    return z
