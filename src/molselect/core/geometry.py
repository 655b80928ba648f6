"""
Geometric utility functions for proximity queries.
"""

import numpy as np
from scipy.spatial.distance import cdist

from molselect.core.constants import DISTANCE_CHUNK_SIZE


def within_distance(
    points: np.ndarray,
    reference: np.ndarray,
    radius: float,
    chunk_size: int = DISTANCE_CHUNK_SIZE,
) -> np.ndarray:
    """
    Flag points lying within a radius of any reference point.

    The test is inclusive: a point at exactly ``radius`` counts as within.
    Distances are computed all-pairs, one block of ``chunk_size`` rows at a
    time, so memory stays bounded by ``chunk_size * len(reference)``.

    Args:
        points: Candidate coordinates, shape (N, 3)
        reference: Reference coordinates, shape (M, 3)
        radius: Cutoff distance in Angstroms
        chunk_size: Number of candidate rows per block

    Returns:
        Boolean array of shape (N,)
    """
    mask = np.zeros(len(points), dtype=bool)
    if len(points) == 0 or len(reference) == 0:
        return mask

    for start in range(0, len(points), chunk_size):
        block = points[start:start + chunk_size]
        dists = cdist(block, reference)
        mask[start:start + len(block)] = (dists <= radius).any(axis=1)

    return mask
