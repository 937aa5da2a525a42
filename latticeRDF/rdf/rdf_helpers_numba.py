"""
Numba-accelerated helper functions for lattice RDF calculations.

This module provides a JIT-compiled implementation of the per-snapshot
density-map kernel, enumerating every particle's toroidal neighbourhood
explicitly.
"""

from __future__ import annotations

import numpy as np
from numba import jit  # type: ignore[import-untyped]


@jit(nopython=True, cache=True)
def _compute_density_map_numba(
    mask: np.ndarray,
    dx: np.ndarray,
    dy: np.ndarray,
    sq_disp: np.ndarray,
    areas: np.ndarray,
    mean_density: float,
) -> tuple[np.ndarray, int]:
    width = mask.shape[0]
    n_keys = areas.shape[0]
    n_offsets = dx.shape[0]

    density_sum = np.zeros(n_keys)
    mass = np.zeros(n_keys)
    n_particles = 0

    for x in range(width):
        for y in range(width):
            if not mask[x, y]:
                continue
            n_particles += 1

            mass[:] = 0.0
            mass[0] = 1.0
            for i in range(n_offsets):
                nx = ((x + dx[i]) % width + width) % width
                ny = ((y + dy[i]) % width + width) % width
                if mask[nx, ny]:
                    mass[sq_disp[i]] += 1.0

            for k in range(n_keys):
                if areas[k] > 0.0:
                    density_sum[k] += mass[k] / areas[k] - mean_density

    return density_sum, n_particles


def compute_density_map_numba(
    mask: np.ndarray,
    dx: np.ndarray,
    dy: np.ndarray,
    sq_disp: np.ndarray,
    areas: np.ndarray,
    mean_density: float,
) -> tuple[np.ndarray, int]:
    """
    Summed density deviation per annulus for one snapshot (Numba).

    Same interface and semantics as
    :func:`latticeRDF.rdf.rdf_helpers.compute_density_map`.
    """
    density_sum, n_particles = _compute_density_map_numba(
        np.ascontiguousarray(mask, dtype=np.bool_),
        np.ascontiguousarray(dx, dtype=np.int64),
        np.ascontiguousarray(dy, dtype=np.int64),
        np.ascontiguousarray(sq_disp, dtype=np.int64),
        np.ascontiguousarray(areas, dtype=np.float64),
        float(mean_density),
    )
    return density_sum, int(n_particles)
