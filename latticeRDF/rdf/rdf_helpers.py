"""
Vectorised helper functions for lattice RDF calculations.

This module provides the per-snapshot density-map kernel used by the RDF
accumulator. Two backends are available:

- 'numba' (default): Uses Numba JIT compilation to enumerate each particle's
  toroidal neighbours directly.

- 'numpy': Counts particle pairs per offset with ``np.roll`` and folds the
  counts into annuli. Fallback if Numba unavailable.

Backend selection is controlled by the LATTICERDF_BACKEND environment variable.
See `latticeRDF.backends` for configuration details.

Both kernels share one signature::

    density_sum, n_particles = kernel(mask, dx, dy, sq_disp, areas, mean_density)

where ``density_sum[k]`` is, summed over all particles, the particle's observed
density in annulus ``k`` minus ``mean_density``.
"""

from __future__ import annotations

from typing import Callable

import numpy as np

from latticeRDF.backends import get_backend, AVAILABLE_BACKENDS
from latticeRDF.lattice import CellType, wrap


# ---------------------------------------------------------------------------
# Backend selection
# ---------------------------------------------------------------------------


def _get_numba_function() -> Callable:
    """Import and return the Numba backend kernel."""
    try:
        from latticeRDF.rdf.rdf_helpers_numba import compute_density_map_numba
        return compute_density_map_numba
    except ImportError as e:
        raise ImportError(
            "Numba backend requested but numba is not installed. "
            "Install with: pip install numba"
        ) from e


def get_backend_functions(backend: str | None = None) -> Callable:
    """
    Get the density-map kernel for the specified backend.

    Parameters
    ----------
    backend : str or None
        Backend to use: 'numpy' or 'numba'. If None, uses the
        LATTICERDF_BACKEND environment variable, defaulting to 'numba'.

    Returns
    -------
    callable
        The density-map kernel for the selected backend.

    Raises
    ------
    ValueError
        If an unknown backend is specified.
    ImportError
        If numba backend is requested but numba is not installed.
    """
    if backend is None:
        backend = get_backend()

    if backend not in AVAILABLE_BACKENDS:
        raise ValueError(
            f"Unknown RDF backend: {backend!r}. "
            f"Available backends: {sorted(AVAILABLE_BACKENDS)}"
        )

    if backend == 'numba':
        return _get_numba_function()

    return compute_density_map


# ---------------------------------------------------------------------------
# Snapshot access
# ---------------------------------------------------------------------------


def particle_mask(snapshot, width: int, particle_type: CellType = CellType.CHEATER) -> np.ndarray:
    """
    Build a boolean ``(W, W)`` particle mask from a lattice snapshot.

    Snapshots providing ``particle_mask`` are used directly; anything else
    only needs ``get_type_at(x, y)``, which is queried once per site.

    Parameters
    ----------
    snapshot : Lattice or object with ``get_type_at``
        Lattice state to read.
    width : int
        Expected side length ``W``.
    particle_type : CellType
        Cell type counted as a particle (default: CHEATER).

    Raises
    ------
    ValueError
        If the snapshot reports a width different from ``width``.
    """
    snapshot_width = getattr(snapshot, 'width', None)
    if snapshot_width is not None and snapshot_width != width:
        raise ValueError(
            f"Snapshot width {snapshot_width} does not match accumulator width {width}."
        )

    if hasattr(snapshot, 'particle_mask'):
        return np.ascontiguousarray(snapshot.particle_mask(particle_type), dtype=np.bool_)

    mask = np.zeros((width, width), dtype=np.bool_)
    for x in range(width):
        for y in range(width):
            mask[x, y] = snapshot.get_type_at(x, y) == particle_type
    return mask


def particle_contribution(
    snapshot,
    x: int,
    y: int,
    table,
    mean_density: float,
    particle_type: CellType = CellType.CHEATER,
) -> dict[int, float]:
    """
    Density deviation around a single particle, keyed by squared displacement.

    The particle counts itself at ``r**2 = 0``; every other offset of the
    table's box contributes one unit of mass to its annulus when the wrapped
    site holds a particle. Each annulus mass is divided by the annulus area
    and ``mean_density`` is subtracted.

    This is the reference form of the per-particle step; the backend kernels
    compute the same quantity summed over all particles of a snapshot.

    Parameters
    ----------
    snapshot : object with ``get_type_at`` and ``width``
        Lattice state to read.
    x, y : int
        Particle site.
    table : AnnulusAreaTable
        Annulus areas for the lattice.
    mean_density : float
        Ideal-gas reference density.
    particle_type : CellType
        Cell type counted as a particle (default: CHEATER).

    Returns
    -------
    dict
        Squared displacement -> density deviation.
    """
    width = snapshot.width
    mass = {0: 1.0}
    for dx, dy, k in zip(table.dx, table.dy, table.sq_disp):
        nx = wrap(x + int(dx), width)
        ny = wrap(y + int(dy), width)
        hit = 1.0 if snapshot.get_type_at(nx, ny) == particle_type else 0.0
        mass[int(k)] = mass.get(int(k), 0.0) + hit

    return {k: m / table[k] - mean_density for k, m in mass.items()}


# ---------------------------------------------------------------------------
# NumPy backend implementation
# ---------------------------------------------------------------------------


def compute_density_map(
    mask: np.ndarray,
    dx: np.ndarray,
    dy: np.ndarray,
    sq_disp: np.ndarray,
    areas: np.ndarray,
    mean_density: float,
) -> tuple[np.ndarray, int]:
    """
    Summed density deviation per annulus for one snapshot (NumPy).

    For every offset, ``mask * roll(mask, -offset)`` marks the particles whose
    neighbour at that offset is also a particle, so the annulus mass summed
    over all particles is a sum of pair counts. The self-point contributes one
    unit per particle.

    Parameters
    ----------
    mask : np.ndarray, shape (W, W), bool
        Particle sites, indexed ``[x, y]``.
    dx, dy : np.ndarray
        Offsets to enumerate (excluding ``(0, 0)``).
    sq_disp : np.ndarray
        Squared displacement of each offset.
    areas : np.ndarray
        Dense annulus areas indexed by squared displacement (0 = unattainable).
    mean_density : float
        Ideal-gas reference density.

    Returns
    -------
    density_sum : np.ndarray
        Dense per-annulus sum of deviations over all particles (0 where
        the annulus is unattainable).
    n_particles : int
        Number of particles in the mask.
    """
    occupied = mask.astype(np.int64)
    n_particles = int(occupied.sum())

    density_sum = np.zeros(len(areas), dtype=np.float64)
    if n_particles == 0:
        return density_sum, 0

    mass = np.zeros(len(areas), dtype=np.float64)
    mass[0] = n_particles
    for ox, oy, k in zip(dx, dy, sq_disp):
        # neighbour of (x, y) at offset (ox, oy) lands on [x, y] after the roll
        shifted = np.roll(occupied, shift=(-int(ox), -int(oy)), axis=(0, 1))
        mass[k] += np.sum(occupied * shifted)

    attainable = areas > 0
    density_sum[attainable] = mass[attainable] / areas[attainable] - n_particles * mean_density
    return density_sum, n_particles
