"""Stateful lattice RDF accumulator."""

from __future__ import annotations

import warnings
from pathlib import Path
from typing import Iterable, Mapping

import numpy as np
from tqdm import tqdm

from latticeRDF.errors import InsufficientDataError
from latticeRDF.lattice import CellType
from latticeRDF.parameters import validate_width
from latticeRDF.rdf.annulus import AnnulusAreaTable
from latticeRDF.rdf.report import print_report, write_report
from latticeRDF.rdf.rdf_helpers import get_backend_functions, particle_mask


class RdfAccumulator:
    """
    Radial distribution function over many independent lattice simulations.

    The RDF here is the mean deviation of the local particle density from the
    ideal-gas density ``n / N``, resolved by squared displacement ``r**2``
    from a particle and averaged over simulations:

    - Constructor sets up the annulus table for the lattice width
    - push() adds one completed simulation's final snapshot
    - accumulate() iterates snapshots and calls push (convenience wrapper)
    - finalize() divides the running totals by the number of simulations

    For parallel drivers, density_map() is a pure function of its snapshot;
    only fold() (or merge() of per-worker accumulators) mutates state.

    Parameters
    ----------
    width : int
        Lattice side length ``W``.
    particle_type : CellType
        Cell type being profiled (default: CHEATER).
    backend : str or None
        Density-map backend ('numpy' or 'numba'). If None, uses the
        LATTICERDF_BACKEND environment variable.

    Attributes
    ----------
    width : int
        Lattice side length ``W``.
    size : int
        Number of lattice sites ``N = W**2``.
    max_radius : int
        Half-width of the neighbourhood box, ``(W - 1) // 2``.
    table : AnnulusAreaTable
        Annulus areas for this lattice.
    simulations : int
        Number of simulations folded in so far.

    Raises
    ------
    ConfigurationError
        If ``width`` is not a positive integer.
    """

    def __init__(
        self,
        width: int,
        particle_type: CellType = CellType.CHEATER,
        backend: str | None = None,
    ):
        self.width = validate_width(width)
        self.size = self.width * self.width
        self.max_radius = (self.width - 1) // 2
        self.particle_type = CellType(particle_type)
        self.table = AnnulusAreaTable(self.max_radius)
        self._kernel = get_backend_functions(backend)

        # Dense totals over the table's squared displacements; a key is only
        # reported once some simulation has contributed to it.
        self._totals = np.zeros(len(self.table.areas), dtype=np.float64)
        self._seen = np.zeros(len(self.table.areas), dtype=np.bool_)
        self._simulations = 0

    @property
    def simulations(self) -> int:
        """Number of completed push()/fold() calls."""
        return self._simulations

    @property
    def totals(self) -> dict[int, float]:
        """Cumulative per-simulation contributions, keyed by squared displacement."""
        return {int(k): float(self._totals[k]) for k in np.flatnonzero(self._seen)}

    def density_map(self, snapshot, particle_count: int) -> dict[int, float]:
        """
        Per-particle mean density deviation for one snapshot.

        For every particle, the observed particle density in each annulus
        (annulus mass over annulus area) minus ``particle_count / N`` is summed
        over particles, then divided by ``particle_count``.

        Parameters
        ----------
        snapshot : Lattice or object with ``get_type_at``
            Final lattice state of one simulation. Must have width ``W``.
        particle_count : int
            Number of particles used for the reference density and the
            per-particle normalisation.

        Returns
        -------
        dict
            Squared displacement -> contribution. Empty when the snapshot
            holds no particles.

        Raises
        ------
        ValueError
            If the width does not match, ``particle_count`` is negative, or
            particles are present while ``particle_count`` is zero.
        """
        if particle_count < 0:
            raise ValueError(f"particle_count must be non-negative. Got: {particle_count}")

        mask = particle_mask(snapshot, self.width, self.particle_type)
        mean_density = particle_count / self.size
        density_sum, n_particles = self._kernel(
            mask,
            self.table.dx,
            self.table.dy,
            self.table.sq_disp,
            self.table.areas,
            mean_density,
        )

        if particle_count == 0 and n_particles > 0:
            raise ValueError(
                f"particle_count is 0 but the snapshot contains {n_particles} particles."
            )
        if n_particles != particle_count:
            warnings.warn(
                f"particle_count ({particle_count}) differs from the {n_particles} "
                f"particles found in the snapshot; using particle_count.",
                RuntimeWarning,
                stacklevel=3,
            )
        if n_particles == 0:
            return {}

        normalised = density_sum / particle_count
        return {int(k): float(normalised[k]) for k in self.table.keys_array}

    def fold(self, density_map: Mapping[int, float]) -> None:
        """
        Add one simulation's density map to the running totals.

        Parameters
        ----------
        density_map : mapping of int to float
            Output of :meth:`density_map` (possibly computed elsewhere).
            An empty map still counts as a simulation.

        Raises
        ------
        KeyError
            If a key is not a squared displacement of this lattice.
        """
        for key in density_map:
            if key not in self.table:
                raise KeyError(f"Squared displacement {key} is not reachable on a width-{self.width} lattice.")
        for key, value in density_map.items():
            self._totals[key] += value
            self._seen[key] = True
        self._simulations += 1

    def push(self, snapshot, particle_count: int) -> None:
        """
        Add a completed simulation's snapshot to the accumulator.

        Parameters
        ----------
        snapshot : Lattice or object with ``get_type_at``
            Final lattice state of one simulation.
        particle_count : int
            Number of particles in the snapshot. A snapshot without particles
            contributes nothing but is still counted as a simulation.
        """
        self.fold(self.density_map(snapshot, particle_count))

    def accumulate(self, snapshots: Iterable) -> None:
        """
        Push every snapshot of an iterable.

        Convenience wrapper that handles iteration and progress reporting.

        Parameters
        ----------
        snapshots : iterable
            ``(snapshot, particle_count)`` pairs (tuples or lists), or bare
            ``Lattice`` objects whose particle count is taken from the lattice itself.
        """
        total = len(snapshots) if hasattr(snapshots, '__len__') else None
        for item in tqdm(snapshots, total=total):
            if isinstance(item, (tuple, list)):
                snapshot, particle_count = item
            else:
                snapshot = item
                particle_count = snapshot.count(self.particle_type)
            self.push(snapshot, particle_count)

    def merge(self, other: RdfAccumulator) -> RdfAccumulator:
        """
        Fold another accumulator's totals and simulation count into this one.

        Raises
        ------
        ValueError
            If the accumulators describe different lattices or particle types.
        """
        if other.width != self.width or other.particle_type != self.particle_type:
            raise ValueError(
                f"Cannot merge accumulators for width {other.width} ({other.particle_type.name}) "
                f"into width {self.width} ({self.particle_type.name})."
            )
        self._totals += other._totals
        self._seen |= other._seen
        self._simulations += other._simulations
        return self

    def finalize(self) -> list[tuple[int, float]]:
        """
        Average the accumulated contributions over simulations.

        Returns
        -------
        list of (int, float)
            ``(squared displacement, rdf)`` pairs in ascending order of
            squared displacement.

        Raises
        ------
        InsufficientDataError
            If no simulation has been pushed.
        """
        if self._simulations == 0:
            raise InsufficientDataError("Cannot finalize RDF: zero simulations have been pushed.")

        keys = np.flatnonzero(self._seen)
        values = self._totals[keys] / self._simulations
        return [(int(k), float(v)) for k, v in zip(keys, values)]

    def report(self, root_path: str | Path | None = None) -> list[tuple[int, float]]:
        """
        Finalize, print each bin and optionally write ``<root_path>/rdf.txt``.

        Returns
        -------
        list of (int, float)
            The finalized curve.
        """
        curve = self.finalize()
        print_report(curve)
        if root_path is not None:
            write_report(curve, root_path)
        return curve


def compute_rdf(
    snapshots: Iterable,
    width: int,
    particle_type: CellType = CellType.CHEATER,
    backend: str | None = None,
) -> list[tuple[int, float]]:
    """
    Compute a lattice RDF from snapshots with a single function call.

    Parameters
    ----------
    snapshots : iterable
        ``(snapshot, particle_count)`` pairs or bare ``Lattice`` objects.
    width : int
        Lattice side length ``W``.
    particle_type : CellType
        Cell type being profiled (default: CHEATER).
    backend : str or None
        Density-map backend ('numpy' or 'numba').

    Returns
    -------
    list of (int, float)
        Finalized ``(squared displacement, rdf)`` pairs.

    Examples
    --------
    >>> from latticeRDF.rdf import compute_rdf
    >>> curve = compute_rdf(lattices, width=64)
    """
    accumulator = RdfAccumulator(width, particle_type=particle_type, backend=backend)
    accumulator.accumulate(snapshots)
    return accumulator.finalize()
