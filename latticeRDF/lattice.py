"""
Periodic square lattice snapshots.

A lattice of side ``W`` holds one :class:`CellType` per site and wraps in both
directions. Sites are addressed as ``(x, y)`` with ``0 <= x, y < W``; the
underlying array is indexed ``states[x, y]``.

Key operations:

- Toroidal wrap: ``wrap(v, W) = ((v % W) + W) % W``
- Site query: ``Lattice.get_type_at(x, y)``
- Particle mask: ``Lattice.particle_mask(CellType.CHEATER)``
"""

from __future__ import annotations

from enum import IntEnum

import numpy as np


class CellType(IntEnum):
    """Discrete state of a lattice site."""

    PRODUCER = 0
    COOPERATOR = 1
    CHEATER = 2
    DEAD = 3
    EMPTY = 4


def wrap(value: int, width: int) -> int:
    """
    Wrap a coordinate onto ``[0, width)`` using true modulo.

    Parameters
    ----------
    value : int
        Coordinate, possibly outside the lattice.
    width : int
        Lattice side length.

    Returns
    -------
    int
        Wrapped coordinate, e.g. ``wrap(-1, 5) == 4`` and ``wrap(-6, 5) == 4``.
    """
    return ((value % width) + width) % width


class Lattice:
    """
    Read-only view of a square periodic lattice.

    Parameters
    ----------
    states : array_like, shape (W, W)
        Cell types indexed ``[x, y]``. Values must be valid ``CellType`` codes.

    Attributes
    ----------
    width : int
        Side length ``W``.
    size : int
        Number of sites ``N = W**2``.

    Raises
    ------
    ValueError
        If ``states`` is not a non-empty square 2D array or holds unknown codes.
    """

    def __init__(self, states) -> None:
        states = np.asarray(states, dtype=np.int8)
        if states.ndim != 2 or states.shape[0] != states.shape[1]:
            raise ValueError(f"Lattice states must be a square 2D array. Got shape: {states.shape}")
        if states.shape[0] < 1:
            raise ValueError("Lattice states must contain at least one site.")
        codes = np.array([c.value for c in CellType])
        if not np.all(np.isin(states, codes)):
            raise ValueError(f"Lattice states contain unknown cell codes: {sorted(set(np.unique(states)) - set(codes))}")

        self._states = states.copy()
        self._states.setflags(write=False)
        self.width = int(states.shape[0])
        self.size = self.width * self.width

    @classmethod
    def from_flat(cls, states) -> Lattice:
        """
        Build a lattice from a flat array where site ``i`` is ``(i % W, i // W)``.

        Parameters
        ----------
        states : array_like, shape (N,)
            Cell types in row-major site order; ``N`` must be a perfect square.
        """
        states = np.asarray(states)
        width = int(round(np.sqrt(states.size)))
        if width * width != states.size:
            raise ValueError(f"Flat lattice of {states.size} sites is not square.")
        # states[i] with i = y * W + x  ->  grid[y, x]  ->  transpose to [x, y]
        return cls(states.reshape(width, width).T)

    @property
    def states(self) -> np.ndarray:
        """Read-only ``(W, W)`` array of cell codes indexed ``[x, y]``."""
        return self._states

    def wrap(self, value: int) -> int:
        """Wrap a coordinate onto this lattice."""
        return wrap(value, self.width)

    def get_type_at(self, x: int, y: int) -> CellType:
        """Return the cell type at an in-range site ``(x, y)``."""
        return CellType(int(self._states[x, y]))

    def count(self, cell_type: CellType) -> int:
        """Number of sites holding ``cell_type``."""
        return int(np.count_nonzero(self._states == cell_type))

    def particle_mask(self, particle_type: CellType = CellType.CHEATER) -> np.ndarray:
        """Boolean ``(W, W)`` mask of the sites holding ``particle_type``."""
        return self._states == particle_type

    def __repr__(self) -> str:
        return f"Lattice(width={self.width})"
