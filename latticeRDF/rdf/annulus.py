"""Annulus areas on a toroidal square lattice."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Iterator

import numpy as np

from latticeRDF.errors import ConfigurationError


class AnnulusAreaTable(Mapping):
    """
    Number of lattice offsets at each squared displacement.

    For every offset ``(dx, dy)`` in ``[-R, R]**2`` other than ``(0, 0)`` the
    entry ``dx**2 + dy**2`` is incremented by one. The self-point entry is
    then set to 1 by convention, so ``table[0] == 1`` even though ``(0, 0)``
    is never counted. The table is built once and is read-only afterwards.

    Parameters
    ----------
    max_radius : int
        Half-width ``R`` of the offset box (``R >= 0``).

    Attributes
    ----------
    max_radius : int
        Half-width of the offset box.
    areas : np.ndarray, shape (2 * R**2 + 1,)
        Dense areas indexed by squared displacement; zero where a squared
        displacement cannot be formed inside the box.
    keys_array : np.ndarray
        Attainable squared displacements in ascending order.
    dx, dy, sq_disp : np.ndarray
        The enumerated offsets (excluding ``(0, 0)``) and their squared
        displacements, in matching order.

    Examples
    --------
    >>> table = AnnulusAreaTable(2)
    >>> sorted(table.items())
    [(0, 1.0), (1, 4.0), (2, 4.0), (4, 4.0), (5, 8.0), (8, 4.0)]
    """

    def __init__(self, max_radius: int) -> None:
        if max_radius < 0:
            raise ConfigurationError(f"max_radius must be non-negative. Got: {max_radius}")
        self.max_radius = int(max_radius)

        span = np.arange(-self.max_radius, self.max_radius + 1)
        dx, dy = np.meshgrid(span, span, indexing='ij')
        dx = dx.ravel()
        dy = dy.ravel()
        not_self = (dx != 0) | (dy != 0)
        self.dx = dx[not_self].astype(np.int64)
        self.dy = dy[not_self].astype(np.int64)
        self.sq_disp = self.dx ** 2 + self.dy ** 2

        areas = np.bincount(self.sq_disp, minlength=2 * self.max_radius ** 2 + 1).astype(np.float64)
        areas[0] = 1.0

        self.areas = areas
        self.keys_array = np.flatnonzero(areas)
        for arr in (self.dx, self.dy, self.sq_disp, self.areas, self.keys_array):
            arr.setflags(write=False)

    def __getitem__(self, key: int) -> float:
        if (
            isinstance(key, (int, np.integer))
            and 0 <= key < len(self.areas)
            and self.areas[key] > 0
        ):
            return float(self.areas[key])
        raise KeyError(key)

    def __iter__(self) -> Iterator[int]:
        return (int(k) for k in self.keys_array)

    def __len__(self) -> int:
        return len(self.keys_array)

    def __repr__(self) -> str:
        return f"AnnulusAreaTable(max_radius={self.max_radius}, bins={len(self)})"
