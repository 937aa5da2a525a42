"""Shared fixtures for unit tests."""

import numpy as np
import pytest

from latticeRDF.lattice import CellType, Lattice


class SnapshotMock:
    """Minimal snapshot exposing only the site query."""
    def __init__(self, states):
        self._states = np.asarray(states)
        self.queries = 0

    def get_type_at(self, x, y):
        assert 0 <= x < self._states.shape[0]
        assert 0 <= y < self._states.shape[1]
        self.queries += 1
        return CellType(int(self._states[x, y]))


def make_lattice(width, cheaters=(), background=CellType.PRODUCER):
    """Lattice of ``background`` with cheaters at the given ``(x, y)`` sites."""
    states = np.full((width, width), int(background), dtype=np.int8)
    for x, y in cheaters:
        states[x, y] = CellType.CHEATER
    return Lattice(states)


@pytest.fixture(params=['numpy', 'numba'])
def backend(request):
    """Run a test once per density-map backend."""
    if request.param == 'numba':
        pytest.importorskip('numba')
    return request.param


@pytest.fixture
def random_lattice():
    """A 9x9 lattice with a random mix of all cell types."""
    rng = np.random.default_rng(1234)
    return Lattice(rng.integers(0, len(CellType), size=(9, 9)))


@pytest.fixture
def lattice_factory():
    """Factory building producer lattices with cheaters at given sites."""
    return make_lattice


@pytest.fixture
def snapshot_mock():
    """The ``SnapshotMock`` class, for snapshots without a particle mask."""
    return SnapshotMock
