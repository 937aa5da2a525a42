"""Tests for lattices, parameters and initial conditions."""

import numpy as np
import pytest

from latticeRDF import (
    CellType,
    ConfigurationError,
    Lattice,
    Parameters,
    filled,
    single_cheater,
    wrap,
)


class TestWrap:

    @pytest.mark.parametrize("value, expected", [(-1, 4), (5, 0), (-6, 4), (0, 0), (4, 4), (12, 2)])
    def test_true_modulo(self, value, expected):
        assert wrap(value, 5) == expected

    def test_lattice_wrap_uses_width(self):
        lattice = filled(Parameters(7), CellType.EMPTY)
        assert lattice.wrap(-1) == 6
        assert lattice.wrap(7) == 0


class TestLattice:

    def test_width_and_size(self):
        lattice = Lattice(np.zeros((6, 6)))
        assert lattice.width == 6
        assert lattice.size == 36

    def test_get_type_at_uses_xy_indexing(self):
        states = np.zeros((4, 4), dtype=np.int8)
        states[3, 1] = CellType.CHEATER
        lattice = Lattice(states)
        assert lattice.get_type_at(3, 1) is CellType.CHEATER
        assert lattice.get_type_at(1, 3) is CellType.PRODUCER

    def test_from_flat_site_order(self):
        """Flat site i sits at (i % W, i // W)."""
        flat = np.zeros(16, dtype=np.int8)
        flat[1 * 4 + 3] = CellType.DEAD
        lattice = Lattice.from_flat(flat)
        assert lattice.get_type_at(3, 1) is CellType.DEAD
        assert lattice.count(CellType.DEAD) == 1

    def test_from_flat_rejects_non_square(self):
        with pytest.raises(ValueError, match="not square"):
            Lattice.from_flat(np.zeros(10))

    def test_rejects_non_square_states(self):
        with pytest.raises(ValueError, match="square"):
            Lattice(np.zeros((3, 4)))

    def test_rejects_unknown_codes(self):
        with pytest.raises(ValueError, match="unknown cell codes"):
            Lattice(np.full((2, 2), 9))

    def test_states_are_read_only_copy(self):
        source = np.zeros((3, 3), dtype=np.int8)
        lattice = Lattice(source)
        source[0, 0] = CellType.CHEATER
        assert lattice.get_type_at(0, 0) is CellType.PRODUCER
        with pytest.raises(ValueError):
            lattice.states[0, 0] = CellType.CHEATER

    def test_particle_mask(self, lattice_factory):
        lattice = lattice_factory(5, cheaters=[(0, 0), (2, 3)])
        mask = lattice.particle_mask()
        assert mask.dtype == bool
        assert mask.sum() == 2
        assert mask[2, 3]
        assert lattice.particle_mask(CellType.PRODUCER).sum() == 23


class TestParameters:

    def test_size_derived_from_width(self):
        params = Parameters(8, path="out")
        assert params.W == 8
        assert params.N == 64
        assert str(params.path) == "out"

    @pytest.mark.parametrize("width", [0, -3])
    def test_width_below_one_rejected(self, width):
        with pytest.raises(ConfigurationError, match="at least 1"):
            Parameters(width)

    @pytest.mark.parametrize("width", [2.5, "5", True])
    def test_non_integer_width_rejected(self, width):
        with pytest.raises(ConfigurationError, match="integer"):
            Parameters(width)

    def test_numpy_integer_width_accepted(self):
        assert Parameters(np.int64(5)).W == 5

    def test_non_finite_production_rejected(self):
        with pytest.raises(ConfigurationError, match="production"):
            Parameters(5, production=np.inf)

    def test_non_positive_epsilon_rejected(self):
        with pytest.raises(ConfigurationError, match="epsilon"):
            Parameters(5, epsilon=0.0)


class TestInitialConditions:

    def test_single_cheater_centre(self):
        lattice = single_cheater(Parameters(5))
        assert lattice.get_type_at(2, 2) is CellType.CHEATER
        assert lattice.count(CellType.CHEATER) == 1
        assert lattice.count(CellType.PRODUCER) == 24

    def test_single_cheater_even_width(self):
        lattice = single_cheater(Parameters(4))
        assert lattice.get_type_at(2, 2) is CellType.CHEATER

    def test_filled(self):
        lattice = filled(Parameters(3), CellType.COOPERATOR)
        assert lattice.count(CellType.COOPERATOR) == 9
