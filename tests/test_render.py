"""Tests for two-pane state map rendering."""

import numpy as np
import pytest
from matplotlib import image as mpimg

from latticeRDF import CellType, Lattice, Parameters, StateMapWriter
from latticeRDF.render import CELL_HEIGHT, CELL_WIDTH, cell_colors


def _pixel(image, x, y, W, pane=0):
    """Top-left pixel of site (x, y) in the given pane."""
    row = (W - 1 - y) * CELL_HEIGHT
    col = (x + pane * W) * CELL_WIDTH
    return image[row, col]


@pytest.fixture
def mixed_lattice():
    states = np.full((4, 4), int(CellType.PRODUCER), dtype=np.int8)
    states[0, 0] = CellType.CHEATER
    states[1, 0] = CellType.COOPERATOR
    states[2, 3] = CellType.DEAD
    states[3, 1] = CellType.EMPTY
    return Lattice(states)


class TestCellColors:

    def test_zero_derivative_colours(self, mixed_lattice):
        rgb = cell_colors(mixed_lattice, np.zeros((4, 4)))
        np.testing.assert_allclose(rgb[0, 0], [0.0, 0.0, 0.25])
        np.testing.assert_allclose(rgb[1, 0], [0.25, 0.0, 0.0])
        np.testing.assert_allclose(rgb[2, 3], [0.5, 0.5, 0.5])
        np.testing.assert_allclose(rgb[3, 1], [0.0, 0.25, 0.0])
        np.testing.assert_allclose(rgb[1, 1], [0.0, 0.0, 0.0])

    def test_derivative_brightens_cheater(self, mixed_lattice):
        rgb = cell_colors(mixed_lattice, np.ones((4, 4)))
        shade = 0.75 ** 2
        np.testing.assert_allclose(rgb[0, 0], [0.7 * shade, 0.7 * shade, shade + 0.25])
        np.testing.assert_allclose(rgb[1, 0], [shade + 0.25, 0.7 * shade, 0.7 * shade])


class TestStateMapWriter:

    def test_creates_output_directory(self, tmp_path):
        writer = StateMapWriter(Parameters(4), tmp_path / "images")
        assert writer.path == tmp_path / "images" / "dual"
        assert writer.path.is_dir()

    def test_nominal_size(self, tmp_path):
        writer = StateMapWriter(Parameters(4), tmp_path)
        assert writer.nominal_width == 2 * CELL_WIDTH * 4
        assert writer.nominal_height == CELL_HEIGHT * 4

    def test_image_layout(self, tmp_path, mixed_lattice):
        writer = StateMapWriter(Parameters(4, production=1.0), tmp_path)
        solute = np.zeros((4, 4))
        solute[2, 3] = 0.5
        image = writer.build_image(mixed_lattice, np.zeros((4, 4)), solute)

        assert image.shape == (writer.nominal_height, writer.nominal_width, 3)
        np.testing.assert_allclose(_pixel(image, 0, 0, 4), [0.0, 0.0, 0.25])
        np.testing.assert_allclose(_pixel(image, 2, 3, 4), [0.5, 0.5, 0.5])
        np.testing.assert_allclose(_pixel(image, 2, 3, 4, pane=1), [0.5, 0.5, 0.5])
        np.testing.assert_allclose(_pixel(image, 0, 0, 4, pane=1), [0.0, 0.0, 0.0])
        # y = W - 1 is the top row
        np.testing.assert_allclose(image[0, 2 * CELL_WIDTH], [0.5, 0.5, 0.5])

    def test_solute_hidden_without_production(self, tmp_path, mixed_lattice):
        writer = StateMapWriter(Parameters(4, production=0.0), tmp_path)
        image = writer.build_image(mixed_lattice, np.zeros((4, 4)), np.ones((4, 4)))
        assert np.all(image[:, 4 * CELL_WIDTH:] == 0.0)

    def test_offending_values_raise(self, tmp_path, mixed_lattice):
        writer = StateMapWriter(Parameters(4), tmp_path)
        with pytest.raises(ValueError, match="Offending values"):
            writer.build_image(mixed_lattice, np.full((4, 4), 2.0))

    def test_width_mismatch_raises(self, tmp_path, mixed_lattice):
        writer = StateMapWriter(Parameters(5), tmp_path)
        with pytest.raises(ValueError, match="does not match"):
            writer.build_image(mixed_lattice, np.zeros((4, 4)))

    def test_refresh_writes_png(self, tmp_path, mixed_lattice):
        writer = StateMapWriter(Parameters(4, production=1.0), tmp_path, fmt='%.2f.png')
        filename = writer.refresh(mixed_lattice, np.zeros((4, 4)), np.zeros((4, 4)), time=1.5)
        assert filename == tmp_path / "dual" / "1.50.png"
        written = mpimg.imread(filename)
        assert written.shape[:2] == (writer.nominal_height, writer.nominal_width)
