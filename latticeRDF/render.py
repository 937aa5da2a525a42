"""
Two-pane PNG state maps.

The left pane colours each site by cell type, brightened by the site's scaled
derivative; the right pane shows the scaled solute field in greyscale. Both
panes share the lattice's orientation with the y axis pointing up.
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
from matplotlib import image as mpimg

from latticeRDF.lattice import CellType, Lattice
from latticeRDF.parameters import Parameters

CELL_HEIGHT = 5
CELL_WIDTH = 5


def cell_colors(lattice: Lattice, derivative: np.ndarray) -> np.ndarray:
    """
    RGB colour of every site of a lattice.

    Parameters
    ----------
    lattice : Lattice
        Lattice state.
    derivative : np.ndarray, shape (W, W)
        Scaled derivative per site in ``[0, 1]``, indexed ``[x, y]``.

    Returns
    -------
    np.ndarray, shape (W, W, 3)
        RGB components indexed ``[x, y, channel]``. Producers are black.
    """
    states = lattice.states
    shade = (0.75 * np.asarray(derivative, dtype=np.float64)) ** 2
    rgb = np.zeros(states.shape + (3,), dtype=np.float64)

    cheater = states == CellType.CHEATER
    rgb[cheater, 0] = 0.7 * shade[cheater]
    rgb[cheater, 1] = 0.7 * shade[cheater]
    rgb[cheater, 2] = shade[cheater] + 0.25

    cooperator = states == CellType.COOPERATOR
    rgb[cooperator, 0] = shade[cooperator] + 0.25
    rgb[cooperator, 1] = 0.7 * shade[cooperator]
    rgb[cooperator, 2] = 0.7 * shade[cooperator]

    rgb[states == CellType.DEAD] = 0.5
    rgb[states == CellType.EMPTY, 1] = 0.25
    return rgb


class StateMapWriter:
    """
    Writes side-by-side cell and solute maps of a lattice as PNG files.

    Parameters
    ----------
    parameters : Parameters
        Run parameters (lattice width, production rate, epsilon).
    base_path : str or Path
        Root output directory; images go to ``<base_path>/dual/``, which is
        created if absent.
    fmt : str
        Filename pattern applied to the simulation time with ``%``
        (e.g. ``'%.2f.png'``).

    Attributes
    ----------
    path : Path
        Output directory.
    """

    def __init__(self, parameters: Parameters, base_path: str | Path, fmt: str = '%.2f.png') -> None:
        self.parameters = parameters
        self.fmt = fmt
        self.path = Path(base_path) / "dual"
        self.path.mkdir(parents=True, exist_ok=True)

        self._width = 2 * CELL_WIDTH * parameters.W
        self._height = CELL_HEIGHT * parameters.W

    @property
    def nominal_width(self) -> int:
        """Image width in pixels."""
        return self._width

    @property
    def nominal_height(self) -> int:
        """Image height in pixels."""
        return self._height

    def build_image(
        self,
        lattice: Lattice,
        derivative: np.ndarray,
        solute: np.ndarray | None = None,
    ) -> np.ndarray:
        """
        Render a lattice state to an RGB pixel array.

        Parameters
        ----------
        lattice : Lattice
            Lattice state; must have width ``parameters.W``.
        derivative : np.ndarray, shape (W, W)
            Scaled derivative per site in ``[0, 1]``.
        solute : np.ndarray, shape (W, W), optional
            Scaled solute concentration per site in ``[0, 1]``. Ignored (drawn
            black) when production is below epsilon.

        Returns
        -------
        np.ndarray, shape (nominal_height, nominal_width, 3)
            RGB image with components in ``[0, 1]``.

        Raises
        ------
        ValueError
            If the lattice width is wrong or any colour component falls
            outside ``[0, 1]``.
        """
        W = self.parameters.W
        if lattice.width != W:
            raise ValueError(f"Lattice width {lattice.width} does not match parameters width {W}.")

        left = cell_colors(lattice, derivative)
        if solute is None or self.parameters.production < self.parameters.epsilon:
            grey = np.zeros((W, W), dtype=np.float64)
        else:
            grey = np.asarray(solute, dtype=np.float64)
        right = np.repeat(grey[:, :, np.newaxis], 3, axis=2)

        # [x, y, c] -> [row, col, c]; image rows run from y = W - 1 down to 0
        grid = np.concatenate([left, right], axis=0).transpose(1, 0, 2)[::-1]

        bad = ~((grid >= 0.0) & (grid <= 1.0))
        if np.any(bad):
            row, col = np.argwhere(bad.any(axis=2))[0]
            r, g, b = grid[row, col]
            raise ValueError(f"Offending values: {r}, {g}, {b}")

        return np.repeat(np.repeat(grid, CELL_HEIGHT, axis=0), CELL_WIDTH, axis=1)

    def refresh(
        self,
        lattice: Lattice,
        derivative: np.ndarray,
        solute: np.ndarray | None = None,
        time: float = 0.0,
    ) -> Path:
        """
        Render a lattice state and write it to ``<path>/<fmt % time>``.

        Returns
        -------
        Path
            The written image file.
        """
        image = self.build_image(lattice, derivative, solute)
        return self._export(image, time)

    def _export(self, image: np.ndarray, time: float) -> Path:
        filename = self.path / (self.fmt % time)
        mpimg.imsave(filename, image, format="png")
        return filename
