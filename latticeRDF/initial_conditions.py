"""Initial lattice configurations."""

from __future__ import annotations

import numpy as np

from latticeRDF.lattice import CellType, Lattice
from latticeRDF.parameters import Parameters


def filled(parameters: Parameters, cell_type: CellType) -> Lattice:
    """Return a lattice where every site holds ``cell_type``."""
    states = np.full((parameters.W, parameters.W), int(cell_type), dtype=np.int8)
    return Lattice(states)


def single_cheater(parameters: Parameters) -> Lattice:
    """
    Return a producer-filled lattice with one cheater at its centre.

    The cheater sits at ``(W // 2, W // 2)``. Intended for replacement
    strategies where the cheater invades a resident producer population.
    """
    states = np.full((parameters.W, parameters.W), int(CellType.PRODUCER), dtype=np.int8)
    centre = parameters.W // 2
    states[centre, centre] = CellType.CHEATER
    return Lattice(states)
