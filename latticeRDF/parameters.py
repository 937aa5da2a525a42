"""Run parameters shared by the RDF accumulator, initial conditions and writers."""

from __future__ import annotations

from pathlib import Path

import numpy as np

from latticeRDF.errors import ConfigurationError


def validate_width(W) -> int:
    """
    Validate that the lattice width is a positive integer.

    Raises
    ------
    ConfigurationError
        If ``W`` is not an integer or is below 1.
    """
    if isinstance(W, bool) or not isinstance(W, (int, np.integer)):
        raise ConfigurationError(f"Lattice width must be an integer. Got: {W!r}")
    if W < 1:
        raise ConfigurationError(f"Lattice width must be at least 1. Got: {W}")
    return int(W)


class Parameters:
    """
    Lattice and output parameters for a run.

    Parameters
    ----------
    W : int
        Lattice side length (must be a positive integer).
    path : str or Path
        Root directory for reports and images (default: current directory).
    production : float
        Solute production rate; the solute pane of a state map is drawn black
        when this falls below ``epsilon`` (default: 0.0).
    epsilon : float
        Numerical tolerance (default: 1e-12).

    Raises
    ------
    ConfigurationError
        If any value is invalid.
    """

    def __init__(
        self,
        W: int,
        path: str | Path = '.',
        production: float = 0.0,
        epsilon: float = 1e-12,
    ) -> None:
        self._W = validate_width(W)
        self.path = Path(path)
        self.production = self._validate_finite('production', production)
        self.epsilon = self._validate_finite('epsilon', epsilon)
        if self.epsilon <= 0:
            raise ConfigurationError(f"epsilon must be positive. Got: {epsilon}")

    @staticmethod
    def _validate_finite(name: str, value: float) -> float:
        if not np.isfinite(value):
            raise ConfigurationError(f"{name} must be finite. Got: {value}")
        return float(value)

    @property
    def W(self) -> int:
        """Lattice side length."""
        return self._W

    @property
    def N(self) -> int:
        """Number of lattice sites, ``W**2``."""
        return self._W * self._W

    def __repr__(self) -> str:
        return f"Parameters(W={self._W}, path={str(self.path)!r})"
