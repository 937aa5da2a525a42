"""
Backend configuration for latticeRDF.

This module provides backend selection for the numerically intensive part of
the package: building the per-snapshot density map of the RDF accumulator.

The backend can be configured via the LATTICERDF_BACKEND environment variable:
- 'numba': JIT-compiled neighbour enumeration (default, requires numba)
- 'numpy': Vectorised pair counting with NumPy

Example
-------
>>> import os
>>> os.environ['LATTICERDF_BACKEND'] = 'numpy'  # Before importing latticeRDF
"""

from __future__ import annotations

import os

BACKEND_ENV_VAR = 'LATTICERDF_BACKEND'
AVAILABLE_BACKENDS = frozenset({'numpy', 'numba'})
DEFAULT_BACKEND = 'numba'


def _resolve_backend() -> str:
    """Resolve and validate backend from environment variable.

    Called once at module import time to ensure the backend is valid.

    Returns
    -------
    str
        Validated backend name ('numpy' or 'numba').

    Raises
    ------
    ValueError
        If the environment variable contains an invalid backend name.
    """
    value = os.environ.get(BACKEND_ENV_VAR, DEFAULT_BACKEND).lower().strip()
    if not value:
        return DEFAULT_BACKEND
    if value not in AVAILABLE_BACKENDS:
        raise ValueError(
            f"Invalid LATTICERDF_BACKEND '{value}'. "
            f"Must be one of: {', '.join(sorted(AVAILABLE_BACKENDS))}"
        )
    return value


BACKEND = _resolve_backend()


def get_backend() -> str:
    """
    Get the current backend.

    Returns
    -------
    str
        Backend name ('numpy' or 'numba').
    """
    return BACKEND
