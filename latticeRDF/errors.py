"""Exceptions raised by latticeRDF."""


class ConfigurationError(ValueError):
    """Raised when lattice or run parameters are invalid (e.g. a width below 1)."""
    pass


class InsufficientDataError(RuntimeError):
    """Raised when an RDF is requested before any simulation has been pushed."""
    pass
