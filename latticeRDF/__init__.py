"""Radial distribution functions on periodic lattice simulations"""
from .version import __version__
from .errors import ConfigurationError, InsufficientDataError
from .lattice import CellType, Lattice, wrap
from .parameters import Parameters
from .initial_conditions import filled, single_cheater
from .rdf import AnnulusAreaTable, RdfAccumulator, compute_rdf
from .render import StateMapWriter
