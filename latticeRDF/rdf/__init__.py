"""
Radial distribution function (RDF) estimators for latticeRDF.

This package provides the lattice RDF accumulator:

- AnnulusAreaTable: Offset counts per squared displacement
- RdfAccumulator: Stateful RDF calculator (push snapshots, then finalize)
- compute_rdf: Convenience function for one-liner RDF computation
- write_report / print_report: Output of finalized curves

Preferred imports::

    from latticeRDF.rdf import RdfAccumulator

    rdf = RdfAccumulator(width=64)
    for lattice in lattices:
        rdf.push(lattice, lattice.count(CellType.CHEATER))
    curve = rdf.finalize()
"""

from latticeRDF.rdf.annulus import AnnulusAreaTable
from latticeRDF.rdf.rdf_class import RdfAccumulator, compute_rdf
from latticeRDF.rdf.report import print_report, read_report, write_report

__all__ = [
    "AnnulusAreaTable",
    "RdfAccumulator",
    "compute_rdf",
    "print_report",
    "read_report",
    "write_report",
]
