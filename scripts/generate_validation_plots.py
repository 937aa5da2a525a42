#!/usr/bin/env python3
"""
Generate validation plots for visual inspection of lattice RDFs.

This script produces plots that allow direct visual confirmation that the
calculated RDFs match expected behaviour: a flat curve for randomly placed
particles and a positive short-range peak for clustered ones. A state map of
one clustered lattice is written alongside.

Output is written to tests/validation_plots/
"""

import numpy as np
import matplotlib.pyplot as plt
from pathlib import Path
import sys

# Add project root to path
sys.path.insert(0, str(Path(__file__).parents[1]))

OUTPUT_DIR = Path(__file__).parents[1] / "tests" / "validation_plots"


def ensure_output_dir():
    """Create output directory if it doesn't exist."""
    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    print(f"Output directory: {OUTPUT_DIR}")


def random_lattice(rng, width, fraction):
    """Producer lattice with a random fraction of cheaters."""
    from latticeRDF import CellType, Lattice

    states = np.full((width, width), int(CellType.PRODUCER), dtype=np.int8)
    states[rng.random((width, width)) < fraction] = CellType.CHEATER
    return Lattice(states)


def clustered_lattice(rng, width, n_clusters, radius):
    """Producer lattice with square cheater clusters at random centres."""
    from latticeRDF import CellType, Lattice

    states = np.full((width, width), int(CellType.PRODUCER), dtype=np.int8)
    for cx, cy in rng.integers(0, width, size=(n_clusters, 2)):
        xs = np.arange(cx - radius, cx + radius + 1) % width
        ys = np.arange(cy - radius, cy + radius + 1) % width
        states[np.ix_(xs, ys)] = CellType.CHEATER
    return Lattice(states)


def plot_rdf_comparison(width=41, n_sims=20):
    """
    Plot RDF for random and clustered cheaters.

    Expected: random ~ 0 beyond r=0, clustered > 0 at short range.
    """
    from latticeRDF.rdf import compute_rdf

    print("\n=== Random vs clustered RDF ===")
    rng = np.random.default_rng(42)

    random_curve = compute_rdf(
        [random_lattice(rng, width, 0.2) for _ in range(n_sims)], width
    )
    clustered_curve = compute_rdf(
        [clustered_lattice(rng, width, 6, 2) for _ in range(n_sims)], width
    )

    fig, ax = plt.subplots(figsize=(7, 5))
    for curve, label in ((random_curve, 'random'), (clustered_curve, 'clustered')):
        r2, g = zip(*curve[1:])
        ax.plot(np.sqrt(r2), g, '.-', label=label)
    ax.axhline(y=0.0, color='k', linestyle='--', label='Ideal gas')
    ax.set_xlabel('r (sites)')
    ax.set_ylabel('density deviation')
    ax.legend()

    out = OUTPUT_DIR / "rdf_random_vs_clustered.png"
    fig.savefig(out, dpi=150)
    plt.close(fig)
    print(f"Saved {out}")


def plot_state_map(width=41):
    """Write a two-pane state map of a clustered lattice."""
    from latticeRDF import Parameters, StateMapWriter

    print("\n=== State map ===")
    rng = np.random.default_rng(7)
    lattice = clustered_lattice(rng, width, 6, 2)
    params = Parameters(width, path=OUTPUT_DIR, production=1.0)
    writer = StateMapWriter(params, OUTPUT_DIR, fmt='state_%.0f.png')
    out = writer.refresh(lattice, rng.random((width, width)), rng.random((width, width)), 0)
    print(f"Saved {out}")


if __name__ == "__main__":
    ensure_output_dir()
    plot_rdf_comparison()
    plot_state_map()
