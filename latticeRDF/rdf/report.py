"""Console and file output for finalized RDF curves."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

RDF_FILENAME = 'rdf.txt'


def format_value(value: float) -> str:
    """Shortest round-trip decimal representation of ``value``."""
    return repr(float(value))


def print_report(curve: Iterable[tuple[int, float]]) -> None:
    """Print one ``R(<r2>) = <value>`` line per bin."""
    for key, value in curve:
        print(f"R({key}) = {format_value(value)}")


def write_report(curve: Iterable[tuple[int, float]], root_path: str | Path) -> Path:
    """
    Write a finalized RDF curve as tab-separated text.

    The file is ``<root_path>/rdf.txt`` with one ``<r2>\\t<value>`` line per
    bin in the order given. ``root_path`` is created (with parents) if absent.

    Parameters
    ----------
    curve : iterable of (int, float)
        Ascending ``(squared displacement, rdf)`` pairs, as returned by
        ``RdfAccumulator.finalize()``.
    root_path : str or Path
        Output directory.

    Returns
    -------
    Path
        The written file.

    Raises
    ------
    OSError
        If the directory cannot be created or the file cannot be written.
    """
    root = Path(root_path)
    root.mkdir(parents=True, exist_ok=True)
    filename = root / RDF_FILENAME
    with open(filename, "w", encoding="utf-8") as f:
        for key, value in curve:
            f.write(f"{key}\t{format_value(value)}\n")
    return filename


def read_report(filename: str | Path) -> list[tuple[int, float]]:
    """Read back a report written by :func:`write_report`."""
    curve = []
    with open(filename, "r", encoding="utf-8") as f:
        for line in f:
            if not line.strip():
                continue
            key, value = line.split("\t")
            curve.append((int(key), float(value)))
    return curve
