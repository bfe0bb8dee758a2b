"""
Witness Canonicalization
^^^^^^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Sorting and duplicate merging that turns a witness into a sequence strictly
increasing by position. The finalizer can then walk the code and the witness
side by side, instead of searching the witness for every instruction.
"""
from typing import Iterable, List, Tuple

from .exceptions import ConflictingEntry
from .trace import WitnessCanonicalized, jumpdest_trace
from .utils import ensure
from .witness import JumpdestEntry

CanonicalWitness = Tuple[JumpdestEntry, ...]
"""
Witness entries strictly increasing by position, one per position.
"""


def canonicalize(witness: Iterable[JumpdestEntry]) -> CanonicalWitness:
    """
    Sort `witness` by position and merge repeated entries.

    Repeated entries for a position are merged only when they agree; a
    position claimed with two different markers means the witness
    contradicts itself.

    Parameters
    ----------
    witness :
        Entries in any order, possibly repeated.

    Returns
    -------
    canonical_witness : `CanonicalWitness`
        One entry per distinct position, in increasing order of position.

    Raises
    ------
    ConflictingEntry
        If two entries share a position but not a marker.
    """
    # `sorted` is stable, so equal positions keep their submission order.
    ordered = sorted(witness, key=lambda entry: entry.position)
    merged: List[JumpdestEntry] = []

    for entry in ordered:
        if merged and merged[-1].position == entry.position:
            ensure(
                merged[-1].marker == entry.marker,
                ConflictingEntry(entry.position),
            )
            continue
        merged.append(entry)

    jumpdest_trace(WitnessCanonicalized(len(ordered), len(merged)))
    return tuple(merged)
