"""
Jump Destination Analysis
^^^^^^^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Entry point that runs a witness through canonicalization and finalization.
"""
from typing import Iterable, Optional

from ethereum_types.bytes import Bytes

from .canonical import canonicalize
from .dictionary import ValidJumpDestinations
from .exceptions import InvalidWitness
from .finalize import finalize
from .runtime import get_valid_jump_destinations
from .trace import WitnessRejected, jumpdest_trace
from .witness import JumpdestEntry, witness_from_positions


def analyze_jump_destinations(
    code: Bytes, witness: Optional[Iterable[JumpdestEntry]] = None
) -> ValidJumpDestinations:
    """
    Obtain the verified jump destinations of `code`.

    When no witness is given, one is built from
    [`get_valid_jump_destinations`]. It is still checked like any other.

    Parameters
    ----------
    code :
        The EVM code to analyze.

    witness :
        Claimed jump destinations, in any order and possibly repeated.

    Returns
    -------
    valid_jump_destinations : `ValidJumpDestinations`
        The verified destinations.

    Raises
    ------
    InvalidWitness
        If the witness contradicts itself or the code.

    [`get_valid_jump_destinations`]: ref:jumpdest.runtime.get_valid_jump_destinations
    """  # noqa: E501
    if witness is None:
        witness = witness_from_positions(
            sorted(get_valid_jump_destinations(code))
        )

    try:
        return finalize(code, canonicalize(witness))
    except InvalidWitness as error:
        jumpdest_trace(WitnessRejected(error))
        raise
