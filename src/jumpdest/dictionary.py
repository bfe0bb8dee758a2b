"""
Verified Jump Destinations
^^^^^^^^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

The value produced by [`finalize`]: the jump destinations of one specific
piece of code, already proven correct and complete. It is immutable and can be
shared by any number of readers.

[`finalize`]: ref:jumpdest.finalize.finalize
"""

from dataclasses import dataclass
from typing import FrozenSet, Iterator

from ethereum_types.bytes import Bytes32
from ethereum_types.numeric import Uint


@dataclass(frozen=True)
class ValidJumpDestinations:
    """
    Jump destinations of a piece of code, checked against that code.

    Only [`finalize`] should construct this; building one by hand skips the
    check that makes lookups trustworthy.

    [`finalize`]: ref:jumpdest.finalize.finalize
    """

    code_hash: Bytes32
    """
    keccak256 of the code the destinations were checked against.
    """

    code_length: Uint
    """
    Length of that code. Positions at or past it are out of range.
    """

    positions: FrozenSet[Uint]
    """
    Every valid jump destination in the code.
    """

    def contains(self, position: Uint) -> bool:
        """
        Check whether `position` is a valid jump destination.
        """
        return Uint(position) in self.positions

    def size(self) -> int:
        """
        Number of valid jump destinations.
        """
        return len(self.positions)

    def __contains__(self, position: object) -> bool:
        if isinstance(position, Uint):
            return self.contains(position)
        if isinstance(position, int) and not isinstance(position, bool):
            return position >= 0 and self.contains(Uint(position))
        return False

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[Uint]:
        return iter(sorted(self.positions))
