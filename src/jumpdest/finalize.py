"""
Witness Finalization
^^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Proof that a canonical witness lists exactly the valid jump destinations of a
piece of code.

The code is walked once, instruction by instruction, while a second cursor
steps through the witness. At every instruction boundary the two cursors must
agree: a `JUMPDEST` must be the next witness entry, and any other instruction
must not be. Witness entries that the walk steps over without landing on are
sitting on `PUSH-N` data, and entries left over at the end are past the code.
"""
from typing import Sequence

from ethereum_types.bytes import Bytes
from ethereum_types.numeric import Uint, ulen

from .crypto import keccak256
from .dictionary import ValidJumpDestinations
from .exceptions import InvalidEntry, MissingEntry
from .instructions import Ops
from .runtime import iter_instruction_boundaries
from .trace import JumpdestsFinalized, jumpdest_trace
from .utils import ensure
from .witness import JumpdestEntry


def finalize(
    code: Bytes, witness: Sequence[JumpdestEntry]
) -> ValidJumpDestinations:
    """
    Check `witness` against `code` and produce the verified destinations.

    `witness` should come from [`canonicalize`]. Input that is not strictly
    increasing is rejected rather than reordered: the first entry that is not
    above its predecessor is reported as [`InvalidEntry`].

    Parameters
    ----------
    code :
        The EVM code the witness describes.

    witness :
        Entries strictly increasing by position.

    Returns
    -------
    valid_jump_destinations : `ValidJumpDestinations`
        The destinations in `witness`, now known to be every `JUMPDEST`
        instruction of `code` and nothing else.

    Raises
    ------
    InvalidEntry
        If an entry is on a byte that is not `JUMPDEST`, on `PUSH-N` data,
        past the end of the code, has a zero marker, or is out of order.
    MissingEntry
        If a `JUMPDEST` instruction has no entry.

    [`canonicalize`]: ref:jumpdest.canonical.canonicalize
    [`InvalidEntry`]: ref:jumpdest.exceptions.InvalidEntry
    """
    for previous, entry in zip(witness, witness[1:]):
        ensure(
            entry.position > previous.position,
            lambda: InvalidEntry(entry.position),
        )

    w = 0
    for b, opcode_byte in iter_instruction_boundaries(code):
        # Entries below the cursor were stepped over as push data.
        ensure(
            w == len(witness) or witness[w].position >= b,
            lambda: InvalidEntry(witness[w].position),
        )
        claimed = w < len(witness) and witness[w].position == b

        if opcode_byte == Ops.JUMPDEST.value:
            ensure(claimed, lambda: MissingEntry(b))
            ensure(witness[w].marker != Uint(0), lambda: InvalidEntry(b))
            w += 1
        else:
            ensure(not claimed, lambda: InvalidEntry(b))

    ensure(w == len(witness), lambda: InvalidEntry(witness[w].position))

    positions = frozenset(entry.position for entry in witness)
    jumpdest_trace(JumpdestsFinalized(ulen(code), len(positions)))

    return ValidJumpDestinations(
        code_hash=keccak256(code),
        code_length=ulen(code),
        positions=positions,
    )
