"""
Jump Destination Scan
^^^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Forward scan of legacy EVM code that classifies every byte as either the start
of an instruction or immediate data of a `PUSH-N` instruction.

The scan here is the reference answer. It is what a prover runs to build a
witness and what the tests compare against, but nothing downstream accepts its
output without checking it through [`finalize`].

[`finalize`]: ref:jumpdest.finalize.finalize
"""
from typing import Iterator, Set, Tuple

from ethereum_types.bytes import Bytes
from ethereum_types.numeric import Uint, ulen

from .instructions import Ops, instruction_width


def iter_instruction_boundaries(code: Bytes) -> Iterator[Tuple[Uint, int]]:
    """
    Walk the code and yield every position where an instruction begins.

    A `PUSH-N` instruction owns the `N` bytes after it, and those bytes are
    never yielded. If the code ends before all `N` bytes are present, the
    remaining bytes are all data and the walk ends.

    Parameters
    ----------
    code :
        The EVM code to walk.

    Yields
    ------
    boundary : `Tuple[Uint, int]`
        The position of the instruction and its opcode byte.
    """
    pc = Uint(0)
    code_length = ulen(code)

    while pc < code_length:
        opcode_byte = code[pc]
        yield pc, opcode_byte
        pc += instruction_width(opcode_byte)


def get_valid_jump_destinations(code: Bytes) -> Set[Uint]:
    """
    Analyze the evm code to obtain the set of valid jump destinations.

    Valid jump destinations are defined as follows:
        * The jump destination is less than the length of the code.
        * The jump destination should have the `JUMPDEST` opcode (0x5B).
        * The jump destination shouldn't be part of the data corresponding to
          `PUSH-N` opcodes.

    Note - Jump destinations are 0-indexed.

    Parameters
    ----------
    code :
        The EVM code which is to be executed.

    Returns
    -------
    valid_jump_destinations: `Set[Uint]`
        The set of valid jump destinations in the code.
    """
    valid_jump_destinations: Set[Uint] = set()

    for pc, opcode_byte in iter_instruction_boundaries(code):
        if opcode_byte == Ops.JUMPDEST.value:
            valid_jump_destinations.add(pc)

    return valid_jump_destinations
