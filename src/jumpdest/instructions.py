"""
EVM Instruction Encoding (Opcodes)
^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Machine readable representations of the EVM instructions that matter to
jump destination analysis, and the rule that decides how many bytes each
instruction occupies in the code.

Only `JUMPDEST` and the `PUSH-N` family affect jump destination analysis;
every other byte, defined opcode or not, is a one byte instruction.
"""

import enum

from ethereum_types.numeric import Uint


class Ops(enum.Enum):
    """
    Enum for the EVM Opcodes that shape jump destination analysis
    """

    # Control Flow Ops
    STOP = 0x00
    JUMP = 0x56
    JUMPI = 0x57
    JUMPDEST = 0x5B

    # Push Operations
    PUSH0 = 0x5F
    PUSH1 = 0x60
    PUSH2 = 0x61
    PUSH3 = 0x62
    PUSH4 = 0x63
    PUSH5 = 0x64
    PUSH6 = 0x65
    PUSH7 = 0x66
    PUSH8 = 0x67
    PUSH9 = 0x68
    PUSH10 = 0x69
    PUSH11 = 0x6A
    PUSH12 = 0x6B
    PUSH13 = 0x6C
    PUSH14 = 0x6D
    PUSH15 = 0x6E
    PUSH16 = 0x6F
    PUSH17 = 0x70
    PUSH18 = 0x71
    PUSH19 = 0x72
    PUSH20 = 0x73
    PUSH21 = 0x74
    PUSH22 = 0x75
    PUSH23 = 0x76
    PUSH24 = 0x77
    PUSH25 = 0x78
    PUSH26 = 0x79
    PUSH27 = 0x7A
    PUSH28 = 0x7B
    PUSH29 = 0x7C
    PUSH30 = 0x7D
    PUSH31 = 0x7E
    PUSH32 = 0x7F


def push_data_size(opcode_byte: int) -> Uint:
    """
    Number of immediate data bytes that follow `opcode_byte` in the code.

    `PUSH1` through `PUSH32` are followed by one to thirty-two bytes of data.
    Every other byte, `PUSH0` included, has no immediate data.

    Parameters
    ----------
    opcode_byte :
        A single byte of code, read at an instruction boundary.

    Returns
    -------
    push_data_size : `ethereum_types.numeric.Uint`
        The number of data bytes owned by the instruction.
    """
    if Ops.PUSH1.value <= opcode_byte <= Ops.PUSH32.value:
        return Uint(opcode_byte - Ops.PUSH1.value + 1)
    return Uint(0)


def instruction_width(opcode_byte: int) -> Uint:
    """
    Number of bytes, opcode included, occupied by the instruction that starts
    with `opcode_byte`.
    """
    return Uint(1) + push_data_size(opcode_byte)
