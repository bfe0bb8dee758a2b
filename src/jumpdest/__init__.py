"""
Jumpdest Analysis
^^^^^^^^^^^^^^^^^

The EVM only allows `JUMP` and `JUMPI` to land on a `JUMPDEST` instruction,
and a `0x5B` byte that is the immediate data of a `PUSH-N` instruction is not
an instruction at all. Deciding whether a position is a valid jump destination
therefore needs a scan of the whole code up to that position.

This package computes the set of valid jump destinations, and, more
importantly, checks a set supplied by an untrusted party (a _witness_) for
both correctness and completeness using one sort and one linear pass over the
code. Once checked, the resulting [`ValidJumpDestinations`] answers membership
queries without scanning the code again.

[`ValidJumpDestinations`]: ref:jumpdest.dictionary.ValidJumpDestinations
"""

__version__ = "0.1.0"
