"""
Exceptions
^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Errors raised while checking a witness or querying a verified set of jump
destinations. None of them are recoverable: every one means that the claim
being checked can not be accepted.
"""

from ethereum_types.numeric import Uint


class JumpdestAnalysisException(Exception):
    """
    Base class for all exceptions _expected_ to be thrown during normal
    operation.
    """


class InvalidWitness(JumpdestAnalysisException):
    """
    Thrown when a witness is found to disagree with the code it describes.
    """


class MalformedWitness(InvalidWitness):
    """
    Thrown when witness data can not be decoded into entries.
    """


class ConflictingEntry(InvalidWitness):
    """
    Thrown when a witness holds two entries for the same position with
    different markers.
    """

    position: Uint

    def __init__(self, position: Uint) -> None:
        super().__init__(f"conflicting markers at position {position}")
        self.position = position


class InvalidEntry(InvalidWitness):
    """
    Thrown when a witness claims a position that is not a `JUMPDEST`
    instruction, either because the byte there is something else or because
    it is the immediate data of a `PUSH-N` instruction.
    """

    position: Uint

    def __init__(self, position: Uint) -> None:
        super().__init__(f"position {position} is not a valid jump destination")
        self.position = position


class MissingEntry(InvalidWitness):
    """
    Thrown when the code has a `JUMPDEST` instruction that the witness does
    not list.
    """

    position: Uint

    def __init__(self, position: Uint) -> None:
        super().__init__(f"jump destination {position} missing from witness")
        self.position = position


class OutOfRangeQuery(JumpdestAnalysisException):
    """
    Thrown when a position at or beyond the end of the code is queried.
    """

    position: Uint
    code_length: Uint

    def __init__(self, position: Uint, code_length: Uint) -> None:
        super().__init__(
            f"position {position} is outside code of length {code_length}"
        )
        self.position = position
        self.code_length = code_length
