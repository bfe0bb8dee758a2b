"""
Jump Destination Queries
^^^^^^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Membership checks against a verified set of jump destinations. A query is a
single lookup; it is only sound because [`finalize`] already proved the set
correct and complete for its code.

[`finalize`]: ref:jumpdest.finalize.finalize
"""
from typing import Optional

from ethereum_types.numeric import Uint

from .config import DEFAULT_CONFIG, AnalysisConfig, OutOfRangePolicy
from .dictionary import ValidJumpDestinations
from .exceptions import OutOfRangeQuery
from .trace import QueryAnswered, jumpdest_trace


def is_valid_jump_destination(
    valid_jump_destinations: ValidJumpDestinations,
    position: Uint,
    config: Optional[AnalysisConfig] = None,
) -> bool:
    """
    Check whether `position` is a valid jump destination.

    Parameters
    ----------
    valid_jump_destinations :
        Destinations produced by `finalize` for the code being executed.

    position :
        The position to check.

    config :
        Settings to apply; `OUT_OF_RANGE_POLICY` decides what happens for a
        position at or past the end of the code.

    Returns
    -------
    is_valid : `bool`
        `True` if the position is a `JUMPDEST` instruction.

    Raises
    ------
    OutOfRangeQuery
        If the position is out of range and the policy is
        `OutOfRangePolicy.RAISE`.
    """
    if config is None:
        config = DEFAULT_CONFIG
    position = Uint(position)

    if position >= valid_jump_destinations.code_length:
        if config.OUT_OF_RANGE_POLICY == OutOfRangePolicy.RAISE:
            raise OutOfRangeQuery(
                position, valid_jump_destinations.code_length
            )
        is_valid = False
    else:
        is_valid = valid_jump_destinations.contains(position)

    jumpdest_trace(QueryAnswered(position, is_valid))
    return is_valid
