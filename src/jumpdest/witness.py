"""
Witness
^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

A witness is the list of jump destinations that some untrusted party claims a
piece of code has. It arrives in any order and may repeat itself. Nothing in
this module checks a witness against code; see [`canonicalize`] and
[`finalize`] for that.

[`canonicalize`]: ref:jumpdest.canonical.canonicalize
[`finalize`]: ref:jumpdest.finalize.finalize
"""

from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Tuple, Union

from ethereum_types.numeric import Uint

from .exceptions import MalformedWitness
from .utils import parse_uint

JUMPDEST_MARKER = Uint(1)
"""
Marker used for entries built by this package. Any non-zero marker means
"claimed valid", but the value itself is never interpreted.
"""


@dataclass(frozen=True)
class JumpdestEntry:
    """
    A single claim that `position` is a valid jump destination.
    """

    position: Uint
    """
    Zero-based offset into the code.
    """

    marker: Uint = JUMPDEST_MARKER
    """
    Non-zero tag meaning "claimed valid". Two entries for the same position
    must carry the same marker.
    """

    def __post_init__(self) -> None:
        # Coerce plain ints; `Uint` rejects negatives with `OverflowError`.
        object.__setattr__(self, "position", Uint(self.position))
        object.__setattr__(self, "marker", Uint(self.marker))


def witness_from_positions(
    positions: Iterable[Uint], marker: Uint = JUMPDEST_MARKER
) -> List[JumpdestEntry]:
    """
    Build a witness that claims each of `positions`.

    This is how an honest prover turns the output of
    [`get_valid_jump_destinations`] into something that can be checked.

    [`get_valid_jump_destinations`]: ref:jumpdest.runtime.get_valid_jump_destinations
    """  # noqa: E501
    return [JumpdestEntry(position, marker) for position in positions]


def _decode_entry(item: Any) -> JumpdestEntry:
    if isinstance(item, (list, tuple)):
        if len(item) != 2:
            raise MalformedWitness(f"expected [position, marker], got {item!r}")
        position, marker = item
        return JumpdestEntry(parse_uint(position), parse_uint(marker))
    return JumpdestEntry(parse_uint(item))


def load_witness(
    data: Union[Mapping[str, Any], List[Any]]
) -> List[JumpdestEntry]:
    """
    Decode witness data that has already been parsed from JSON.

    Three shapes are accepted:
        * A mapping from position to marker, e.g. `{"0": 1, "0x3": 1}`.
        * A list of `[position, marker]` pairs. Unlike a mapping, this form
          can repeat a position.
        * A list of bare positions, each with the default marker.

    Positions and markers may be integers, decimal strings or `0x` prefixed
    hex strings.

    Parameters
    ----------
    data :
        The decoded JSON value.

    Returns
    -------
    witness : `List[JumpdestEntry]`
        The entries, in the order they were given.

    Raises
    ------
    MalformedWitness
        If `data` does not have one of the shapes above, or holds values that
        are not non-negative integers.
    """
    try:
        if isinstance(data, Mapping):
            return [
                JumpdestEntry(parse_uint(position), parse_uint(marker))
                for position, marker in data.items()
            ]
        if isinstance(data, list):
            return [_decode_entry(item) for item in data]
    except (ValueError, TypeError, OverflowError) as e:
        raise MalformedWitness(str(e) or repr(e)) from e

    raise MalformedWitness(
        f"expected a JSON object or array, got {type(data).__name__}"
    )


def dump_witness(witness: Iterable[JumpdestEntry]) -> List[Tuple[int, int]]:
    """
    Encode `witness` as a JSON-compatible list of `[position, marker]` pairs.
    """
    return [(int(entry.position), int(entry.marker)) for entry in witness]
