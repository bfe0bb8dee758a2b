from typing import List

import pytest
from ethereum_types.numeric import Uint

from jumpdest.analysis import analyze_jump_destinations
from jumpdest.exceptions import ConflictingEntry, InvalidEntry, MissingEntry
from jumpdest.trace import (
    JumpdestsFinalized,
    QueryAnswered,
    TraceEvent,
    WitnessCanonicalized,
    WitnessRejected,
    discard_jumpdest_trace,
    set_jumpdest_trace,
)
from jumpdest.verify import is_valid_jump_destination
from jumpdest.witness import JumpdestEntry

CODE = bytes([0x5B, 0x60, 0x01, 0x5B])


def test_analyze_without_witness() -> None:
    valid_jump_destinations = analyze_jump_destinations(CODE)
    assert list(valid_jump_destinations) == [Uint(0), Uint(3)]
    assert len(valid_jump_destinations) == 2
    assert 3 in valid_jump_destinations
    assert Uint(0) in valid_jump_destinations
    assert 2 not in valid_jump_destinations
    assert -1 not in valid_jump_destinations
    assert "0" not in valid_jump_destinations


def test_analyze_with_messy_witness() -> None:
    witness = [
        JumpdestEntry(Uint(3)),
        JumpdestEntry(Uint(0)),
        JumpdestEntry(Uint(3)),
    ]
    valid_jump_destinations = analyze_jump_destinations(CODE, witness)
    assert valid_jump_destinations == analyze_jump_destinations(CODE)


@pytest.mark.parametrize(
    "witness, error",
    [
        pytest.param(
            [JumpdestEntry(Uint(0), Uint(1)), JumpdestEntry(Uint(0), Uint(2))],
            ConflictingEntry,
            id="conflicting",
        ),
        pytest.param(
            [JumpdestEntry(Uint(0)), JumpdestEntry(Uint(2)), JumpdestEntry(Uint(3))],
            InvalidEntry,
            id="push_data",
        ),
        pytest.param([JumpdestEntry(Uint(3))], MissingEntry, id="missing"),
    ],
)
def test_analyze_rejections(witness, error) -> None:
    with pytest.raises(error):
        analyze_jump_destinations(CODE, witness)


def test_analysis_is_deterministic() -> None:
    first = analyze_jump_destinations(CODE)
    second = analyze_jump_destinations(bytes(CODE))
    assert first == second
    assert hash(first.positions) == hash(second.positions)


def test_different_code_gives_different_hash() -> None:
    first = analyze_jump_destinations(bytes([0x5B, 0x00]))
    second = analyze_jump_destinations(bytes([0x5B, 0x01]))
    assert first.positions == second.positions
    assert first.code_hash != second.code_hash
    assert first != second


def test_verified_destinations_are_immutable() -> None:
    valid_jump_destinations = analyze_jump_destinations(CODE)
    with pytest.raises(AttributeError):
        valid_jump_destinations.positions = frozenset()  # type: ignore


def test_trace_events() -> None:
    events: List[TraceEvent] = []

    old = set_jumpdest_trace(events.append)
    assert old is discard_jumpdest_trace

    valid_jump_destinations = analyze_jump_destinations(
        CODE, [JumpdestEntry(Uint(3)), JumpdestEntry(Uint(0)), JumpdestEntry(Uint(0))]
    )
    is_valid_jump_destination(valid_jump_destinations, Uint(3))

    assert events == [
        WitnessCanonicalized(submitted=3, unique=2),
        JumpdestsFinalized(code_length=Uint(4), jump_destinations=2),
        QueryAnswered(position=Uint(3), valid=True),
    ]


def test_trace_rejection() -> None:
    events: List[TraceEvent] = []
    set_jumpdest_trace(events.append)

    with pytest.raises(MissingEntry) as excinfo:
        analyze_jump_destinations(CODE, [])

    assert isinstance(events[-1], WitnessRejected)
    assert events[-1].error is excinfo.value
