import random

import pytest
from ethereum_types.numeric import Uint

from jumpdest.canonical import canonicalize
from jumpdest.crypto import keccak256
from jumpdest.exceptions import InvalidEntry, MissingEntry
from jumpdest.finalize import finalize
from jumpdest.runtime import get_valid_jump_destinations
from jumpdest.witness import JumpdestEntry, witness_from_positions

from .bytecode_helpers import SEEDS, random_code


def entries(*positions: int) -> tuple:
    return tuple(JumpdestEntry(Uint(p)) for p in positions)


def honest_witness(code: bytes) -> tuple:
    return canonicalize(witness_from_positions(get_valid_jump_destinations(code)))


def test_finalize_empty_code() -> None:
    valid_jump_destinations = finalize(b"", ())
    assert valid_jump_destinations.size() == 0
    assert valid_jump_destinations.code_length == Uint(0)
    assert valid_jump_destinations.code_hash == keccak256(b"")


def test_finalize_jumpdest_after_push() -> None:
    code = bytes([0x5B, 0x60, 0x01, 0x5B])
    valid_jump_destinations = finalize(code, entries(0, 3))
    assert valid_jump_destinations.positions == {Uint(0), Uint(3)}
    assert valid_jump_destinations.code_length == Uint(4)
    assert valid_jump_destinations.code_hash == keccak256(code)


def test_finalize_rejects_push_data() -> None:
    with pytest.raises(InvalidEntry) as excinfo:
        finalize(bytes([0x60, 0x5B]), entries(1))
    assert excinfo.value.position == Uint(1)


def test_finalize_rejects_non_jumpdest_boundary() -> None:
    with pytest.raises(InvalidEntry) as excinfo:
        finalize(bytes([0x5B, 0x00, 0x5B]), entries(0, 1, 2))
    assert excinfo.value.position == Uint(1)


def test_finalize_rejects_entry_past_end() -> None:
    with pytest.raises(InvalidEntry) as excinfo:
        finalize(bytes([0x5B]), entries(0, 1))
    assert excinfo.value.position == Uint(1)


def test_finalize_rejects_entry_on_trailing_push_data() -> None:
    # PUSH2 with only one data byte left: position 1 is data, never a boundary.
    with pytest.raises(InvalidEntry) as excinfo:
        finalize(bytes([0x61, 0x5B]), entries(1))
    assert excinfo.value.position == Uint(1)


def test_finalize_rejects_zero_marker() -> None:
    with pytest.raises(InvalidEntry):
        finalize(bytes([0x5B]), (JumpdestEntry(Uint(0), Uint(0)),))


def test_finalize_rejects_unsorted_witness() -> None:
    code = bytes([0x5B, 0x5B, 0x5B])
    with pytest.raises(InvalidEntry) as excinfo:
        finalize(code, entries(0, 2, 1))
    assert excinfo.value.position == Uint(1)


def test_finalize_rejects_reversed_witness() -> None:
    code = bytes([0x5B, 0x5B, 0x5B])
    with pytest.raises(InvalidEntry) as excinfo:
        finalize(code, entries(2, 1, 0))
    assert excinfo.value.position == Uint(1)


def test_finalize_rejects_duplicated_witness() -> None:
    code = bytes([0x5B, 0x00, 0x5B])
    with pytest.raises(InvalidEntry) as excinfo:
        finalize(code, entries(0, 0, 2))
    assert excinfo.value.position == Uint(0)


def test_finalize_missing_entry() -> None:
    code = bytes([0x5B, 0x60, 0x01, 0x5B])
    with pytest.raises(MissingEntry) as excinfo:
        finalize(code, entries(0))
    assert excinfo.value.position == Uint(3)


def test_finalize_missing_first_entry() -> None:
    code = bytes([0x5B, 0x60, 0x01, 0x5B])
    with pytest.raises(MissingEntry) as excinfo:
        finalize(code, entries(3))
    assert excinfo.value.position == Uint(0)


def test_finalize_dangling_push() -> None:
    assert finalize(bytes([0x60]), ()).size() == 0


@pytest.mark.parametrize("seed", SEEDS)
def test_scan_and_finalize_agree(seed: int) -> None:
    code = random_code(random.Random(seed))
    valid_jump_destinations = finalize(code, honest_witness(code))
    assert set(valid_jump_destinations.positions) == get_valid_jump_destinations(code)


@pytest.mark.parametrize("seed", SEEDS)
def test_finalize_rejects_any_bogus_position(seed: int) -> None:
    rng = random.Random(seed)
    code = random_code(rng)
    valid = get_valid_jump_destinations(code)
    bogus = [Uint(p) for p in range(len(code) + 3) if Uint(p) not in valid]
    position = rng.choice(bogus)

    witness = witness_from_positions(list(valid) + [position])
    with pytest.raises(InvalidEntry) as excinfo:
        finalize(code, canonicalize(witness))
    assert excinfo.value.position == position


@pytest.mark.parametrize("seed", SEEDS)
def test_finalize_rejects_any_omission(seed: int) -> None:
    rng = random.Random(seed)
    code = random_code(rng)
    valid = sorted(get_valid_jump_destinations(code))
    if not valid:
        # Enough STOPs to run past any unfinished push data.
        code = code + bytes(32) + bytes([0x5B])
        valid = sorted(get_valid_jump_destinations(code))
    omitted = rng.choice(valid)

    witness = witness_from_positions(p for p in valid if p != omitted)
    with pytest.raises(MissingEntry) as excinfo:
        finalize(code, canonicalize(witness))
    assert excinfo.value.position == omitted
