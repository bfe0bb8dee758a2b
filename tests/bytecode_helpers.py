"""
Code generation shared by the tests.
"""

import random
from typing import List

from ethereum_types.bytes import Bytes

from jumpdest.instructions import Ops

# Weighted so that jump destinations and push data, including `0x5B` bytes
# hiding inside push data, show up often.
INTERESTING_BYTES = [
    Ops.JUMPDEST.value,
    Ops.JUMPDEST.value,
    Ops.JUMPDEST.value,
    Ops.PUSH1.value,
    Ops.PUSH2.value,
    Ops.PUSH4.value,
    Ops.PUSH32.value,
    Ops.PUSH0.value,
    Ops.STOP.value,
    Ops.JUMP.value,
    Ops.JUMPI.value,
    0x0C,  # undefined
]


def random_code(rng: random.Random, max_length: int = 96) -> Bytes:
    """
    Generate code of random length that mixes interesting and arbitrary bytes.
    """
    length = rng.randint(0, max_length)
    code: List[int] = []
    for _ in range(length):
        if rng.random() < 0.6:
            code.append(rng.choice(INTERESTING_BYTES))
        else:
            code.append(rng.randrange(256))
    return bytes(code)


SEEDS = list(range(64))
