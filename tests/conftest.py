from typing import Iterator

import pytest

from jumpdest.trace import discard_jumpdest_trace, set_jumpdest_trace


@pytest.fixture(autouse=True)
def reset_jumpdest_trace() -> Iterator[None]:
    """
    Restore the default tracer after every test, since the command line
    tools and some tests install their own.
    """
    yield
    set_jumpdest_trace(discard_jumpdest_trace)
