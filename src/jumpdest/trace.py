"""
Defines the events emitted while checking a witness and answering queries.

A _trace_ is a log of what happened during an analysis. It is built from a
series of [`TraceEvent`]s passed to [`jumpdest_trace`]. This module does not
store or print anything; a consumer installs its own hook with
[`set_jumpdest_trace`] (the command line tools forward events to logging).

[`TraceEvent`]: ref:jumpdest.trace.TraceEvent
[`jumpdest_trace`]: ref:jumpdest.trace.jumpdest_trace
[`set_jumpdest_trace`]: ref:jumpdest.trace.set_jumpdest_trace
"""

from dataclasses import dataclass
from typing import Protocol, Union

from ethereum_types.numeric import Uint

from .exceptions import InvalidWitness


@dataclass
class WitnessCanonicalized:
    """
    Trace event that is triggered after a witness has been sorted and its
    duplicates merged.
    """

    submitted: int
    """
    Number of entries in the witness as submitted.
    """

    unique: int
    """
    Number of distinct positions that remain.
    """


@dataclass
class JumpdestsFinalized:
    """
    Trace event that is triggered after a witness has been proven correct and
    complete for a piece of code.
    """

    code_length: Uint
    """
    Length of the code the witness was checked against.
    """

    jump_destinations: int
    """
    Number of valid jump destinations found.
    """


@dataclass
class WitnessRejected:
    """
    Trace event that is triggered when a witness fails a check.
    """

    error: InvalidWitness
    """
    The exception that is about to be raised.
    """


@dataclass
class QueryAnswered:
    """
    Trace event that is triggered when a membership query is answered.
    """

    position: Uint
    valid: bool


TraceEvent = Union[
    WitnessCanonicalized,
    JumpdestsFinalized,
    WitnessRejected,
    QueryAnswered,
]
"""
All possible types of events that a [`JumpdestTracer`] is expected to handle.

[`JumpdestTracer`]: ref:jumpdest.trace.JumpdestTracer
"""


def discard_jumpdest_trace(event: TraceEvent) -> None:  # noqa: U100
    """
    Default tracer that ignores every event.
    """
    pass


class JumpdestTracer(Protocol):
    """
    Protocol for the callable that receives trace events.
    """

    def __call__(self, event: TraceEvent, /) -> None:
        """
        Handle a single trace event.
        """


_jumpdest_trace: JumpdestTracer = discard_jumpdest_trace


def set_jumpdest_trace(tracer: JumpdestTracer) -> JumpdestTracer:
    """
    Change the active tracer. Returns the previous tracer so it can be
    restored.
    """
    global _jumpdest_trace
    old = _jumpdest_trace
    _jumpdest_trace = tracer
    return old


def jumpdest_trace(event: TraceEvent) -> None:
    """
    Emit a trace event to the active tracer.
    """
    _jumpdest_trace(event)
