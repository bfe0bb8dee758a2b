"""
Command line interface for jump destination analysis.

Example: List the jump destinations of a contract

    jumpdest scan 0x5b600156005b

Example: Check a witness produced elsewhere

    jumpdest verify 0x5b600156005b witness.json
"""

import json
from typing import IO, Optional, Tuple

import click
from ethereum_types.bytes import Bytes

from jumpdest import __version__
from jumpdest.analysis import analyze_jump_destinations
from jumpdest.config import AnalysisConfig, OutOfRangePolicy
from jumpdest.dictionary import ValidJumpDestinations
from jumpdest.exceptions import JumpdestAnalysisException
from jumpdest.runtime import get_valid_jump_destinations
from jumpdest.trace import (
    JumpdestsFinalized,
    QueryAnswered,
    TraceEvent,
    WitnessCanonicalized,
    WitnessRejected,
    set_jumpdest_trace,
)
from jumpdest.utils import hex_to_bytes, parse_uint
from jumpdest.verify import is_valid_jump_destination
from jumpdest.witness import dump_witness, load_witness, witness_from_positions

from .logging import LogLevel, configure_logging, get_logger

logger = get_logger(__name__)


def log_trace_event(event: TraceEvent) -> None:
    """Forward analysis trace events to the tool's logger."""
    if isinstance(event, WitnessCanonicalized):
        logger.verbose(
            "Canonicalized witness: %d entries, %d unique positions",
            event.submitted,
            event.unique,
        )
    elif isinstance(event, JumpdestsFinalized):
        logger.info(
            "Verified %d jump destinations in %s bytes of code",
            event.jump_destinations,
            event.code_length,
        )
    elif isinstance(event, WitnessRejected):
        logger.warning("Witness rejected: %s", event.error)
    elif isinstance(event, QueryAnswered):
        logger.verbose("Query %s -> %s", event.position, event.valid)


class HexBytes(click.ParamType):
    """Click parameter for EVM code given as a hex string."""

    name = "hex_string"

    def convert(self, value, param, ctx) -> Bytes:  # noqa: D102
        if isinstance(value, bytes):
            return value
        try:
            return hex_to_bytes(value)
        except ValueError as e:
            self.fail(f"{value!r} is not a hex string: {e}", param, ctx)


class Position(click.ParamType):
    """Click parameter for a code position, decimal or 0x hex."""

    name = "position"

    def convert(self, value, param, ctx):  # noqa: D102
        try:
            return parse_uint(value)
        except (ValueError, TypeError, OverflowError):
            self.fail(f"{value!r} is not a non-negative integer", param, ctx)


def _read_witness(witness_file: IO[str]):
    try:
        data = json.load(witness_file)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"invalid JSON: {e}", param_hint="WITNESS_FILE")
    return load_witness(data)


def _analyze(code: Bytes, witness_file: Optional[IO[str]]) -> ValidJumpDestinations:
    try:
        witness = _read_witness(witness_file) if witness_file is not None else None
        return analyze_jump_destinations(code, witness)
    except JumpdestAnalysisException as e:
        raise click.ClickException(f"{type(e).__name__}: {e}")


@click.group("jumpdest", context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(__version__, "-v", "--version")
@click.option(
    "--log-level",
    default="WARNING",
    show_default=True,
    help="Logging level: DEBUG, VERBOSE, INFO, WARNING, ERROR or CRITICAL.",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Also write log output to this file.",
)
def jumpdest(log_level: str, log_file: Optional[str]):
    """
    Find and verify the valid jump destinations of EVM code.

    Code is given as a hex string, with or without a 0x prefix.
    """
    try:
        level = LogLevel.from_cli(log_level)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--log-level")
    configure_logging(log_level=level, log_file=log_file)
    set_jumpdest_trace(log_trace_event)


@jumpdest.command(short_help="List the jump destinations found by a scan.")
@click.argument("code", type=HexBytes())
def scan(code: Bytes):
    """
    Scan CODE and print its jump destinations as a JSON array.

    The scan is not a proof; use `verify` to check a witness.
    """
    positions = sorted(get_valid_jump_destinations(code))
    logger.info("Scanned %d bytes, found %d jump destinations", len(code), len(positions))
    click.echo(json.dumps([int(position) for position in positions]))


@jumpdest.command(short_help="Print a witness for the code.")
@click.argument("code", type=HexBytes())
def witness(code: Bytes):
    """
    Print a witness for CODE as a JSON array of [position, marker] pairs.
    """
    entries = witness_from_positions(sorted(get_valid_jump_destinations(code)))
    click.echo(json.dumps(dump_witness(entries)))


@jumpdest.command(short_help="Check a witness against the code.")
@click.argument("code", type=HexBytes())
@click.argument("witness_file", type=click.File("r"))
def verify(code: Bytes, witness_file: IO[str]):
    """
    Check the witness in WITNESS_FILE against CODE.

    WITNESS_FILE holds JSON, use `-` to read from stdin. On success the
    number of jump destinations and the code hash are printed; otherwise the
    reason for rejection is printed and the exit status is 1.
    """
    valid_jump_destinations = _analyze(code, witness_file)
    click.echo(
        json.dumps(
            {
                "code_hash": "0x" + valid_jump_destinations.code_hash.hex(),
                "jump_destinations": [int(p) for p in valid_jump_destinations],
                "size": valid_jump_destinations.size(),
            }
        )
    )


@jumpdest.command(short_help="Check whether positions are valid jump destinations.")
@click.option(
    "--witness",
    "witness_file",
    type=click.File("r"),
    default=None,
    help="Witness to verify and use instead of scanning the code.",
)
@click.option(
    "--out-of-range",
    type=click.Choice([policy.value for policy in OutOfRangePolicy]),
    default=OutOfRangePolicy.RAISE.value,
    show_default=True,
    help="Answer for positions past the end of the code.",
)
@click.argument("code", type=HexBytes())
@click.argument("positions", type=Position(), nargs=-1, required=True)
def query(
    witness_file: Optional[IO[str]],
    out_of_range: str,
    code: Bytes,
    positions: Tuple,
):
    """
    Print `true` or `false` for each of POSITIONS in CODE, one per line.
    """
    config = AnalysisConfig(OUT_OF_RANGE_POLICY=OutOfRangePolicy(out_of_range))
    valid_jump_destinations = _analyze(code, witness_file)
    for position in positions:
        try:
            is_valid = is_valid_jump_destination(valid_jump_destinations, position, config)
        except JumpdestAnalysisException as e:
            raise click.ClickException(f"{type(e).__name__}: {e}")
        click.echo("true" if is_valid else "false")


if __name__ == "__main__":
    jumpdest()
