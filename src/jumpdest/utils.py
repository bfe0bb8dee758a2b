"""
Utility Functions
^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Assertion and decoding helpers shared by the analysis passes and the tools.
"""

from typing import Callable, Union

from ethereum_types.bytes import Bytes
from ethereum_types.numeric import Uint


def ensure(
    value: bool, exception: Union[Callable[[], BaseException], BaseException]
) -> None:
    """
    Raise `exception` unless `value` is truthy.

    Every rejection in the analysis goes through here, so a failed check is
    never turned into a silently wrong answer.

    Parameters
    ----------
    value :
        Condition that must hold.

    exception :
        Exception (or zero argument callable producing one) to raise when the
        condition does not hold.
    """
    if value:
        return
    if isinstance(exception, BaseException):
        raise exception
    raise exception()


def hex_to_bytes(hex_string: str) -> Bytes:
    """
    Convert a hex string, with or without a `0x` prefix, to bytes.

    Parameters
    ----------
    hex_string :
        The hexadecimal string to be converted.

    Returns
    -------
    converted : `ethereum_types.bytes.Bytes`
        Byte representation of the input.
    """
    hex_string = hex_string.strip()
    if hex_string.startswith(("0x", "0X")):
        hex_string = hex_string[2:]
    return Bytes(bytes.fromhex(hex_string))


def parse_uint(value: Union[int, str]) -> Uint:
    """
    Read a `Uint` from an int, a decimal string or a `0x` hex string.

    Raises `ValueError` for text that is not a number, `TypeError` for
    other types (`bool` included) and `OverflowError` for negative values.
    """
    if isinstance(value, bool):
        raise TypeError(f"expected an integer, got {value!r}")
    if isinstance(value, str):
        if value.startswith(("0x", "0X")):
            return Uint(int(value[2:], 16))
        return Uint(int(value, 10))
    if isinstance(value, int):
        return Uint(value)
    raise TypeError(f"expected an integer, got {value!r}")
