from __future__ import annotations

from enum import IntEnum

from vpicc.core.vpcd.errors import UnknownCommandError

# Length of a control frame; any longer frame is an APDU.
CONTROL_LEN = 1


class Command(IntEnum):
    """vpcd control commands, one byte on the wire."""

    POWER_OFF = 0
    POWER_ON = 1
    RESET = 2
    GET_ATR = 4


def classify(code: int) -> Command:
    """Decode a control byte, raising UnknownCommandError for other values."""
    try:
        return Command(code)
    except ValueError:
        raise UnknownCommandError(code) from None
