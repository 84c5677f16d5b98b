"""Virtual smartcard behavior plugged into a vpcd connection.

A card answers the reader-level events sent by vpcd (power off, power on,
reset, ATR request) and the APDUs forwarded from PC/SC applications. The
connection only ever calls into the card; it never inspects what the card
returns.

Subclass VSmartCard and implement ``execute``. Everything else has a
default: ``atr`` returns DEFAULT_ATR and the power hooks do nothing.
"""

from __future__ import annotations

import logging

from vpicc.core.smartcard.types import Response

lg = logging.getLogger(__name__)

DEFAULT_ATR = bytes.fromhex("3B 95 13 81 01 80 73 FF 01 00 0B")


class VSmartCard:
    """Base class for virtual smartcards.

    See https://frankmorgner.github.io/vsmartcard/virtualsmartcard/api.html
    for the daemon side of the protocol.
    """

    def atr(self) -> bytes:
        """The ATR advertised to vpcd, defaulting to DEFAULT_ATR."""
        return DEFAULT_ATR

    def power_on(self) -> None:
        """Handle a Power On command."""

    def power_off(self) -> None:
        """Handle a Power Off command."""

    def reset(self) -> None:
        """Handle a Reset command."""

    def execute(self, apdu: bytes) -> bytes:
        """Execute a command APDU and return the response APDU."""
        raise NotImplementedError(f"{type(self).__name__} does not implement execute()")


class DummySmartCard(VSmartCard):
    """Card that logs every event and answers each APDU with 90 00."""

    def power_on(self) -> None:
        lg.info("power on")

    def power_off(self) -> None:
        lg.info("power off")

    def reset(self) -> None:
        lg.info("reset")

    def execute(self, apdu: bytes) -> bytes:
        lg.info("received APDU: %s", apdu.hex(" ").upper())
        return Response(data=b"", sw1=0x90, sw2=0x00).to_bytes()
