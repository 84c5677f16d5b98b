"""Relay card: exposes a physical card from a local PC/SC reader to vpcd."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from smartcard.Exceptions import SmartcardException
from smartcard.System import readers

from vpicc.core.smartcard.card import VSmartCard
from vpicc.core.smartcard.logging import PROTOCOL
from vpicc.core.smartcard.types import Response

if TYPE_CHECKING:
    from smartcard.CardConnection import CardConnection
    from smartcard.reader.Reader import Reader

lg = logging.getLogger(__name__)

# 6F00: no precise diagnosis
SW_NO_PRECISE_DIAGNOSIS = Response(data=b"", sw1=0x6F, sw2=0x00)


class PcscRelayCard(VSmartCard):
    """Forward power events and APDUs to a real card through pyscard.

    ``reader`` selects a reader by (sub)name; when omitted the first
    reader holding a card is used.
    """

    def __init__(self, reader: str | None = None) -> None:
        self._reader_name = reader
        self._connection: CardConnection | None = None

    @property
    def connected(self) -> bool:
        return self._connection is not None

    @staticmethod
    def list_readers() -> list[Reader]:
        return readers()

    def _candidates(self) -> list[Reader]:
        available = self.list_readers()
        if not available:
            raise RuntimeError("no readers found")
        if self._reader_name is None:
            return available
        matching = [r for r in available if self._reader_name in str(r)]
        if not matching:
            raise RuntimeError(f"reader not found: {self._reader_name}")
        return matching

    def _connect(self) -> CardConnection:
        if self._connection is not None:
            return self._connection
        for reader in self._candidates():
            connection = reader.createConnection()
            try:
                connection.connect()
            except SmartcardException:
                lg.debug("no card on %s", reader)
                continue
            lg.log(PROTOCOL, "connected to %s", reader)
            self._connection = connection
            return connection
        raise RuntimeError("no card found on any reader")

    def _disconnect(self) -> None:
        if self._connection is not None:
            try:
                self._connection.disconnect()
            except SmartcardException as exc:
                lg.warning("disconnect failed: %s", exc)
            self._connection = None

    def atr(self) -> bytes:
        """ATR of the physical card, or DEFAULT_ATR when none is reachable."""
        try:
            return bytes(self._connect().getATR())
        except (RuntimeError, SmartcardException) as exc:
            lg.error("cannot read ATR: %s", exc)
            return super().atr()

    def power_on(self) -> None:
        try:
            self._connect()
        except (RuntimeError, SmartcardException) as exc:
            lg.error("power on failed: %s", exc)

    def power_off(self) -> None:
        self._disconnect()

    def reset(self) -> None:
        self._disconnect()
        self.power_on()

    def execute(self, apdu: bytes) -> bytes:
        try:
            connection = self._connect()
            data, sw1, sw2 = connection.transmit(list(apdu))
        except (RuntimeError, SmartcardException) as exc:
            lg.error("relay failed: %s", exc)
            self._disconnect()
            return SW_NO_PRECISE_DIAGNOSIS.to_bytes()
        response = Response(data=bytes(data), sw1=sw1, sw2=sw2)
        lg.log(PROTOCOL, "relayed %s -> %r", apdu.hex().upper(), response)
        return response.to_bytes()
