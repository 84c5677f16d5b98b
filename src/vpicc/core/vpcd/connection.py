"""Connection to the vpcd daemon.

One Connection drives one virtual card. Each ``poll`` reads a single
frame from vpcd and answers it through the card:

- a 1-byte frame is a control command (power off/on, reset, get ATR);
- a longer frame is a command APDU, answered with ``card.execute``;
- an empty frame is a protocol error.

Any failure is final: the connection is not usable afterwards and the
caller decides whether to reconnect.
"""

from __future__ import annotations

import logging
import socket
from typing import NoReturn

from vpicc.core.smartcard.card import VSmartCard
from vpicc.core.smartcard.logging import PROTOCOL
from vpicc.core.vpcd.channel import FramedChannel
from vpicc.core.vpcd.command import CONTROL_LEN, Command, classify
from vpicc.core.vpcd.errors import EmptyMessageError, TransportError, VpcdError

lg = logging.getLogger(__name__)

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 35963


class Connection:
    """A connection to the vpcd daemon, owning its socket."""

    def __init__(self, sock: socket.socket) -> None:
        self._channel = FramedChannel(sock)

    @property
    def closed(self) -> bool:
        return self._channel.closed

    def __enter__(self) -> Connection:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the socket; the session ends."""
        if not self._channel.closed:
            lg.debug("closing connection")
        self._channel.close()

    def run(self, card: VSmartCard) -> NoReturn:
        """Handle all commands using the given card until a poll fails.

        The connection is closed and the failure re-raised.
        """
        try:
            while True:
                self.poll(card)
        finally:
            self.close()

    def poll(self, card: VSmartCard) -> None:
        """Handle a single frame from vpcd using the given card.

        A transport or protocol failure closes the connection for good.
        """
        try:
            msg = self._channel.read_frame()
            if not msg:
                raise EmptyMessageError()

            if len(msg) == CONTROL_LEN:
                self._control(card, classify(msg[0]))
            else:
                lg.log(PROTOCOL, "APDU received (%d bytes)", len(msg))
                response = bytes(card.execute(msg))
                self._channel.write_frame(response)
        except VpcdError:
            self.close()
            raise

    def _control(self, card: VSmartCard, command: Command) -> None:
        lg.log(PROTOCOL, "%s", command.name)
        if command is Command.POWER_OFF:
            card.power_off()
        elif command is Command.POWER_ON:
            card.power_on()
        elif command is Command.RESET:
            card.reset()
        elif command is Command.GET_ATR:
            self._channel.write_frame(bytes(card.atr()))


def connect_socket(address: tuple[str, int], timeout: float | None = None) -> Connection:
    """Connect to the vpcd daemon at the given (host, port) address."""
    host, port = address
    lg.info("connecting to vpcd on %s:%d", host, port)
    try:
        sock = socket.create_connection((host, port), timeout=timeout)
    except OSError as exc:
        raise TransportError(f"cannot connect to vpcd on {host}:{port}: {exc}") from exc
    return Connection(sock)


def connect(
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
    timeout: float | None = None,
) -> Connection:
    """Connect to the vpcd daemon, by default on DEFAULT_HOST:DEFAULT_PORT."""
    return connect_socket((host, port), timeout=timeout)
