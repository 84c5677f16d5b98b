"""Attach a virtual smartcard to a vpcd daemon.

Subclass VSmartCard, implement ``execute`` and run it::

    import vpicc

    class Card(vpicc.VSmartCard):
        def execute(self, apdu: bytes) -> bytes:
            return b"\x90\x00"

    vpicc.connect().run(Card())
"""

from vpicc.core.smartcard import DEFAULT_ATR, DummySmartCard, Response, VSmartCard
from vpicc.core.vpcd import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    Command,
    Connection,
    EmptyMessageError,
    ProtocolError,
    TransportError,
    UnknownCommandError,
    VpcdError,
    connect,
    connect_socket,
)

__all__ = [
    "Command",
    "Connection",
    "DEFAULT_ATR",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "DummySmartCard",
    "EmptyMessageError",
    "ProtocolError",
    "Response",
    "TransportError",
    "UnknownCommandError",
    "VSmartCard",
    "VpcdError",
    "connect",
    "connect_socket",
]
