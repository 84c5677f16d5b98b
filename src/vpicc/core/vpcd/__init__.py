from vpicc.core.vpcd.channel import FramedChannel, encode_frame
from vpicc.core.vpcd.command import Command, classify
from vpicc.core.vpcd.connection import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    Connection,
    connect,
    connect_socket,
)
from vpicc.core.vpcd.errors import (
    EmptyMessageError,
    ProtocolError,
    TransportError,
    UnknownCommandError,
    VpcdError,
)

__all__ = [
    "Command",
    "Connection",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "EmptyMessageError",
    "FramedChannel",
    "ProtocolError",
    "TransportError",
    "UnknownCommandError",
    "VpcdError",
    "classify",
    "connect",
    "connect_socket",
    "encode_frame",
]
