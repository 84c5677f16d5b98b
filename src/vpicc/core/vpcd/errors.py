"""Failures that end a vpcd session."""

from __future__ import annotations


class VpcdError(Exception):
    """Base class for all vpcd connection failures."""


class TransportError(VpcdError):
    """The stream failed or was closed before a full frame was exchanged."""


class ProtocolError(VpcdError):
    """vpcd sent something the protocol does not allow."""


class EmptyMessageError(ProtocolError):
    """A well-formed frame with a zero length prefix was received."""

    def __init__(self) -> None:
        super().__init__("received an empty message")


class UnknownCommandError(ProtocolError):
    """A one-byte control frame carried an unsupported command code."""

    def __init__(self, code: int) -> None:
        super().__init__(f"unsupported control command {code}")
        self.code = code
