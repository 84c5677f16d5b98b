"""Length-prefixed framing over a stream socket.

Frame layout::

    +-----------------+--------------------+
    | Length          | Payload            |
    | 2 bytes, BE u16 | ``Length`` bytes   |
    +-----------------+--------------------+

The channel knows nothing about commands or APDUs; it moves whole frames.
"""

from __future__ import annotations

import logging
import socket
import struct

from vpicc.core.smartcard.logging import log_hex
from vpicc.core.vpcd.errors import TransportError

lg = logging.getLogger(__name__)

LENGTH_PREFIX = struct.Struct(">H")
MAX_PAYLOAD = 0xFFFF


def encode_frame(payload: bytes) -> bytes:
    """Prefix payload with its 2-byte big-endian length."""
    if len(payload) > MAX_PAYLOAD:
        raise ValueError(f"payload too long for one frame: {len(payload)} bytes")
    return LENGTH_PREFIX.pack(len(payload)) + payload


class FramedChannel:
    """Reads and writes whole frames on a connected socket it owns."""

    def __init__(self, sock: socket.socket) -> None:
        self._sock: socket.socket | None = sock

    @property
    def closed(self) -> bool:
        return self._sock is None

    def _socket(self) -> socket.socket:
        if self._sock is None:
            raise TransportError("connection is closed")
        return self._sock

    def _read_exact(self, size: int) -> bytes:
        sock = self._socket()
        buf = bytearray()
        while len(buf) < size:
            try:
                chunk = sock.recv(size - len(buf))
            except OSError as exc:
                raise TransportError(f"read failed: {exc}") from exc
            if not chunk:
                raise TransportError(
                    f"connection closed by vpcd ({len(buf)} of {size} bytes read)"
                )
            buf += chunk
        return bytes(buf)

    def read_frame(self) -> bytes:
        """Read one frame and return its payload."""
        (size,) = LENGTH_PREFIX.unpack(self._read_exact(LENGTH_PREFIX.size))
        payload = self._read_exact(size)
        log_hex(lg, ">> ", payload)
        return payload

    def write_frame(self, payload: bytes) -> None:
        """Write payload as one frame, failing unless every byte is sent."""
        frame = encode_frame(payload)
        log_hex(lg, "<< ", payload)
        try:
            self._socket().sendall(frame)
        except OSError as exc:
            raise TransportError(f"write failed: {exc}") from exc

    def close(self) -> None:
        if self._sock is None:
            return
        sock, self._sock = self._sock, None
        try:
            sock.shutdown(socket.SHUT_RDWR)
        except OSError:
            lg.debug("socket already disconnected")
        sock.close()
