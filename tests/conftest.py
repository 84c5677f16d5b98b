"""Shared fixtures: a connected socket pair standing in for vpcd."""

import socket

import pytest


@pytest.fixture
def sockets():
    """Return (engine_side, vpcd_side) connected stream sockets."""
    engine, vpcd = socket.socketpair()
    engine.settimeout(5)
    vpcd.settimeout(5)
    yield engine, vpcd
    engine.close()
    vpcd.close()


def recv_all(sock: socket.socket, size: int) -> bytes:
    """Read exactly size bytes from sock."""
    buf = b""
    while len(buf) < size:
        chunk = sock.recv(size - len(buf))
        assert chunk, "peer closed early"
        buf += chunk
    return buf
