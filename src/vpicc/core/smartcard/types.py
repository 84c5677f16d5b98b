from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Response:
    """ISO 7816 response APDU."""

    data: bytes
    sw1: int
    sw2: int

    @property
    def sw(self) -> int:
        return (self.sw1 << 8) | self.sw2

    def to_bytes(self) -> bytes:
        return self.data + bytes([self.sw1, self.sw2])

    def __repr__(self) -> str:
        sw = f"SW={self.sw:04X}"
        if self.data:
            return f"{self.data.hex(' ').upper()} {sw}"
        return sw
