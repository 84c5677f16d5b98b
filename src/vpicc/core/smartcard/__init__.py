from vpicc.core.smartcard.card import DEFAULT_ATR, DummySmartCard, VSmartCard
from vpicc.core.smartcard.logging import PROTOCOL, TRACE
from vpicc.core.smartcard.types import Response

__all__ = ["DEFAULT_ATR", "DummySmartCard", "PROTOCOL", "Response", "TRACE", "VSmartCard"]
