# filename : main.py
# created  : 10/17/2026


import logging

from vpicc.core.smartcard import DummySmartCard, VSmartCard
from vpicc.core.smartcard.relay import PcscRelayCard
from vpicc.core.vpcd import DEFAULT_HOST, DEFAULT_PORT, TransportError, connect

lg = logging.getLogger(__name__)

_CARDS = {
    "dummy": lambda reader: DummySmartCard(),
    "relay": lambda reader: PcscRelayCard(reader),
}


def session(
    card: VSmartCard,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
    timeout: float | None = None,
) -> bool:
    """Attach a card to vpcd and serve it until the session ends.

    Returns True when vpcd closed the connection, False on any other failure.
    """
    try:
        conn = connect(host, port, timeout=timeout)
    except TransportError as exc:
        lg.error("%s", exc)
        return False

    try:
        conn.run(card)
    except TransportError as exc:
        lg.info("session ended: %s", exc)
        return True
    except Exception as exc:
        lg.error("session failed: %s", exc)
        return False
    finally:
        conn.close()


def main(
    card: str = "dummy",
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
    reader: str | None = None,
    timeout: float | None = None,
) -> bool:
    lg.debug("vpicc v1")
    return session(_CARDS[card](reader), host=host, port=port, timeout=timeout)
