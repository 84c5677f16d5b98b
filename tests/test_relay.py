"""Tests for the PC/SC relay card with pyscard mocked out."""

from unittest.mock import MagicMock, patch

import pytest
from smartcard.Exceptions import CardConnectionException, NoCardException

from vpicc.core.smartcard import DEFAULT_ATR
from vpicc.core.smartcard.relay import PcscRelayCard

ATR = [0x3B, 0x8F, 0x80, 0x01]


def make_reader(name, connection=None):
    reader = MagicMock()
    reader.__str__.return_value = name
    reader.createConnection.return_value = connection or make_connection()
    return reader


def make_connection(data=(), sw1=0x90, sw2=0x00):
    connection = MagicMock()
    connection.getATR.return_value = ATR
    connection.transmit.return_value = (list(data), sw1, sw2)
    return connection


@pytest.fixture
def readers():
    with patch("vpicc.core.smartcard.relay.readers") as mock:
        yield mock


def test_atr_from_physical_card(readers):
    """atr connects to the first reader and returns the card's ATR."""
    readers.return_value = [make_reader("ACS ACR122U 00 00")]
    card = PcscRelayCard()
    assert card.atr() == bytes(ATR)
    assert card.connected


def test_execute_relays_apdu(readers):
    """execute transmits the APDU and returns data + SW."""
    connection = make_connection(data=[0x6F, 0x00], sw1=0x90, sw2=0x00)
    readers.return_value = [make_reader("Reader 0", connection)]
    card = PcscRelayCard()
    card.power_on()
    assert card.execute(b"\x00\xA4\x04\x00") == b"\x6F\x00\x90\x00"
    connection.transmit.assert_called_once_with([0x00, 0xA4, 0x04, 0x00])


def test_reader_by_name(readers):
    """A reader name selects the matching reader only."""
    first = make_reader("Yubico YubiKey 00 00")
    second = make_reader("ACS ACR122U 01 00")
    readers.return_value = [first, second]
    card = PcscRelayCard(reader="ACR122U")
    card.power_on()
    first.createConnection.assert_not_called()
    second.createConnection.assert_called_once()


def test_skips_empty_reader(readers):
    """Readers without a card are skipped."""
    empty = make_connection()
    empty.connect.side_effect = NoCardException("no card", -1)
    readers.return_value = [make_reader("Empty", empty), make_reader("Full")]
    card = PcscRelayCard()
    card.power_on()
    assert card.connected


def test_power_off_and_reset(readers):
    """power_off disconnects; reset reconnects."""
    connection = make_connection()
    readers.return_value = [make_reader("Reader 0", connection)]
    card = PcscRelayCard()
    card.power_on()
    card.power_off()
    assert not card.connected
    connection.disconnect.assert_called_once()
    card.reset()
    assert card.connected


def test_no_reader_falls_back(readers):
    """Without readers, atr falls back and execute answers 6F 00."""
    readers.return_value = []
    card = PcscRelayCard()
    card.power_on()
    assert not card.connected
    assert card.atr() == DEFAULT_ATR
    assert card.execute(b"\x00\xA4\x04\x00") == b"\x6F\x00"


def test_transmit_failure(readers):
    """A failing transmit drops the connection and answers 6F 00."""
    connection = make_connection()
    connection.transmit.side_effect = CardConnectionException("card removed")
    readers.return_value = [make_reader("Reader 0", connection)]
    card = PcscRelayCard()
    assert card.execute(b"\x00\xB0\x00\x00") == b"\x6F\x00"
    assert not card.connected
