"""
Tests for simulated payment, booking id generation and the service factory.
"""

import random

import pytest

from ticket_booking.core import config
from ticket_booking.core.exceptions import PaymentDeclined
from ticket_booking.schemas.auth import PaymentDetails
from ticket_booking.services import payment_service
from ticket_booking.services.booking_ids import RandomBookingIdGenerator, SequentialBookingIdGenerator
from ticket_booking.services.payment_service import DecliningPaymentProcessor, SimulatedPaymentProcessor
from ticket_booking.services.strategy_factory import get_id_generator, get_payment_processor

CARD = PaymentDetails(card_number="4111111111111111", expiry="12/27", cvv="123")


def test_simulated_payment_animates_and_approves():
    """Prints "Processing" and one dot per step, pausing between dots."""
    written, sleeps = [], []
    processor = SimulatedPaymentProcessor(steps=3, step_delay=0.5, write=written.append, sleep=sleeps.append)

    assert processor.process_payment(800.0, CARD) is True
    assert "".join(written) == "Processing...\n"
    assert sleeps == [0.5, 0.5, 0.5]


def test_charge_declined():
    """charge raises PaymentDeclined when the processor says no."""
    with pytest.raises(PaymentDeclined):
        payment_service.charge(DecliningPaymentProcessor(), 800.0, CARD)


def test_charge_approved():
    processor = SimulatedPaymentProcessor(write=lambda _: None, sleep=lambda _: None)
    payment_service.charge(processor, 0.0, CARD)


def test_payment_details_hide_card_data():
    assert "4111111111111111" not in repr(CARD)
    assert "123" not in str(CARD.cvv)


def test_random_ids_never_repeat():
    """Drawn ids stay unique and within BK10000-BK99999."""
    generator = RandomBookingIdGenerator(random.Random(42))
    ids = [generator.next_id() for _ in range(2000)]
    assert len(set(ids)) == len(ids)
    for booking_id in ids:
        assert booking_id.startswith("BK")
        assert 10000 <= int(booking_id[2:]) <= 99999


def test_sequential_ids():
    generator = SequentialBookingIdGenerator()
    assert [generator.next_id() for _ in range(3)] == ["BK00001", "BK00002", "BK00003"]


def test_factory_follows_settings(monkeypatch):
    """PAYMENT_STRATEGY and BOOKING_ID_STRATEGY pick the implementations."""
    settings = config.get_settings()
    monkeypatch.setattr(settings, "PAYMENT_STRATEGY", "declining")
    monkeypatch.setattr(settings, "BOOKING_ID_STRATEGY", "sequential")
    assert isinstance(get_payment_processor(), DecliningPaymentProcessor)
    assert isinstance(get_id_generator(), SequentialBookingIdGenerator)

    monkeypatch.setattr(settings, "PAYMENT_STRATEGY", "simulated")
    monkeypatch.setattr(settings, "BOOKING_ID_STRATEGY", "random")
    assert isinstance(get_payment_processor(), SimulatedPaymentProcessor)
    assert isinstance(get_id_generator(), RandomBookingIdGenerator)
