"""
Simulated payment processing.

Nothing is charged anywhere. SimulatedPaymentProcessor prints
"Processing" followed by a dot per step, pausing between dots, and approves
every payment.
"""

import time
from typing import Callable

from ticket_booking.core.exceptions import PaymentDeclined
from ticket_booking.core.logging import get_logger
from ticket_booking.core.metrics import record_payment
from ticket_booking.schemas.auth import PaymentDetails
from ticket_booking.services.interfaces.payment import PaymentProcessor

logger = get_logger(__name__)


def _print_inline(text: str) -> None:
    print(text, end="", flush=True)


class SimulatedPaymentProcessor(PaymentProcessor):
    def __init__(
        self,
        steps: int = 3,
        step_delay: float = 0.5,
        write: Callable[[str], None] = _print_inline,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.steps = steps
        self.step_delay = step_delay
        self._write = write
        self._sleep = sleep

    def process_payment(self, amount: float, details: PaymentDetails) -> bool:
        self._write("Processing")
        for _ in range(self.steps):
            self._write(".")
            self._sleep(self.step_delay)
        self._write("\n")
        return True


class DecliningPaymentProcessor(PaymentProcessor):
    """Declines everything. Useful for exercising the failure path."""

    def process_payment(self, amount: float, details: PaymentDetails) -> bool:
        return False


def charge(processor: PaymentProcessor, amount: float, details: PaymentDetails) -> None:
    """
    Run a payment through `processor`.
    Raises PaymentDeclined if the processor does not approve it.
    """
    approved = processor.process_payment(amount, details)
    record_payment(approved)

    if not approved:
        logger.warning("payment_declined", amount=amount)
        raise PaymentDeclined("Payment failed.")

    logger.info("payment_approved", amount=amount)
