"""
Payment processor interface.
Booking only happens after a processor approves the charge; the booking core
itself has no notion of payment.
"""

from abc import ABC, abstractmethod

from ticket_booking.schemas.auth import PaymentDetails


class PaymentProcessor(ABC):
    """
    Interface for payment processors.

    Implementations:
    - SimulatedPaymentProcessor: prints a short progress animation, always approves
    - DecliningPaymentProcessor: always declines
    """

    @abstractmethod
    def process_payment(self, amount: float, details: PaymentDetails) -> bool:
        """
        Charge `amount` to the card in `details`.

        Args:
            amount: Ticket price in the configured currency
            details: Card number, expiry and CVV as entered by the user

        Returns:
            True if approved, False if declined
        """
        pass
