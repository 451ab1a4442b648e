"""
FAST Booking System - console entry point

A ticket-booking simulator for movies, concerts and bus trips:
- Seat-grid booking with book-if-free semantics
- Category and show administration behind an admin login
- Simulated payment before every booking
- Structured logging to stderr
"""

from ticket_booking.cli.console import ConsoleApp
from ticket_booking.core.config import get_settings
from ticket_booking.core.logging import get_logger, setup_logging
from ticket_booking.seed import build_catalog
from ticket_booking.services.strategy_factory import (
    get_authenticator,
    get_id_generator,
    get_payment_processor,
)


def create_app() -> ConsoleApp:
    settings = get_settings()
    catalog = build_catalog(
        seed=settings.SEED_CATALOG,
        reject_duplicate_ids=settings.REJECT_DUPLICATE_BOOKING_IDS,
    )
    return ConsoleApp(
        catalog=catalog,
        authenticator=get_authenticator(),
        payment_processor=get_payment_processor(),
        id_generator=get_id_generator(),
        settings=settings,
    )


def main() -> None:
    """Application lifecycle: configure logging, run the menus, log shutdown."""
    settings = get_settings()
    setup_logging()
    logger = get_logger(__name__)

    logger.info(
        "application_starting",
        app=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
    )

    create_app().run()
    logger.info("application_shutdown")


if __name__ == "__main__":
    main()
