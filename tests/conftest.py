"""
Pytest fixtures for catalogs, shows and a scripted console.

Every test gets a fresh in-memory catalog, so nothing leaks between tests.
"""

import random

import pytest

from ticket_booking.cli.console import ConsoleApp
from ticket_booking.core.config import Settings
from ticket_booking.core.logging import setup_logging
from ticket_booking.models.catalog import Catalog
from ticket_booking.models.category import Category
from ticket_booking.models.show import Show
from ticket_booking.seed import build_catalog
from ticket_booking.services.auth_service import SettingsAuthenticator
from ticket_booking.services.booking_ids import RandomBookingIdGenerator, SequentialBookingIdGenerator
from ticket_booking.services.payment_service import SimulatedPaymentProcessor


@pytest.fixture(scope="session", autouse=True)
def configure_logging():
    setup_logging()


@pytest.fixture
def catalog() -> Catalog:
    return Catalog()


@pytest.fixture
def test_category(catalog: Catalog) -> Category:
    """Category "Test" holding the 2x2 "Demo" show."""
    category = catalog.add_category("Test")
    category.add_show("Demo", "2025-04-14 10:00", 2, 2, 500.0)
    return category


@pytest.fixture
def test_show(test_category: Category) -> Show:
    return test_category.get_show(0)


@pytest.fixture
def seeded_catalog() -> Catalog:
    return build_catalog(seed=True)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        ADMIN_USERNAME="admin",
        ADMIN_PASSWORD="secret",
        PAYMENT_STEP_DELAY=0.0,
        SEED_CATALOG=False,
    )


@pytest.fixture
def id_generator() -> SequentialBookingIdGenerator:
    return SequentialBookingIdGenerator()


@pytest.fixture
def run_console(test_settings: Settings):
    """
    Run a console session against `catalog` with scripted input lines.
    Returns everything the console printed as one string.
    """

    def _run(catalog: Catalog, lines: list[str], payment_processor=None, id_generator=None) -> str:
        inputs = iter(lines)
        printed: list[str] = []

        def fake_input(prompt: str) -> str:
            printed.append(prompt)
            try:
                return next(inputs)
            except StopIteration:
                raise EOFError from None

        app = ConsoleApp(
            catalog=catalog,
            authenticator=SettingsAuthenticator("admin", "secret"),
            payment_processor=payment_processor or SimulatedPaymentProcessor(
                steps=3, step_delay=0.0, write=printed.append, sleep=lambda _: None,
            ),
            id_generator=id_generator or RandomBookingIdGenerator(random.Random(7)),
            settings=test_settings,
            input_func=fake_input,
            output=printed.append,
        )
        app.run()
        return "\n".join(printed)

    return _run
