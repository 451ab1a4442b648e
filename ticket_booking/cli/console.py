"""
Interactive console: main menu, admin dashboard and user booking flow.

Numbers shown to the user start at 1; the services below take 0-based indices.
Input and output are injectable so the whole flow can be scripted in tests.
"""

from typing import Callable, Optional

from pydantic import ValidationError

from ticket_booking.core.config import Settings, get_settings
from ticket_booking.core.exceptions import BookingSystemError
from ticket_booking.core.logging import bind_admin, get_logger, start_session, unbind_admin
from ticket_booking.core.metrics import booking_stats
from ticket_booking.models.catalog import Catalog
from ticket_booking.schemas.auth import LoginRequest, PaymentDetails
from ticket_booking.schemas.booking import BookingCreate
from ticket_booking.schemas.show import CategoryCreate, ShowCreate, ShowUpdate
from ticket_booking.services import auth_service, booking_service, catalog_service, payment_service
from ticket_booking.services.interfaces import Authenticator, BookingIdGenerator, PaymentProcessor

logger = get_logger(__name__)

BANNER = "**********************************"


def format_price(price: float) -> str:
    return str(int(price)) if float(price).is_integer() else f"{price:.2f}"


class ConsoleApp:
    def __init__(
        self,
        catalog: Catalog,
        authenticator: Authenticator,
        payment_processor: PaymentProcessor,
        id_generator: BookingIdGenerator,
        settings: Optional[Settings] = None,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ):
        self.catalog = catalog
        self.authenticator = authenticator
        self.payment_processor = payment_processor
        self.id_generator = id_generator
        self.settings = settings or get_settings()
        self._input = input_func
        self._out = output

    # ---- input helpers ----

    def _ask(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def _ask_int(self, prompt: str) -> Optional[int]:
        raw = self._ask(prompt)
        try:
            return int(raw)
        except ValueError:
            return None

    def _ask_ints(self, prompt: str, count: int) -> Optional[list[int]]:
        parts = self._ask(prompt).split()
        if len(parts) != count:
            return None
        try:
            return [int(part) for part in parts]
        except ValueError:
            return None

    def _report(self, exc: Exception) -> None:
        if isinstance(exc, ValidationError):
            error = exc.errors()[0]
            field = ".".join(str(loc) for loc in error["loc"])
            self._out(f"Invalid input for {field}: {error['msg']}")
        else:
            self._out(exc.detail)

    # ---- entry point ----

    def run(self) -> None:
        session_id = start_session()
        logger.info("session_started", session_id=session_id)
        try:
            self._main_menu()
        except (EOFError, KeyboardInterrupt):
            self._out("\nGoodbye!")
        logger.info("session_ended")

    def _main_menu(self) -> None:
        while True:
            self._out(f"\n{BANNER}")
            self._out(f"       {self.settings.APP_NAME.upper()}       ")
            self._out(BANNER)
            self._out(f"Address: {self.settings.CONTACT_ADDRESS}")
            self._out(f"Contact: {self.settings.CONTACT_PHONE}")
            self._out("\n=== Main Menu ===")
            self._out("1. Admin Login\n2. User\n3. Help\n4. Contact Us\n0. Exit")
            choice = self._ask_int("Choice: ")

            if choice == 1:
                if self._admin_login():
                    try:
                        self._admin_menu()
                    finally:
                        unbind_admin()
            elif choice == 2:
                self._user_menu()
            elif choice == 3:
                self._display_help()
            elif choice == 4:
                self._display_contact()
            elif choice == 0:
                self._out("Goodbye!")
                return
            else:
                self._out("Invalid choice.")

    def _admin_login(self) -> bool:
        username = self._ask("Username: ")
        password = self._ask("Password: ")
        try:
            auth_service.login(self.authenticator, LoginRequest(username=username, password=password))
        except BookingSystemError as exc:
            self._report(exc)
            return False
        bind_admin(username)
        self._out("Login successful.")
        return True

    def _display_help(self) -> None:
        self._out("\n=== Help ===")
        self._out("1. Select 'Admin Login' to manage shows and bookings (admin credentials required).")
        self._out("2. Select 'User' to browse categories and book tickets.")
        self._out("3. Follow on-screen prompts to select shows, seats, and complete payment.")
        self._out("4. For support, use the 'Contact Us' option.")

    def _display_contact(self) -> None:
        self._out("\n=== Contact Us ===")
        self._out(self.settings.CONTACT_ADDRESS)
        self._out(f"Phone: {self.settings.CONTACT_PHONE}")
        self._out(f"Email: {self.settings.CONTACT_EMAIL}")

    # ---- shared displays ----

    def _print_categories(self) -> list:
        categories = self.catalog.list_categories()
        for number, category in enumerate(categories, start=1):
            self._out(f"{number}. {category.name}")
        return categories

    def _print_shows(self, category_index: int) -> None:
        shows = catalog_service.list_shows(self.catalog, category_index)
        if not shows:
            self._out("No shows in this category.")
        for number, show in enumerate(shows, start=1):
            self._out(f"{number}. {show.title} at {show.schedule}")

    def _print_available_seats(self, show) -> None:
        self._out(
            f"Available seats for \"{show.title}\" on {show.schedule}"
            f" [Ticket Price: {self.settings.CURRENCY} {format_price(show.price)}]"
        )
        for row, cols in show.seats_by_row().items():
            self._out(" ".join(f"[{row},{col}]" for col in cols))

    def _print_bookings(self) -> None:
        bookings = booking_service.list_bookings(self.catalog)
        if not bookings:
            self._out("No bookings have been made yet.")
            return
        self._out("\nBooked Tickets:")
        for number, booking in enumerate(bookings, start=1):
            line = (
                f"{number}. ID: {booking.id}, Show: {booking.show_title}, "
                f"When: {booking.schedule}, Seat: [{booking.row},{booking.col}]"
            )
            if booking.show_removed:
                line += " (show removed)"
            if booking.status != "confirmed":
                line += f" ({booking.status})"
            self._out(line)

    # ---- admin ----

    def _admin_menu(self) -> None:
        while True:
            self._out("\n--- Admin Menu ---")
            self._out(
                "1. View booked tickets\n"
                "2. New Booking & Manage categories\n"
                "3. View booking statistics\n"
                "4. Cancel a booking\n"
                "0. Logout"
            )
            choice = self._ask_int("Choice: ")

            if choice == 1:
                self._print_bookings()
            elif choice == 2:
                self._manage_categories()
            elif choice == 3:
                self._print_statistics()
            elif choice == 4:
                self._cancel_booking()
            elif choice == 0:
                self._out("Logging out of admin.")
                return
            else:
                self._out("Invalid choice.")

    def _print_statistics(self) -> None:
        stats = booking_stats()
        self._out("\n=== Booking Statistics ===")
        self._out(f"Bookings in ledger: {len(self.catalog.ledger)}")
        for status, count in stats.items():
            self._out(f"{status.replace('_', ' ').capitalize()}: {count}")

    def _cancel_booking(self) -> None:
        booking_id = self._ask("Enter booking ID to cancel: ")
        try:
            booking = booking_service.cancel_booking(self.catalog, booking_id)
        except BookingSystemError as exc:
            self._report(exc)
            return
        self._out(f"Booking {booking.id} cancelled. Seat [{booking.row},{booking.col}] released.")

    def _manage_categories(self) -> None:
        while True:
            self._out("\n--- Book Tickets ---")
            n = len(self._print_categories())
            self._out("\n--- Manage Categories ---")
            self._out(
                f"{n + 1}. Add new category\n"
                f"{n + 2}. Delete category\n"
                f"{n + 3}. Rename category\n"
                f"{n + 4}. Back"
            )
            choice = self._ask_int("Choice: ")

            try:
                if choice is not None and 1 <= choice <= n:
                    self._manage_category(choice - 1)
                elif choice == n + 1:
                    name = self._ask("Enter new category name: ")
                    catalog_service.create_category(self.catalog, CategoryCreate(name=name))
                    self._out("Category added.")
                elif choice == n + 2:
                    number = self._ask_int("Enter category number to delete: ")
                    if number is None or not 1 <= number <= n:
                        self._out("Invalid number.")
                    else:
                        catalog_service.delete_category(self.catalog, number - 1)
                        self._out("Category deleted.")
                elif choice == n + 3:
                    number = self._ask_int("Enter category number to rename: ")
                    if number is None or not 1 <= number <= n:
                        self._out("Invalid number.")
                    else:
                        name = self._ask("Enter new name: ")
                        catalog_service.rename_category(self.catalog, number - 1, CategoryCreate(name=name))
                        self._out("Category renamed.")
                elif choice == n + 4:
                    return
                else:
                    self._out("Invalid choice.")
            except (BookingSystemError, ValidationError) as exc:
                self._report(exc)

    def _manage_category(self, category_index: int) -> None:
        category = self.catalog.get_category(category_index)
        while True:
            self._out(f"\n--- Category: {category.name} ---")
            self._out("1. List shows\n2. Add show\n3. Edit show\n4. Delete show\n0. Back")
            choice = self._ask_int("Choice: ")

            try:
                if choice == 1:
                    self._print_shows(category_index)
                elif choice == 2:
                    self._add_show(category_index)
                elif choice == 3:
                    self._print_shows(category_index)
                    number = self._ask_int("Enter show number to edit: ")
                    if number is None or not 1 <= number <= category.count:
                        self._out("Invalid number.")
                        continue
                    title = self._ask("Enter new title: ")
                    schedule = self._ask("Enter new date/time: ")
                    catalog_service.update_show(
                        self.catalog, category_index, number - 1,
                        ShowUpdate(title=title, schedule=schedule),
                    )
                    self._out("Show updated.")
                elif choice == 4:
                    self._print_shows(category_index)
                    number = self._ask_int("Enter show number to delete: ")
                    if number is None:
                        self._out("Invalid number.")
                        continue
                    catalog_service.delete_show(self.catalog, category_index, number - 1)
                    self._out("Show deleted.")
                elif choice == 0:
                    return
                else:
                    self._out("Invalid choice.")
            except (BookingSystemError, ValidationError) as exc:
                self._report(exc)

    def _add_show(self, category_index: int) -> None:
        title = self._ask("Enter new show title: ")
        schedule = self._ask("Enter date/time: ")
        dimensions = self._ask_ints("Enter rows and cols: ", 2)
        if dimensions is None:
            self._out("Invalid number.")
            return
        price = self._ask(f"Enter ticket price ({self.settings.CURRENCY}): ")
        show_data = ShowCreate(
            title=title,
            schedule=schedule,
            rows=dimensions[0],
            cols=dimensions[1],
            price=price,
        )
        catalog_service.create_show(self.catalog, category_index, show_data)
        self._out("Show added.")

    # ---- user ----

    def _user_menu(self) -> None:
        while True:
            self._out("\n--- User Menu ---")
            n = len(self._print_categories())
            self._out(f"{n + 1}. Back to main menu")
            choice = self._ask_int("Select category: ")
            if choice == n + 1:
                return
            if choice is None or not 1 <= choice <= n:
                self._out("Invalid category.")
                continue

            category_index = choice - 1
            category = self.catalog.get_category(category_index)
            self._out(f"\n--- {category.name} ---")
            self._print_shows(category_index)
            number = self._ask_int("Select show number (or 0 to go back): ")
            if number == 0:
                continue
            if number is None or not 1 <= number <= category.count:
                self._out("Invalid show.")
                continue

            self._book_show(category.get_show(number - 1))

    def _book_show(self, show) -> None:
        self._print_available_seats(show)
        seat = self._ask_ints("Enter row and seat number to book: ", 2)
        if seat is None:
            self._out("Seat unavailable.")
            return
        row, col = seat

        try:
            if not show.is_free(row, col):
                self._out("Seat unavailable.")
                return
        except BookingSystemError:
            self._out("Seat unavailable.")
            return

        if not self._take_payment(show.price):
            return

        try:
            booking = booking_service.book_seat(
                self.catalog,
                BookingCreate(show_id=show.id, row=row, col=col),
                self.id_generator.next_id(),
            )
        except BookingSystemError as exc:
            self._report(exc)
            return
        self._out(f"\nBooking confirmed! ID = {booking.id}")

    def _take_payment(self, amount: float) -> bool:
        self._out("\n=== Payment Processing ===")
        self._out(f"Amount to pay: {self.settings.CURRENCY} {format_price(amount)}")
        card_number = self._ask("Enter card number: ")
        expiry = self._ask("Enter expiry date (MM/YY): ")
        cvv = self._ask("Enter CVV: ")
        details = PaymentDetails(card_number=card_number, expiry=expiry, cvv=cvv)

        try:
            payment_service.charge(self.payment_processor, amount, details)
        except BookingSystemError as exc:
            self._report(exc)
            return False
        self._out("Payment successful!")
        return True
