"""
Catalog administration: categories and shows.

All indices are 0-based; the console converts from the 1-based numbers it shows.
"""

from ticket_booking.core.logging import get_logger
from ticket_booking.models.catalog import Catalog
from ticket_booking.models.category import Category
from ticket_booking.models.show import Show
from ticket_booking.schemas.show import CategoryCreate, ShowCreate, ShowSummary, ShowUpdate

logger = get_logger(__name__)


def create_category(catalog: Catalog, category_data: CategoryCreate) -> Category:
    category = catalog.add_category(category_data.name)
    logger.info("category_created", name=category.name)
    return category


def delete_category(catalog: Catalog, category_index: int) -> Category:
    """Remove a category. Its shows become tombstones; bookings are kept."""
    category = catalog.remove_category(category_index)
    logger.info("category_deleted", name=category.name, shows_removed=category.count)
    return category


def rename_category(catalog: Catalog, category_index: int, category_data: CategoryCreate) -> Category:
    old_name = catalog.get_category(category_index).name
    category = catalog.rename_category(category_index, category_data.name)
    logger.info("category_renamed", old_name=old_name, new_name=category.name)
    return category


def create_show(catalog: Catalog, category_index: int, show_data: ShowCreate) -> Show:
    """Add a show with every seat free."""
    category = catalog.get_category(category_index)
    show = category.add_show(
        title=show_data.title,
        schedule=show_data.schedule,
        rows=show_data.rows,
        cols=show_data.cols,
        price=show_data.price,
    )
    logger.info(
        "show_created",
        show_id=show.id,
        category=category.name,
        title=show.title,
        seats=show.grid.capacity,
    )
    return show


def update_show(catalog: Catalog, category_index: int, show_index: int, show_data: ShowUpdate) -> Show:
    """Change title and schedule. Price and seat layout stay as they are."""
    category = catalog.get_category(category_index)
    show = category.edit_show(show_index, show_data.title, show_data.schedule)
    logger.info("show_updated", show_id=show.id, title=show.title, schedule=show.schedule)
    return show


def delete_show(catalog: Catalog, category_index: int, show_index: int) -> Show:
    category = catalog.get_category(category_index)
    show = category.remove_show(show_index)
    logger.info("show_deleted", show_id=show.id, category=category.name, title=show.title)
    return show


def summarize_show(show: Show) -> ShowSummary:
    return ShowSummary(
        id=show.id,
        title=show.title,
        schedule=show.schedule,
        price=show.price,
        rows=show.rows,
        cols=show.cols,
        available_seats=show.grid.available_count,
    )


def list_shows(catalog: Catalog, category_index: int) -> list[ShowSummary]:
    category = catalog.get_category(category_index)
    return [summarize_show(show) for show in category.list_shows()]
