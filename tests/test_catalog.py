"""
Tests for category and show administration, through the models and the
catalog service.
"""

import pytest
from pydantic import ValidationError

from ticket_booking.core.exceptions import NotFound, OutOfRange
from ticket_booking.models.show import RemovedShow
from ticket_booking.schemas.show import CategoryCreate, ShowCreate, ShowUpdate
from ticket_booking.seed import BUSES, CONCERTS, MOVIES
from ticket_booking.services import catalog_service


def test_add_show_appends(test_category):
    """New shows go to the end of the category."""
    show = test_category.add_show("Second", "2025-05-01", 3, 3, 250.0)
    assert test_category.count == 2
    assert test_category.get_show(1) is show


def test_remove_show_compacts_indices(catalog):
    """After removeShow(i), getShow(i) returns what used to be at i + 1."""
    category = catalog.add_category("Compact")
    shows = [category.add_show(f"Show {i}", "TBA", 1, 1, 0.0) for i in range(4)]

    removed = category.remove_show(1)
    assert removed is shows[1]
    assert category.get_show(1) is shows[2]
    assert category.count == 3


@pytest.mark.parametrize("index", [-1, 1, 5])
def test_show_index_out_of_range(test_category, index):
    """get/remove/edit reject positions outside the list."""
    with pytest.raises(OutOfRange):
        test_category.get_show(index)
    with pytest.raises(OutOfRange):
        test_category.remove_show(index)
    with pytest.raises(OutOfRange):
        test_category.edit_show(index, "x", "y")
    assert test_category.count == 1


def test_edit_show_in_place(test_category):
    """editShow changes title and schedule of the same show object."""
    show = test_category.get_show(0)
    edited = test_category.edit_show(0, "Demo Reloaded", "2025-06-01 20:00")
    assert edited is show
    assert show.title == "Demo Reloaded"
    assert show.schedule == "2025-06-01 20:00"
    assert show.price == 500.0


def test_list_shows_is_unfiltered(catalog):
    """Schedules are opaque: past dates, ranges and TBA are all listed."""
    category = catalog.add_category("Mixed")
    for schedule in ["2019-04-27", "TBA", "07:00-11:00", "2025-02-14 to 02-16"]:
        category.add_show("Any", schedule, 1, 1, 0.0)
    assert [s.schedule for s in category.list_shows()] == [
        "2019-04-27", "TBA", "07:00-11:00", "2025-02-14 to 02-16",
    ]


def test_category_crud(catalog):
    """Categories can be added, renamed and removed by position."""
    catalog.add_category("Movies")
    catalog.add_category("Concerts")
    catalog.rename_category(1, "Live Music")
    assert [c.name for c in catalog.list_categories()] == ["Movies", "Live Music"]

    catalog.remove_category(0)
    assert [c.name for c in catalog.list_categories()] == ["Live Music"]

    with pytest.raises(OutOfRange):
        catalog.remove_category(1)
    with pytest.raises(OutOfRange):
        catalog.rename_category(-1, "Nope")


def test_removed_show_leaves_tombstone(catalog, test_category, test_show):
    """A deleted show can no longer be found live but still resolves to a tombstone."""
    show_id = test_show.id
    test_category.remove_show(0)

    with pytest.raises(NotFound):
        catalog.find_show(show_id)
    tombstone = catalog.resolve_show(show_id)
    assert isinstance(tombstone, RemovedShow)
    assert tombstone.title == "Demo"
    assert tombstone.removed


def test_removed_category_tombstones_its_shows(catalog, test_show):
    """Removing a category retires all of its shows."""
    catalog.remove_category(0)
    assert isinstance(catalog.resolve_show(test_show.id), RemovedShow)


def test_unknown_show_id(catalog):
    """Ids that never existed raise NotFound from resolve_show too."""
    with pytest.raises(NotFound):
        catalog.resolve_show("SHOW-999999")


def test_service_create_and_list_shows(catalog):
    """catalog_service builds shows from validated input and summarizes them."""
    catalog_service.create_category(catalog, CategoryCreate(name="Buses"))
    catalog_service.create_show(
        catalog, 0, ShowCreate(title="Lahore to Islamabad", schedule="07:00-11:00", rows=5, cols=4, price=1200),
    )
    summaries = catalog_service.list_shows(catalog, 0)
    assert len(summaries) == 1
    assert summaries[0].available_seats == 20
    assert summaries[0].price == 1200.0


def test_service_update_and_delete_show(catalog, test_category):
    """update_show edits in place; delete_show removes by position."""
    catalog_service.update_show(catalog, 0, 0, ShowUpdate(title="Edited", schedule="TBA"))
    assert test_category.get_show(0).title == "Edited"

    catalog_service.delete_show(catalog, 0, 0)
    assert test_category.count == 0
    with pytest.raises(OutOfRange):
        catalog_service.delete_show(catalog, 0, 0)


def test_service_rename_and_delete_category(catalog, test_category):
    catalog_service.rename_category(catalog, 0, CategoryCreate(name="Renamed"))
    assert test_category.name == "Renamed"
    catalog_service.delete_category(catalog, 0)
    assert catalog.list_categories() == []


@pytest.mark.parametrize("rows,cols", [(0, 4), (4, 0)])
def test_show_create_rejects_empty_grid(rows, cols):
    """Seat dimensions must be positive."""
    with pytest.raises(ValidationError):
        ShowCreate(title="Bad", schedule="TBA", rows=rows, cols=cols, price=100)


def test_show_create_allows_zero_price():
    """Prices are not range-checked (free shows exist in the seed data)."""
    show = ShowCreate(title="Free", schedule="TBA", rows=1, cols=1, price=0)
    assert show.price == 0.0


def test_seed_catalog(seeded_catalog):
    """The startup catalog has three categories of fifteen shows each."""
    categories = seeded_catalog.list_categories()
    assert [c.name for c in categories] == ["Movies", "Concerts", "Buses"]
    assert [c.count for c in categories] == [len(MOVIES), len(CONCERTS), len(BUSES)] == [15, 15, 15]

    pakistan_fest = categories[1].get_show(0)
    assert (pakistan_fest.rows, pakistan_fest.cols, pakistan_fest.price) == (10, 20, 2500.0)
    assert categories[2].get_show(0).schedule == "07:00-11:00"
