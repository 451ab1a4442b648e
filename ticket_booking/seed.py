"""
Startup catalog: movies, concerts and bus trips.

Schedules are free text. Some are dates, some are ranges, one is "TBA" and
the bus trips only give departure and arrival times.
"""

from ticket_booking.core.logging import get_logger
from ticket_booking.models.catalog import Catalog

logger = get_logger(__name__)

# (title, schedule, rows, cols, price in PKR)
MOVIES = [
    ("Umro Ayyar: A New Beginning", "2025-04-14 10:00", 5, 10, 800.0),
    ("Paddington in Peru", "2025-04-14 14:00", 5, 10, 750.0),
    ("Despicable Me 4", "2025-04-14 18:00", 5, 10, 700.0),
    ("Khel Khel Mein", "2025-04-15 10:00", 5, 10, 820.0),
    ("Lilo & Stitch", "2025-04-15 14:00", 5, 10, 770.0),
    ("The Family Plan 2", "2025-04-15 18:00", 5, 10, 730.0),
    ("Dushman-e-Jaan", "2025-04-16 10:00", 5, 10, 810.0),
    ("How to Train Your Dragon", "2025-04-16 14:00", 5, 10, 760.0),
    ("Encanto", "2025-04-16 18:00", 5, 10, 720.0),
    ("Peechay Tou Dekho", "2025-04-17 10:00", 5, 10, 830.0),
    ("The Super Mario Bros. Movie", "2025-04-17 14:00", 5, 10, 780.0),
    ("Minions: The Rise of Gru", "2025-04-17 18:00", 5, 10, 740.0),
    ("Laal Kabootar", "2025-04-18 10:00", 5, 10, 840.0),
    ("Wish", "2025-04-18 14:00", 5, 10, 790.0),
    ("Kung Fu Panda 4", "2025-04-18 18:00", 5, 10, 750.0),
]

CONCERTS = [
    ("Pakistan Fest 2025 @ Jilani Park, Lahore", "2025-02-14 to 02-16", 10, 20, 2500.0),
    ("Shaam-e-Suroor (Qawwali & DJ Night)", "2025-05-14", 8, 16, 1800.0),
    ("Soundwaves S1 (Mustafa Zahid Live)", "2025-05-18", 8, 16, 2000.0),
    ("Colour Fest Islamabad", "2025-05-24", 8, 16, 1500.0),
    ("Soul Fest @ Dring Stadium, Bahawalpur", "2025-05-24 to 05-25", 8, 16, 1600.0),
    ("PSL X Opening Ceremony ft. Abida Parveen", "2025-04-11", 8, 16, 3000.0),
    ("MHB Tribute to Nusrat Fateh Ali Khan", "2025-04-19", 8, 16, 2200.0),
    ("Mekaal Hasan Band Live @ Lok Virsa", "2025-04-26", 8, 16, 2100.0),
    ("Biggest Sufi & Qawwali Night 2025", "2025-02-01", 8, 16, 1900.0),
    ("6th Sindh Sufi Melo 2025", "2025-02-08 to 02-09", 8, 16, 1750.0),
    ("Banjo ke Rung: Ustad Sabzal ke Sang", "2024-04-27", 8, 16, 1600.0),
    ("The Raah e Ishq Live Show", "2024-05-25", 8, 16, 1700.0),
    ("Mehfil-e-Qawwali", "2024-06-02", 8, 16, 1550.0),
    ("Summer Fiesta (Aima Baig, Bilal & DJ Night)", "TBA", 8, 16, 0.0),
    ("MediaBiz Music Fest (Gul Panra Live)", "2019-04-27", 8, 16, 1400.0),
]

BUSES = [
    ("Lahore to Islamabad (Business Class)", "07:00-11:00", 5, 4, 1200.0),
    ("Karachi to Multan (Economy Class)", "09:30-15:15", 5, 4, 850.0),
    ("Islamabad to Peshawar (Executive Class)", "18:00-20:30", 5, 4, 1000.0),
    ("Rawalpindi to Swat (Economy Class)", "08:00-12:00", 5, 4, 900.0),
    ("Multan to Lahore (Business Class)", "17:00-20:00", 5, 4, 1150.0),
    ("Quetta to Karachi (Sleeper Class)", "21:00-07:00", 5, 4, 1400.0),
    ("Peshawar to Muzaffarabad (Std Class)", "10:00-15:00", 5, 4, 950.0),
    ("Hyderabad to Sukkur (Economy Class)", "06:30-10:45", 5, 4, 800.0),
    ("Faisalabad to Rawalpindi (Business)", "13:00-17:30", 5, 4, 1100.0),
    ("Sialkot to Lahore (Economy Class)", "07:30-09:00", 5, 4, 700.0),
    ("Gilgit to Islamabad (Executive Class)", "06:00-12:00", 5, 4, 1300.0),
    ("Bahawalpur to Karachi (Sleeper)", "20:00-06:00", 5, 4, 1450.0),
    ("Gwadar to Quetta (Standard Class)", "16:00-22:00", 5, 4, 1250.0),
    ("Skardu to Lahore (Business Class)", "09:00-15:00", 5, 4, 1350.0),
    ("Kashmir to Islamabad (Economy Class)", "11:00-14:30", 5, 4, 780.0),
]

SEED_CATEGORIES = [
    ("Movies", MOVIES),
    ("Concerts", CONCERTS),
    ("Buses", BUSES),
]


def seed_catalog(catalog: Catalog) -> Catalog:
    for name, shows in SEED_CATEGORIES:
        category = catalog.add_category(name)
        for title, schedule, rows, cols, price in shows:
            category.add_show(title, schedule, rows, cols, price)

    logger.info(
        "catalog_seeded",
        categories=len(SEED_CATEGORIES),
        shows=sum(len(shows) for _, shows in SEED_CATEGORIES),
    )
    return catalog


def build_catalog(seed: bool = True, reject_duplicate_ids: bool = True) -> Catalog:
    catalog = Catalog(reject_duplicate_ids=reject_duplicate_ids)
    if seed:
        seed_catalog(catalog)
    return catalog
