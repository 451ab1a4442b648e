"""
In-process booking metrics.
Kept in the default prometheus_client registry and shown on the admin
statistics screen; nothing is exported over the network.
"""

from prometheus_client import Counter, Histogram, REGISTRY

BOOKING_STATUSES = ("success", "already_booked", "out_of_range", "not_found", "duplicate_id")

# Booking metrics
booking_attempts = Counter(
    'booking_attempts_total',
    'Total booking attempts',
    ['status']  # one of BOOKING_STATUSES
)

booking_latency = Histogram(
    'booking_latency_seconds',
    'Time spent in the booking operation',
    buckets=[0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05]
)

booking_cancellations = Counter(
    'booking_cancellations_total',
    'Bookings cancelled by an administrator'
)

payment_attempts = Counter(
    'payment_attempts_total',
    'Simulated payment attempts',
    ['result']  # approved, declined
)


def record_booking_attempt(status: str):
    """Record booking attempt. Status: one of BOOKING_STATUSES"""
    booking_attempts.labels(status=status).inc()


def record_payment(approved: bool):
    """Record a payment outcome."""
    result = "approved" if approved else "declined"
    payment_attempts.labels(result=result).inc()


def booking_stats() -> dict[str, int]:
    """Current booking attempt counts keyed by status, plus cancellations."""
    stats = {}
    for status in BOOKING_STATUSES:
        value = REGISTRY.get_sample_value('booking_attempts_total', {'status': status})
        stats[status] = int(value or 0)
    stats["cancelled"] = int(REGISTRY.get_sample_value('booking_cancellations_total') or 0)
    return stats
