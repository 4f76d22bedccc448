from datetime import datetime, timezone

import attrs


def to_naive_utc(value: datetime) -> datetime:
    """Reservation columns are TIMESTAMP WITHOUT TIME ZONE holding UTC wall time."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


@attrs.frozen
class TimeRange:
    """
    A period queried or booked against the reservation table.

    Overlap between periods is decided by PostgreSQL ``OVERLAPS``: each period is
    the half-open interval ``start <= t < finish``, so periods that only share an
    endpoint do not overlap.
    """

    start: datetime = attrs.field(converter=to_naive_utc)
    finish: datetime = attrs.field(converter=to_naive_utc)
