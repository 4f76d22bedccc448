from datetime import datetime, timezone

import attrs


@attrs.define
class Place:
    place_id: int
    name: str = ''
    phone: str = ''
    internet: str = ''
    second_screen: str = ''


def to_epoch_millis(value: datetime | None) -> int:
    """Naive timestamps hold UTC wall time; available places carry none and render as 0."""
    if value is None:
        return 0
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp() * 1000)


@attrs.define
class ActualPlace(Place):
    """Availability of a place for one queried period."""

    is_available: bool = True
    user_id: int = 0
    start: int = 0  # epoch millis
    finish: int = 0  # epoch millis
