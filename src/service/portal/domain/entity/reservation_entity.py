from datetime import datetime
from typing import Optional

import attrs


@attrs.define
class Reservation:
    place_id: int
    start: datetime
    finish: datetime
    user_id: Optional[int] = None
    reservation_id: Optional[int] = None
