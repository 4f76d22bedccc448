from datetime import datetime
from typing import List

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from src.service.portal.domain.value_object.time_range import to_naive_utc
from src.service.portal.driving_adapter.http_controller.schema.envelope import OkResponse


class ReservationPeriod(BaseModel):
    start: datetime
    finish: datetime

    @field_validator('start', 'finish')
    @classmethod
    def normalize_timestamp(cls, v: datetime) -> datetime:
        return to_naive_utc(v)

    @field_validator('finish')
    @classmethod
    def finish_after_start(cls, v: datetime, info: ValidationInfo) -> datetime:
        start = info.data.get('start')
        if start is not None and v <= start:
            raise ValueError('finish must be after start')
        return v


class CreateReservationRequest(ReservationPeriod):
    place_id: int = Field(..., gt=0)

    model_config = {
        'json_schema_extra': {
            'example': {
                'place_id': 1,
                'start': '2025-03-01T10:00:00',
                'finish': '2025-03-01T12:00:00',
            }
        }
    }


class UpdateReservationRequest(ReservationPeriod):
    reservation_id: int = Field(..., gt=0)
    place_id: int = Field(..., gt=0)


class DeleteReservationRequest(BaseModel):
    reservation_id: int = Field(..., gt=0)


class ActualPlaceSchema(BaseModel):
    place_id: int
    name: str
    phone: str
    internet: str
    second_screen: str
    is_available: bool
    user_id: int
    start: int
    finish: int


class PlaceSchema(BaseModel):
    place_id: int
    name: str


class ReservationSchema(BaseModel):
    reservation_id: int
    place_id: int
    start: datetime
    finish: datetime
    user_id: int


class ActualPlacesResponse(OkResponse):
    places: List[ActualPlaceSchema]


class PlaceResponse(OkResponse):
    place: PlaceSchema


class ReservationListResponse(OkResponse):
    reservations: List[ReservationSchema]


class ReservationInRangeResponse(OkResponse):
    has_reservation: bool


class CreateReservationResponse(OkResponse):
    reservation_id: int
