from datetime import datetime

from fastapi import APIRouter, Depends, Query
from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.service.portal.app.command.create_reservation_use_case import CreateReservationUseCase
from src.service.portal.app.command.delete_reservation_use_case import DeleteReservationUseCase
from src.service.portal.app.command.update_reservation_use_case import UpdateReservationUseCase
from src.service.portal.app.query.list_actual_places_use_case import ListActualPlacesUseCase
from src.service.portal.app.query.user_reservation_query_use_case import (
    UserReservationQueryUseCase,
)
from src.service.portal.domain.value_object.principal import Principal
from src.service.portal.domain.value_object.time_range import TimeRange
from src.service.portal.driving_adapter.http_controller.schema.envelope import OkResponse
from src.service.portal.driving_adapter.http_controller.schema.reservation_schema import (
    ActualPlaceSchema,
    ActualPlacesResponse,
    CreateReservationRequest,
    CreateReservationResponse,
    DeleteReservationRequest,
    PlaceResponse,
    PlaceSchema,
    ReservationInRangeResponse,
    ReservationListResponse,
    ReservationSchema,
    UpdateReservationRequest,
)
from src.service.portal.driving_adapter.http_controller.user_controller import get_principal


router = APIRouter()
tracer = trace.get_tracer(__name__)


@router.get('/places')
@Logger.io
async def list_actual_places(
    start: datetime = Query(...),
    finish: datetime = Query(...),
    principal: Principal = Depends(get_principal),
    use_case: ListActualPlacesUseCase = Depends(ListActualPlacesUseCase.depends),
) -> ActualPlacesResponse:
    places = await use_case.list_actual_places(time_range=TimeRange(start=start, finish=finish))
    return ActualPlacesResponse(
        places=[
            ActualPlaceSchema(
                place_id=place.place_id,
                name=place.name,
                phone=place.phone,
                internet=place.internet,
                second_screen=place.second_screen,
                is_available=place.is_available,
                user_id=place.user_id,
                start=place.start,
                finish=place.finish,
            )
            for place in places
        ]
    )


@router.get('/place/{place_id}')
@Logger.io
async def get_place(
    place_id: int,
    principal: Principal = Depends(get_principal),
    use_case: ListActualPlacesUseCase = Depends(ListActualPlacesUseCase.depends),
) -> PlaceResponse:
    place = await use_case.get_place(place_id=place_id)
    return PlaceResponse(place=PlaceSchema(place_id=place.place_id, name=place.name))


@router.get('/my')
@Logger.io
async def list_my_reservations(
    principal: Principal = Depends(get_principal),
    use_case: UserReservationQueryUseCase = Depends(UserReservationQueryUseCase.depends),
) -> ReservationListResponse:
    reservations = await use_case.list_reservations(user_id=principal.user_id)
    return ReservationListResponse(
        reservations=[
            ReservationSchema(
                reservation_id=reservation.reservation_id or 0,
                place_id=reservation.place_id,
                start=reservation.start,
                finish=reservation.finish,
                user_id=reservation.user_id or principal.user_id,
            )
            for reservation in reservations
        ]
    )


@router.get('/my/in_range')
@Logger.io
async def has_my_reservation_in_range(
    start: datetime = Query(...),
    finish: datetime = Query(...),
    principal: Principal = Depends(get_principal),
    use_case: UserReservationQueryUseCase = Depends(UserReservationQueryUseCase.depends),
) -> ReservationInRangeResponse:
    found = await use_case.has_reservation_in_range(
        user_id=principal.user_id, time_range=TimeRange(start=start, finish=finish)
    )
    return ReservationInRangeResponse(has_reservation=found)


@router.post('')
@Logger.io
async def create_reservation(
    request: CreateReservationRequest,
    principal: Principal = Depends(get_principal),
    use_case: CreateReservationUseCase = Depends(CreateReservationUseCase.depends),
) -> CreateReservationResponse:
    with tracer.start_as_current_span('controller.create_reservation') as span:
        span.set_attribute('place_id', request.place_id)
        span.set_attribute('user_id', principal.user_id)

        reservation = await use_case.execute(
            user_id=principal.user_id,
            place_id=request.place_id,
            time_range=TimeRange(start=request.start, finish=request.finish),
        )
        return CreateReservationResponse(reservation_id=reservation.reservation_id or 0)


@router.put('')
@Logger.io
async def update_reservation(
    request: UpdateReservationRequest,
    principal: Principal = Depends(get_principal),
    use_case: UpdateReservationUseCase = Depends(UpdateReservationUseCase.depends),
) -> OkResponse:
    await use_case.execute(
        reservation_id=request.reservation_id,
        place_id=request.place_id,
        time_range=TimeRange(start=request.start, finish=request.finish),
    )
    return OkResponse()


@router.delete('')
@Logger.io
async def delete_reservation(
    request: DeleteReservationRequest,
    principal: Principal = Depends(get_principal),
    use_case: DeleteReservationUseCase = Depends(DeleteReservationUseCase.depends),
) -> OkResponse:
    await use_case.execute(reservation_id=request.reservation_id)
    return OkResponse()
