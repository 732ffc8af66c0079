from typing import List

from fastapi import APIRouter, Depends, status
from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.service.slot_booking.app.command.cancel_booking_use_case import CancelBookingUseCase
from src.service.slot_booking.app.command.reserve_slot_use_case import ReserveSlotUseCase
from src.service.slot_booking.app.query.list_bookings_use_case import ListBookingsUseCase
from src.service.slot_booking.driving_adapter.http_controller.schema.booking_schema import (
    BookingCreateRequest,
    BookingViewResponse,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


@router.get('', response_model=List[BookingViewResponse])
@Logger.io
async def list_bookings(
    use_case: ListBookingsUseCase = Depends(ListBookingsUseCase.depends),
) -> List[BookingViewResponse]:
    views = await use_case.list_bookings()
    return [BookingViewResponse.model_validate(view) for view in views]


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_booking(
    request: BookingCreateRequest,
    use_case: ReserveSlotUseCase = Depends(ReserveSlotUseCase.depends),
) -> BookingViewResponse:
    with tracer.start_as_current_span('controller.create_booking') as span:
        span.set_attribute('slot.id', request.slot_id)

        # 409 / 400 / 503 surface through the exception handlers
        view = await use_case.execute(
            slot_id=request.slot_id,
            customer_name=request.customer_name,
            customer_email=request.customer_email,
            customer_phone=request.customer_phone,
            notes=request.notes,
        )

        span.set_attribute('booking.id', view.id)
        return BookingViewResponse.model_validate(view)


@router.get('/{booking_id}')
@Logger.io
async def get_booking(
    booking_id: int,
    use_case: ListBookingsUseCase = Depends(ListBookingsUseCase.depends),
) -> BookingViewResponse:
    view = await use_case.get_booking(booking_id=booking_id)
    return BookingViewResponse.model_validate(view)


@router.patch('/{booking_id}/cancel', status_code=status.HTTP_200_OK)
@Logger.io
async def cancel_booking(
    booking_id: int,
    use_case: CancelBookingUseCase = Depends(CancelBookingUseCase.depends),
) -> BookingViewResponse:
    view = await use_case.execute(booking_id=booking_id)
    return BookingViewResponse.model_validate(view)
