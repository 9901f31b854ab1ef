from typing import Any

from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.booking.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.booking.app.command.update_booking_status_use_case import (
    UpdateBookingStatusUseCase,
)
from src.service.booking.app.query.get_booking_use_case import GetBookingUseCase
from src.service.booking.driving_adapter.http_controller.schema.booking_schema import (
    BookingCreateRequest,
    BookingStatusUpdateRequest,
)


router = APIRouter()


@router.post('/create', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_booking(
    request: BookingCreateRequest,
    use_case: CreateBookingUseCase = Depends(CreateBookingUseCase.depends),
) -> dict[str, Any]:
    data = await use_case.create_booking(
        booking_dates=request.booking_dates,
        first_name=request.first_name,
        last_name=request.last_name,
        phone_number=request.phone_number,
        email=request.email,
        product_id=request.product_id,
        variant_id=request.variant_id,
        quantity=request.quantity,
    )
    return {'success': True, 'message': 'Booking created successfully', 'data': data}


@router.get('/{booking_id}')
@Logger.io
async def get_booking(
    booking_id: int,
    use_case: GetBookingUseCase = Depends(GetBookingUseCase.depends),
) -> dict[str, Any]:
    booking_order = await use_case.get_booking(booking_id=booking_id)
    return {'success': True, 'data': booking_order.to_dict()}


@router.put('/{booking_id}/status')
@Logger.io
async def update_booking_status(
    booking_id: int,
    request: BookingStatusUpdateRequest,
    use_case: UpdateBookingStatusUseCase = Depends(UpdateBookingStatusUseCase.depends),
) -> dict[str, Any]:
    await use_case.update_status(booking_id=booking_id, status=request.status)
    return {'success': True, 'message': 'Booking status updated successfully'}
