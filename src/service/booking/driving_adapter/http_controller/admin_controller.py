from typing import Any

from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.booking.app.command.create_date_range_use_case import CreateDateRangeUseCase
from src.service.booking.app.command.delete_date_range_use_case import DeleteDateRangeUseCase
from src.service.booking.app.command.update_date_range_use_case import UpdateDateRangeUseCase
from src.service.booking.app.command.upsert_product_use_case import UpsertProductUseCase
from src.service.booking.app.query.list_bookings_use_case import ListBookingsUseCase
from src.service.booking.app.query.list_catalog_products_use_case import (
    ListCatalogProductsUseCase,
)
from src.service.booking.app.query.list_date_ranges_use_case import ListDateRangesUseCase
from src.service.booking.driving_adapter.http_controller.schema.admin_schema import (
    DateRangeCreateRequest,
    DateRangeUpdateRequest,
    ProductUpsertRequest,
)


router = APIRouter()


@router.get('/bookings')
@Logger.io
async def list_bookings(
    use_case: ListBookingsUseCase = Depends(ListBookingsUseCase.depends),
) -> dict[str, Any]:
    bookings = await use_case.list_bookings()
    return {
        'success': True,
        'data': [booking.to_dict() for booking in bookings],
        'count': len(bookings),
    }


@router.get('/products')
@Logger.io
async def list_products(
    use_case: ListCatalogProductsUseCase = Depends(ListCatalogProductsUseCase.depends),
) -> dict[str, Any]:
    return {'success': True, **await use_case.list_products()}


@router.get('/products/{product_id}/dates')
@Logger.io
async def list_product_dates(
    product_id: int,
    use_case: ListDateRangesUseCase = Depends(ListDateRangesUseCase.depends),
) -> dict[str, Any]:
    date_ranges = await use_case.list_date_ranges(product_id=product_id)
    return {
        'success': True,
        'data': [date_range.to_dict() for date_range in date_ranges],
        'count': len(date_ranges),
    }


@router.post('/products', status_code=status.HTTP_201_CREATED)
@Logger.io
async def upsert_product(
    request: ProductUpsertRequest,
    use_case: UpsertProductUseCase = Depends(UpsertProductUseCase.depends),
) -> dict[str, Any]:
    product = await use_case.upsert_product(
        product_id=request.product_id,
        variant_id=request.variant_id,
        product_name=request.product_name,
        variant_name=request.variant_name,
    )
    return {
        'success': True,
        'message': 'Product created/updated successfully',
        'data': product.to_dict(),
    }


@router.post('/products/{product_id}/dates', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_product_date(
    product_id: int,
    request: DateRangeCreateRequest,
    use_case: CreateDateRangeUseCase = Depends(CreateDateRangeUseCase.depends),
) -> dict[str, Any]:
    date_range = await use_case.create_date_range(
        product_id=product_id,
        start_date=request.start_date,
        end_date=request.end_date,
        available_seats=request.available_seats,
        is_active=request.is_active,
    )
    return {
        'success': True,
        'message': 'Product date range added successfully',
        'data': {'id': date_range.id},
    }


@router.put('/products/{product_id}/dates/{date_id}')
@Logger.io
async def update_product_date(
    product_id: int,
    date_id: int,
    request: DateRangeUpdateRequest,
    use_case: UpdateDateRangeUseCase = Depends(UpdateDateRangeUseCase.depends),
) -> dict[str, Any]:
    await use_case.update_date_range(
        product_id=product_id,
        date_id=date_id,
        start_date=request.start_date,
        end_date=request.end_date,
        available_seats=request.available_seats,
        booked_seats=request.booked_seats,
        is_active=request.is_active,
    )
    return {'success': True, 'message': 'Product date range updated successfully'}


@router.delete('/products/{product_id}/dates/{date_id}')
@Logger.io
async def delete_product_date(
    product_id: int,
    date_id: int,
    use_case: DeleteDateRangeUseCase = Depends(DeleteDateRangeUseCase.depends),
) -> dict[str, Any]:
    await use_case.delete_date_range(product_id=product_id, date_id=date_id)
    return {'success': True, 'message': 'Product date range deleted successfully'}
