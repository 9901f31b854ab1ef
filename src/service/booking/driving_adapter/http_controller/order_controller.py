from datetime import datetime
from typing import Any, Optional

from fastapi import APIRouter, Depends, Response

from src.platform.logging.loguru_io import Logger
from src.service.booking.app.command.delete_order_use_case import DeleteOrderUseCase
from src.service.booking.app.query.export_orders_use_case import (
    ExportOrdersUseCase,
    export_filename,
)
from src.service.booking.app.query.get_order_stats_use_case import GetOrderStatsUseCase
from src.service.booking.app.query.list_orders_use_case import ListOrdersUseCase


router = APIRouter()


@router.get('')
@Logger.io
async def list_orders(
    page: Optional[int] = None,
    limit: Optional[int] = None,
    status: Optional[str] = None,
    email: Optional[str] = None,
    product_id: Optional[int] = None,
    start_date: Optional[datetime] = None,
    end_date: Optional[datetime] = None,
    sort_by: Optional[str] = None,
    sort_order: Optional[str] = None,
    use_case: ListOrdersUseCase = Depends(ListOrdersUseCase.depends),
) -> dict[str, Any]:
    data = await use_case.list_orders(
        page=page,
        limit=limit,
        status=status,
        email=email,
        product_id=product_id,
        start_date=start_date,
        end_date=end_date,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    return {'success': True, 'data': data}


@router.get('/stats')
@Logger.io
async def get_order_stats(
    use_case: GetOrderStatsUseCase = Depends(GetOrderStatsUseCase.depends),
) -> dict[str, Any]:
    return {'success': True, 'data': await use_case.get_stats()}


@router.get('/export')
@Logger.io
async def export_orders(
    status: Optional[str] = None,
    start_date: Optional[datetime] = None,
    end_date: Optional[datetime] = None,
    use_case: ExportOrdersUseCase = Depends(ExportOrdersUseCase.depends),
) -> Response:
    content = await use_case.export_orders(status=status, start_date=start_date, end_date=end_date)
    return Response(
        content=content,
        media_type='text/csv',
        headers={'Content-Disposition': f'attachment; filename="{export_filename()}"'},
    )


@router.delete('/{order_id}')
@Logger.io
async def delete_order(
    order_id: int,
    use_case: DeleteOrderUseCase = Depends(DeleteOrderUseCase.depends),
) -> dict[str, Any]:
    await use_case.delete_order(order_id=order_id)
    return {'success': True, 'message': 'Order deleted successfully'}
