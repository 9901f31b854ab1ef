from datetime import date
from typing import Optional

from pydantic import BaseModel


class ProductUpsertRequest(BaseModel):
    product_id: Optional[int] = None
    variant_id: Optional[int] = None
    product_name: Optional[str] = None
    variant_name: Optional[str] = None

    model_config = {
        'json_schema_extra': {
            'example': {
                'product_id': 123456789,
                'variant_id': 987654321,
                'product_name': 'Guided Tour',
                'variant_name': 'Morning',
            }
        }
    }


class DateRangeCreateRequest(BaseModel):
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    available_seats: Optional[int] = None
    is_active: Optional[bool] = None

    model_config = {
        'json_schema_extra': {
            'example': {
                'start_date': '2025-02-01',
                'end_date': '2025-02-28',
                'available_seats': 20,
                'is_active': True,
            }
        }
    }


class DateRangeUpdateRequest(BaseModel):
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    available_seats: Optional[int] = None
    booked_seats: Optional[int] = None
    is_active: Optional[bool] = None

    model_config = {'json_schema_extra': {'example': {'available_seats': 30, 'is_active': False}}}
