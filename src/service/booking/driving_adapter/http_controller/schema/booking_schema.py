from typing import Any, Optional

from pydantic import BaseModel


class BookingCreateRequest(BaseModel):
    # Presence and format are checked by the domain so that every rule reports its own message
    booking_dates: Optional[Any] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None
    product_id: Optional[int] = None
    variant_id: Optional[int] = None
    quantity: Optional[int] = None

    model_config = {
        'json_schema_extra': {
            'example': {
                'booking_dates': ['2025-01-15', '2025-01-16'],
                'first_name': 'John',
                'last_name': 'Doe',
                'phone_number': '+1234567890',
                'email': 'john.doe@example.com',
                'product_id': 123456789,
                'variant_id': 987654321,
                'quantity': 1,
            }
        }
    }


class BookingStatusUpdateRequest(BaseModel):
    status: Optional[str] = None

    model_config = {'json_schema_extra': {'example': {'status': 'completed'}}}
