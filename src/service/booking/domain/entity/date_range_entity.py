from datetime import date, datetime
from typing import Any, Optional

import attrs

from src.platform.exception.exceptions import ValidationError


UPDATABLE_FIELDS = ('start_date', 'end_date', 'available_seats', 'booked_seats', 'is_active')


def _check_seats(name: str, value: Optional[int]) -> None:
    if value is not None and value < 0:
        raise ValidationError(f'{name} must not be negative')


@attrs.define
class DateRange:
    product_id: int
    start_date: date
    end_date: date
    available_seats: int = 0
    booked_seats: int = 0
    is_active: bool = True
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        *,
        product_id: int,
        start_date: Optional[date],
        end_date: Optional[date],
        available_seats: Optional[int] = None,
        is_active: Optional[bool] = None,
    ) -> 'DateRange':
        if start_date is None or end_date is None:
            raise ValidationError('Start date and end date are required')
        if start_date > end_date:
            raise ValidationError('End date must be greater than or equal to start date')
        _check_seats('available_seats', available_seats)

        return cls(
            product_id=product_id,
            start_date=start_date,
            end_date=end_date,
            available_seats=available_seats or 0,
            is_active=True if is_active is None else is_active,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            'id': self.id,
            'product_id': self.product_id,
            'start_date': self.start_date.isoformat(),
            'end_date': self.end_date.isoformat(),
            'available_seats': self.available_seats,
            'booked_seats': self.booked_seats,
            'is_active': self.is_active,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }


def build_date_range_patch(**fields: Any) -> dict[str, Any]:
    """Keep the supplied updatable fields; dates are re-checked only when both are present"""
    patch = {
        name: value
        for name, value in fields.items()
        if name in UPDATABLE_FIELDS and value is not None
    }
    if not patch:
        raise ValidationError('No fields to update')

    start_date, end_date = patch.get('start_date'), patch.get('end_date')
    if start_date is not None and end_date is not None and start_date > end_date:
        raise ValidationError('End date must be greater than or equal to start date')
    _check_seats('available_seats', patch.get('available_seats'))
    _check_seats('booked_seats', patch.get('booked_seats'))
    return patch
