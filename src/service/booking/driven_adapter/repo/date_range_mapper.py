from src.service.booking.domain.entity.date_range_entity import DateRange
from src.service.booking.driven_adapter.model.date_range_model import DateRangeModel


def to_entity(db_range: DateRangeModel) -> DateRange:
    return DateRange(
        id=db_range.id,
        product_id=db_range.product_id,
        start_date=db_range.start_date,
        end_date=db_range.end_date,
        available_seats=db_range.available_seats,
        booked_seats=db_range.booked_seats,
        is_active=db_range.is_active,
        created_at=db_range.created_at,
        updated_at=db_range.updated_at,
    )
