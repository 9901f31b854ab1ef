from enum import StrEnum


class BookingOrderStatus(StrEnum):
    PENDING = 'pending'
    COMPLETED = 'completed'
    CANCELLED = 'cancelled'
