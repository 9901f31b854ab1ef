"""Order listing / export query DTOs"""

from datetime import datetime
from typing import Any, Optional

import attrs


DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100

SORTABLE_COLUMNS = (
    'id',
    'created_at',
    'updated_at',
    'status',
    'email',
    'first_name',
    'last_name',
)
DEFAULT_SORT_COLUMN = 'created_at'


def clamp_page(page: Optional[int]) -> int:
    return DEFAULT_PAGE if page is None else max(page, 1)


def clamp_limit(limit: Optional[int]) -> int:
    if limit is None:
        return DEFAULT_LIMIT
    return min(max(limit, 1), MAX_LIMIT)


def normalize_sort_by(sort_by: Optional[str]) -> str:
    return sort_by if sort_by in SORTABLE_COLUMNS else DEFAULT_SORT_COLUMN


def normalize_sort_order(sort_order: Optional[str]) -> str:
    return 'ASC' if (sort_order or '').upper() == 'ASC' else 'DESC'


@attrs.define(frozen=True)
class OrderFilter:
    status: Optional[str] = None
    email: Optional[str] = None
    product_id: Optional[int] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None


@attrs.define(frozen=True)
class OrderListQuery:
    """Normalized listing request; construct through `build`"""

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    sort_by: str = DEFAULT_SORT_COLUMN
    sort_order: str = 'DESC'
    filter: OrderFilter = attrs.field(factory=OrderFilter)

    @classmethod
    def build(
        cls,
        *,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None,
        status: Optional[str] = None,
        email: Optional[str] = None,
        product_id: Optional[int] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> 'OrderListQuery':
        return cls(
            page=clamp_page(page),
            limit=clamp_limit(limit),
            sort_by=normalize_sort_by(sort_by),
            sort_order=normalize_sort_order(sort_order),
            filter=OrderFilter(
                status=status or None,
                email=email or None,
                product_id=product_id,
                start_date=start_date,
                end_date=end_date,
            ),
        )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def build_pagination(*, page: int, limit: int, total_records: int) -> dict[str, Any]:
    total_pages = -(-total_records // limit) if total_records else 0
    return {
        'current_page': page,
        'total_pages': total_pages,
        'total_records': total_records,
        'per_page': limit,
        'has_next_page': page < total_pages,
        'has_prev_page': page > 1,
    }
