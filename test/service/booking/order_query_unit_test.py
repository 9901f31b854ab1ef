"""
Unit tests for order listing normalization

Test Focus:
1. Paging clamps instead of rejecting
2. Sorting only by allow-listed columns
3. Generated SQL never carries caller-supplied column names
"""

from sqlalchemy.dialects import postgresql
import pytest

from src.service.booking.app.dto.order_query import (
    OrderListQuery,
    build_pagination,
    clamp_limit,
    clamp_page,
)
from src.service.booking.driven_adapter.repo.booking_order_query_repo_impl import (
    build_order_count_statement,
    build_order_page_statement,
)


def _compile(statement) -> str:  # type: ignore[no-untyped-def]
    return str(statement.compile(dialect=postgresql.dialect()))


@pytest.mark.unit
class TestOrderListQuery:
    @pytest.mark.parametrize('limit,expected', [(None, 10), (500, 100), (0, 1), (-5, 1), (25, 25)])
    def test_limit_is_clamped(self, limit: int | None, expected: int) -> None:
        assert clamp_limit(limit) == expected

    @pytest.mark.parametrize('page,expected', [(None, 1), (0, 1), (-2, 1), (3, 3)])
    def test_page_is_clamped(self, page: int | None, expected: int) -> None:
        assert clamp_page(page) == expected

    def test_unknown_sort_column_falls_back_to_created_at(self) -> None:
        query = OrderListQuery.build(sort_by='droptable', sort_order='sideways')

        assert query.sort_by == 'created_at'
        assert query.sort_order == 'DESC'

    def test_sort_order_is_case_insensitive(self) -> None:
        assert OrderListQuery.build(sort_order='asc').sort_order == 'ASC'

    def test_offset(self) -> None:
        assert OrderListQuery.build(page=3, limit=20).offset == 40

    def test_empty_filters_become_none(self) -> None:
        query = OrderListQuery.build(status='', email='')

        assert query.filter.status is None
        assert query.filter.email is None


@pytest.mark.unit
class TestOrderStatements:
    def test_injected_sort_key_orders_by_created_at(self) -> None:
        query = OrderListQuery.build(sort_by='id; DROP TABLE booking_orders', limit=500)

        sql = _compile(build_order_page_statement(query))

        assert 'ORDER BY booking_orders.created_at DESC' in sql
        assert 'DROP TABLE' not in sql

    def test_sort_ascending_by_email(self) -> None:
        query = OrderListQuery.build(sort_by='email', sort_order='ASC')

        sql = _compile(build_order_page_statement(query))

        assert 'ORDER BY booking_orders.email ASC' in sql

    def test_filters_are_bound_parameters(self) -> None:
        query = OrderListQuery.build(status='pending', email="o'brien", product_id=5)

        sql = _compile(build_order_count_statement(query.filter))

        assert 'booking_orders.status = %(status_1)s' in sql
        assert 'booking_orders.product_id = %(product_id_1)s' in sql
        assert 'LIKE' in sql
        assert "o'brien" not in sql


@pytest.mark.unit
class TestBuildPagination:
    def test_middle_page(self) -> None:
        assert build_pagination(page=2, limit=10, total_records=25) == {
            'current_page': 2,
            'total_pages': 3,
            'total_records': 25,
            'per_page': 10,
            'has_next_page': True,
            'has_prev_page': True,
        }

    def test_no_records(self) -> None:
        pagination = build_pagination(page=1, limit=10, total_records=0)

        assert pagination['total_pages'] == 0
        assert pagination['has_next_page'] is False
        assert pagination['has_prev_page'] is False

    def test_page_past_the_end(self) -> None:
        pagination = build_pagination(page=9, limit=10, total_records=15)

        assert pagination['total_pages'] == 2
        assert pagination['has_next_page'] is False
