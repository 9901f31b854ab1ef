"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.orm_db_setting import Database
from src.service.booking.driven_adapter.commerce.shopify_commerce_gateway import (
    build_commerce_gateway,
)
from src.service.booking.driven_adapter.repo.booking_order_command_repo_impl import (
    BookingOrderCommandRepoImpl,
)
from src.service.booking.driven_adapter.repo.booking_order_query_repo_impl import (
    BookingOrderQueryRepoImpl,
)
from src.service.booking.driven_adapter.repo.date_range_command_repo_impl import (
    DateRangeCommandRepoImpl,
)
from src.service.booking.driven_adapter.repo.date_range_query_repo_impl import (
    DateRangeQueryRepoImpl,
)
from src.service.booking.driven_adapter.repo.product_command_repo_impl import (
    ProductCommandRepoImpl,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (AsyncEngineManager with the bounded pool from config)
    database = providers.Singleton(Database)

    # Repositories (stateless - use session_factory per-request)
    booking_order_command_repo = providers.Singleton(
        BookingOrderCommandRepoImpl, session_factory=database.provided.session
    )
    booking_order_query_repo = providers.Singleton(
        BookingOrderQueryRepoImpl, session_factory=database.provided.session
    )
    product_command_repo = providers.Singleton(
        ProductCommandRepoImpl, session_factory=database.provided.session
    )
    date_range_command_repo = providers.Singleton(
        DateRangeCommandRepoImpl, session_factory=database.provided.session
    )
    date_range_query_repo = providers.Singleton(
        DateRangeQueryRepoImpl, session_factory=database.provided.session
    )

    # Commerce gateway (REST or storefront style, or unconfigured, decided from config)
    commerce_gateway = providers.Singleton(build_commerce_gateway, settings=config_service)


container = Container()


def setup() -> None:
    container.config_service()
    container.commerce_gateway()


def cleanup() -> None:
    container.reset_singletons()
