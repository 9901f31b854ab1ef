from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.sql import func

from src.platform.database.session_repo import SessionRepo
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_product_command_repo import IProductCommandRepo
from src.service.booking.domain.entity.product_entity import Product
from src.service.booking.driven_adapter.model.product_model import ProductModel


class ProductCommandRepoImpl(SessionRepo, IProductCommandRepo):
    @staticmethod
    def _insert(product: Product):  # type: ignore[no-untyped-def]
        return insert(ProductModel).values(
            product_id=product.product_id,
            variant_id=product.variant_id,
            product_name=product.product_name,
            variant_name=product.variant_name,
        )

    @Logger.io
    async def upsert(self, *, product: Product) -> None:
        stmt = self._insert(product)
        stmt = stmt.on_conflict_do_update(
            index_elements=[ProductModel.product_id],
            set_={
                'variant_id': stmt.excluded.variant_id,
                'product_name': stmt.excluded.product_name,
                'variant_name': stmt.excluded.variant_name,
                'updated_at': func.now(),
            },
        )
        async with self._get_session() as session:
            await session.execute(stmt)
            await session.commit()

    @Logger.io
    async def register_if_absent(self, *, product: Product) -> bool:
        stmt = self._insert(product).on_conflict_do_nothing(
            index_elements=[ProductModel.product_id]
        )
        async with self._get_session() as session:
            result = await session.execute(stmt)
            await session.commit()
            return result.rowcount > 0  # type: ignore[attr-defined]
