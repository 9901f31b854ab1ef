from datetime import datetime
from typing import Any, Optional

import attrs

from src.platform.exception.exceptions import ValidationError


@attrs.define
class Product:
    product_id: int
    variant_id: int
    product_name: str
    variant_name: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        *,
        product_id: Optional[int],
        variant_id: Optional[int],
        product_name: Optional[str],
        variant_name: Optional[str] = None,
    ) -> 'Product':
        if not product_id or not variant_id or not product_name or not product_name.strip():
            raise ValidationError('Missing required fields: product_id, variant_id, product_name')
        return cls(
            product_id=product_id,
            variant_id=variant_id,
            product_name=product_name,
            variant_name=variant_name,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            'product_id': self.product_id,
            'variant_id': self.variant_id,
            'product_name': self.product_name,
            'variant_name': self.variant_name,
        }
