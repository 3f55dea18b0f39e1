"""Repository for the Product aggregate."""

from bakery.domain import bakery
from bakery.product.product import Product


@bakery.repository(part_of=Product)
class ProductRepository:
    def list_all(self) -> list[Product]:
        """All products, ordered by name."""
        return self._dao.query.order_by("name").all().items

    def count(self) -> int:
        return self._dao.query.all().total

    def find_by_ids(self, ids) -> list[Product]:
        if not ids:
            return []
        return self._dao.query.filter(id__in=list(ids)).all().items
