"""Repository for the Order aggregate."""

from bakery.domain import bakery
from bakery.order.order import Order


@bakery.repository(part_of=Order)
class OrderRepository:
    def find_by_idempotency_key(self, key: str) -> Order | None:
        """The order previously placed with this idempotency key, if any."""
        results = self._dao.query.filter(idempotency_key=key).all()
        if not results.items:
            return None
        return results.first

    def count(self) -> int:
        return self._dao.query.all().total
