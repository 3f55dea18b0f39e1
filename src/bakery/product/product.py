"""Product aggregate — a cake on the bakery's menu."""

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Float, String

from bakery.domain import bakery


@bakery.aggregate
class Product:
    """A catalogue product. Created once by seeding and read by the storefront."""

    name: String(required=True, max_length=255)
    price: Float(required=True, min_value=0.0)
    image: String(required=True, max_length=255)

    @invariant.post
    def name_must_not_be_blank(self):
        if not self.name or not self.name.strip():
            raise ValidationError({"name": ["Product name cannot be blank"]})

    @classmethod
    def create(cls, name, price, image):
        from bakery.product.events import ProductAdded

        product = cls(name=name, price=price, image=image)
        product.raise_(
            ProductAdded(
                product_id=product.id,
                name=product.name,
                price=product.price,
                image=product.image,
            )
        )
        return product
