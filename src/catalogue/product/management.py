"""Product management — commands and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from catalogue.domain import catalogue, logger
from catalogue.product.product import Product, validate_product


@catalogue.command(part_of="Product")
class CreateProduct:
    name: String(required=True, max_length=255)
    description: Text(required=True)
    price: Float(required=True)
    quantity: Integer(required=True)
    category: String(required=True, max_length=100)


@catalogue.command(part_of="Product")
class UpdateProduct:
    product_id: Identifier(required=True)
    name: String(required=True, max_length=255)
    description: Text(required=True)
    price: Float(required=True)
    quantity: Integer(required=True)
    category: String(required=True, max_length=100)


@catalogue.command(part_of="Product")
class DeleteProduct:
    product_id: Identifier(required=True)


@catalogue.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        product = Product.create(
            name=command.name,
            description=command.description,
            price=command.price,
            quantity=command.quantity,
            category=command.category,
        )
        current_domain.repository_for(Product).add(product)
        return str(product.id)

    @handle(UpdateProduct)
    def update_product(self, command):
        # Invalid input is rejected even when the product is missing.
        validate_product(command.name, command.description, command.price, command.quantity, command.category)

        repo = current_domain.repository_for(Product)
        try:
            product = repo.get(command.product_id)
        except ObjectNotFoundError:
            logger.info("product_update_skipped", product_id=str(command.product_id))
            return

        product.update_details(
            name=command.name,
            description=command.description,
            price=command.price,
            quantity=command.quantity,
            category=command.category,
        )
        repo.add(product)

    @handle(DeleteProduct)
    def delete_product(self, command):
        repo = current_domain.repository_for(Product)
        try:
            product = repo.get(command.product_id)
        except ObjectNotFoundError:
            return

        repo._dao.delete(product)


def list_products():
    return current_domain.repository_for(Product)._dao.query.limit(None).all().items


def get_product(product_id):
    return current_domain.repository_for(Product).get(product_id)
