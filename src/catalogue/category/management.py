"""Category management — commands and handlers."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from catalogue.category.category import Category, validate_category
from catalogue.domain import catalogue, logger


@catalogue.command(part_of="Category")
class CreateCategory:
    name: String(required=True, max_length=100)
    description: Text(required=True)


@catalogue.command(part_of="Category")
class UpdateCategory:
    category_id: Identifier(required=True)
    name: String(required=True, max_length=100)
    description: Text(required=True)


@catalogue.command(part_of="Category")
class DeleteCategory:
    category_id: Identifier(required=True)


@catalogue.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        category = Category.create(name=command.name, description=command.description)
        current_domain.repository_for(Category).add(category)
        return str(category.id)

    @handle(UpdateCategory)
    def update_category(self, command):
        validate_category(command.name, command.description)

        repo = current_domain.repository_for(Category)
        try:
            category = repo.get(command.category_id)
        except ObjectNotFoundError:
            logger.info("category_update_skipped", category_id=str(command.category_id))
            return

        category.update_details(name=command.name, description=command.description)
        repo.add(category)

    @handle(DeleteCategory)
    def delete_category(self, command):
        repo = current_domain.repository_for(Category)
        try:
            category = repo.get(command.category_id)
        except ObjectNotFoundError:
            return

        repo._dao.delete(category)


def list_categories():
    return current_domain.repository_for(Category)._dao.query.limit(None).all().items


def get_category(category_id):
    return current_domain.repository_for(Category).get(category_id)
