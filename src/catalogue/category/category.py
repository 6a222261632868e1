"""Category aggregate root for grouping products."""

from datetime import datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, String, Text

from catalogue.domain import catalogue


def validate_category(name, description):
    if name is None or not name.strip():
        raise ValidationError({"name": ["Category name cannot be empty"]})
    if description is None or not description.strip():
        raise ValidationError({"description": ["Category description cannot be empty"]})


@catalogue.aggregate
class Category:
    """A named grouping that products are filed under."""

    name: String(required=True, max_length=100)
    description: Text(required=True)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @classmethod
    def create(cls, name, description):
        from catalogue.category.events import CategoryCreated

        validate_category(name, description)

        now = datetime.now()
        category = cls(name=name, description=description, created_at=now, updated_at=now)
        category.raise_(
            CategoryCreated(
                category_id=category.id,
                name=name,
                description=description,
            )
        )
        return category

    def update_details(self, name, description):
        from catalogue.category.events import CategoryDetailsUpdated

        validate_category(name, description)

        self.name = name
        self.description = description
        self.updated_at = datetime.now()

        self.raise_(
            CategoryDetailsUpdated(
                category_id=self.id,
                name=self.name,
                description=self.description,
            )
        )
