"""ContactNumber value object — a ten digit phone number."""

import re

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import String

from identity.domain import identity

_CONTACT_NUMBER = re.compile(r"^\d{10}$")


@identity.value_object
class ContactNumber:
    number: String(required=True, max_length=10)

    @invariant.post
    def must_be_ten_digits(self):
        if not _CONTACT_NUMBER.match(self.number):
            raise ValidationError({"contact_number": ["Customer contact number is not in a valid format"]})
