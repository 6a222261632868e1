"""EmailAddress value object for validated email addresses."""

import re

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import String

from identity.domain import identity

_FORBIDDEN_CHARACTERS = frozenset(';,()":<>[]\\')


@identity.value_object
class EmailAddress:
    """A syntactically valid email address.

    Exactly one ``@``, non-empty local and domain parts, a dotted domain, no
    whitespace, no consecutive or edge dots, and none of the characters that
    are only legal inside quoted local parts.
    """

    address: String(required=True, max_length=254)

    @invariant.post
    def address_must_be_well_formed(self):
        email = self.address

        if re.search(r"\s", email) or email.count("@") != 1:
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

        local_part, domain_part = email.split("@", 1)

        for part in (local_part, domain_part):
            if not part or part.startswith(".") or part.endswith(".") or ".." in part:
                raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

        if "." not in domain_part or any(label.startswith("-") or label.endswith("-") for label in domain_part.split(".")):
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

        if _FORBIDDEN_CHARACTERS.intersection(email):
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

    @property
    def normalized(self) -> str:
        return self.address.lower()
