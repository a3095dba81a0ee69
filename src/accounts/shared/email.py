"""EmailAddress value object for coordinator login addresses."""

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import String

from accounts.domain import accounts


@accounts.value_object
class EmailAddress:
    """A normalised email address: trimmed, lowercased, structurally valid.

    Build it through :meth:`normalised` so the stored form is always the
    canonical one used for uniqueness checks.
    """

    address: String(required=True, max_length=254)

    @classmethod
    def normalised(cls, raw: str) -> "EmailAddress":
        return cls(address=(raw or "").strip().lower())

    @invariant.post
    def verify_email_address(self):
        email = self.address
        invalid = ValidationError({"email": ["Please enter a valid email"]})

        if any(ch.isspace() for ch in email) or email.count("@") != 1:
            raise invalid

        local_part, domain_part = email.split("@", 1)
        if not local_part or local_part.startswith(".") or local_part.endswith("."):
            raise invalid
        if not domain_part or "." not in domain_part:
            raise invalid
        if domain_part.startswith(".") or domain_part.endswith(".") or ".." in email:
            raise invalid

        for label in domain_part.split("."):
            if not label or label.startswith("-") or label.endswith("-"):
                raise invalid
