"""User domain events."""

from protean.fields import DateTime, Identifier, String

from accounts.domain import accounts


@accounts.event(part_of="User")
class UserRegistered:
    """A new coordinator account was created."""

    __version__ = 1

    user_id: Identifier(required=True)
    username: String(required=True, max_length=50)
    email: String(required=True, max_length=254)
    role: String(required=True, max_length=20)
    registered_at: DateTime(required=True)
