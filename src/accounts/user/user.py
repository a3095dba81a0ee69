"""User aggregate — a coordinator account that owns shipments.

Accounts are created at registration and never deleted. Username and email
are both unique; the email is stored in its normalised lowercase form and the
password only as a PBKDF2 hash.
"""

import re
from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, String
from werkzeug.security import check_password_hash, generate_password_hash

from accounts.domain import accounts
from accounts.shared.email import EmailAddress

MIN_PASSWORD_LENGTH = 6

_USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_]+$")


class UserRole(Enum):
    COORDINATOR = "coordinator"
    ADMIN = "admin"


@accounts.aggregate
class User:
    username: String(required=True, min_length=3, max_length=50, unique=True)
    email: String(required=True, max_length=254, unique=True)
    password_hash: String(required=True, max_length=255)
    full_name: String(required=True, min_length=2, max_length=100)
    role: String(choices=UserRole, default=UserRole.COORDINATOR.value)
    created_at: DateTime()
    updated_at: DateTime()

    @invariant.post
    def username_uses_letters_digits_and_underscores(self):
        if self.username and not _USERNAME_PATTERN.match(self.username):
            raise ValidationError(
                {"username": ["Username can only contain letters, numbers, and underscores"]}
            )

    @classmethod
    def register(cls, username, email, password, full_name, role=None):
        from accounts.user.events import UserRegistered

        if not password or len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                {"password": [f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"]}
            )

        email_vo = EmailAddress.normalised(email)
        now = datetime.now(UTC)

        user = cls(
            username=(username or "").strip(),
            email=email_vo.address,
            password_hash=generate_password_hash(password, method="pbkdf2:sha256"),
            full_name=(full_name or "").strip(),
            role=role or UserRole.COORDINATOR.value,
            created_at=now,
            updated_at=now,
        )
        user.raise_(
            UserRegistered(
                user_id=str(user.id),
                username=user.username,
                email=user.email,
                role=user.role,
                registered_at=now,
            )
        )
        return user

    def verify_password(self, password: str) -> bool:
        return bool(password) and check_password_hash(self.password_hash, password)
