"""Coordinator registration — command and handler."""

import structlog
from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from accounts.domain import accounts
from accounts.user.user import User
from shared.exceptions import ConflictError

logger = structlog.get_logger(__name__)


@accounts.command(part_of="User")
class RegisterUser:
    """Create a coordinator account."""

    username: String(required=True, max_length=50)
    email: String(required=True, max_length=254)
    password: String(required=True, max_length=128)
    full_name: String(required=True, max_length=100)
    role: String(max_length=20)


@accounts.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        user = User.register(
            username=command.username,
            email=command.email,
            password=command.password,
            full_name=command.full_name,
            role=command.role,
        )

        repo = current_domain.repository_for(User)
        if repo.find_by_username(user.username) is not None:
            raise ConflictError({"username": ["Username already exists"]})
        if repo.find_by_email(user.email) is not None:
            raise ConflictError({"email": ["Email already exists"]})

        repo.add(user)
        logger.info("User registered", user_id=str(user.id), username=user.username)
        return str(user.id)
