"""Credential checks for login and token verification."""

import structlog
from protean.utils.globals import current_domain

from accounts.user.user import User
from shared.exceptions import AuthenticationError

logger = structlog.get_logger(__name__)


def authenticate(username: str, password: str) -> User:
    """Return the user owning these credentials.

    An unknown username and a wrong password are reported identically.
    """
    user = current_domain.repository_for(User).find_by_username((username or "").strip())
    if user is None or not user.verify_password(password):
        logger.warning("Login failed", username=username)
        raise AuthenticationError({"credentials": ["Invalid credentials"]})

    logger.info("Login succeeded", user_id=str(user.id), username=user.username)
    return user


def user_for_token_subject(user_id: str) -> User:
    """Resolve a verified token's subject; a deleted or unknown user is unauthenticated."""
    user = current_domain.repository_for(User)._dao.query.filter(id=str(user_id)).all().first
    if user is None:
        raise AuthenticationError({"token": ["User not found"]})
    return user
