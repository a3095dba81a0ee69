"""Accounts bounded context — coordinator registration and authentication."""

from protean.domain import Domain

from accounts.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

accounts = Domain(name="accounts")
