"""Application errors that have no Protean counterpart.

Both carry a ``messages`` dict shaped like Protean's ``ValidationError`` so
the HTTP layer can render every error body the same way.
"""


class ApplicationError(Exception):
    def __init__(self, messages: dict[str, list[str]]):
        super().__init__(messages)
        self.messages = messages


class ConflictError(ApplicationError):
    """A uniquely-keyed record (tracking number, username, email) already exists."""


class AuthenticationError(ApplicationError):
    """Credentials or bearer token could not be verified."""
