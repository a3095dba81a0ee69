from accounts.domain import accounts
from accounts.user.user import User


@accounts.repository(part_of=User)
class UserRepository:
    def find_by_username(self, username: str) -> User | None:
        return self._dao.query.filter(username=username).all().first

    def find_by_email(self, email: str) -> User | None:
        return self._dao.query.filter(email=email).all().first
