"""Application tests for coordinator registration via domain.process()."""

import pytest
from accounts.user.registration import RegisterUser
from accounts.user.user import User
from protean import current_domain
from shared.exceptions import ConflictError


def _register(**overrides):
    fields = {
        "username": "coordinator",
        "email": "coordinator@shipsy.com",
        "password": "shipment123",
        "full_name": "Logistics Coordinator",
    }
    fields.update(overrides)
    return current_domain.process(RegisterUser(**fields), asynchronous=False)


class TestRegisterUserFlow:
    def test_happy_path(self):
        user_id = _register()
        user = current_domain.repository_for(User).get(user_id)
        assert user.username == "coordinator"
        assert user.verify_password("shipment123")

    def test_duplicate_username_conflicts(self):
        _register()
        with pytest.raises(ConflictError) as exc:
            _register(email="other@shipsy.com")
        assert "username" in exc.value.messages

    def test_duplicate_email_conflicts_case_insensitively(self):
        _register()
        with pytest.raises(ConflictError) as exc:
            _register(username="someone_else", email="COORDINATOR@shipsy.com")
        assert "email" in exc.value.messages

    def test_repository_lookups(self):
        _register()
        repo = current_domain.repository_for(User)
        assert repo.find_by_username("coordinator") is not None
        assert repo.find_by_email("coordinator@shipsy.com") is not None
        assert repo.find_by_username("nobody") is None
