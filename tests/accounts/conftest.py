import os

import pytest


@pytest.fixture(scope="session")
def _accounts_domain(request):
    """Initialize the accounts domain once per session."""
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from accounts.domain import accounts

    accounts.init()
    return accounts


@pytest.fixture(scope="session", autouse=True)
def setup_db(_accounts_domain):
    from shared.db import drop_db, setup_db

    setup_db(_accounts_domain)

    yield

    drop_db(_accounts_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_accounts_domain):
    """Push accounts domain context before each test, cleanup after."""
    ctx = _accounts_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()
