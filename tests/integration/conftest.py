"""Fixtures for tests that drive the assembled application.

Both domains are initialized by importing ``app``; each request is routed into
the right domain context by the application's middleware.
"""

import os

import pytest
from fastapi.testclient import TestClient


@pytest.fixture(scope="session")
def application(request):
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from app import app

    return app


@pytest.fixture(scope="session")
def domains(application):
    from accounts.domain import accounts
    from logistics.domain import logistics

    return accounts, logistics


@pytest.fixture(scope="session", autouse=True)
def setup_databases(domains):
    """Create database schemas for both domains."""
    from shared.db import drop_db, setup_db

    for domain in domains:
        setup_db(domain)

    yield

    for domain in domains:
        drop_db(domain)


@pytest.fixture(autouse=True)
def run_around_tests(domains):
    """Clear both domains' data after each test."""
    yield

    for domain in domains:
        with domain.domain_context():
            from protean import current_domain

            for _, provider in current_domain.providers.items():
                provider._data_reset()

            current_domain.event_store.store._data_reset()


@pytest.fixture()
def client(application):
    return TestClient(application)
