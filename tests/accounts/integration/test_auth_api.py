"""Integration tests for the Auth API endpoints via TestClient."""

import pytest
from accounts.api import auth_router
from fastapi import FastAPI
from fastapi.testclient import TestClient
from shared.http import register_error_handlers
from shared.security import decode_access_token, issue_access_token


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(auth_router)
    register_error_handlers(app)
    return TestClient(app)


REGISTRATION = {
    "username": "coordinator",
    "email": "coordinator@shipsy.com",
    "password": "shipment123",
    "full_name": "Logistics Coordinator",
}


class TestRegisterAPI:
    def test_register_returns_token_and_user(self, client):
        response = client.post("/api/auth/register", json=REGISTRATION)
        assert response.status_code == 201
        data = response.json()
        assert data["user"]["username"] == "coordinator"
        assert data["user"]["role"] == "coordinator"
        assert "password_hash" not in data["user"]
        assert decode_access_token(data["token"])["sub"] == data["user"]["id"]

    def test_duplicate_username_is_409(self, client):
        client.post("/api/auth/register", json=REGISTRATION)
        response = client.post("/api/auth/register", json={**REGISTRATION, "email": "other@shipsy.com"})
        assert response.status_code == 409
        assert "username" in response.json()["error"]

    def test_invalid_username_is_400(self, client):
        response = client.post("/api/auth/register", json={**REGISTRATION, "username": "no spaces"})
        assert response.status_code == 400

    def test_missing_fields_is_422(self, client):
        assert client.post("/api/auth/register", json={"username": "coordinator"}).status_code == 422


class TestLoginAPI:
    def test_login(self, client):
        client.post("/api/auth/register", json=REGISTRATION)
        response = client.post("/api/auth/login", json={"username": "coordinator", "password": "shipment123"})
        assert response.status_code == 200
        claims = decode_access_token(response.json()["token"])
        assert claims["username"] == "coordinator"
        assert claims["role"] == "coordinator"

    def test_bad_credentials_is_401(self, client):
        client.post("/api/auth/register", json=REGISTRATION)
        response = client.post("/api/auth/login", json={"username": "coordinator", "password": "nope123"})
        assert response.status_code == 401
        assert response.json() == {"error": {"credentials": ["Invalid credentials"]}}


class TestVerifyAPI:
    def test_verify_returns_the_user(self, client):
        token = client.post("/api/auth/register", json=REGISTRATION).json()["token"]
        response = client.get("/api/auth/verify", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 200
        assert response.json()["user"]["email"] == "coordinator@shipsy.com"

    def test_missing_token_is_401(self, client):
        assert client.get("/api/auth/verify").status_code == 401

    def test_token_for_unknown_user_is_401(self, client):
        token = issue_access_token("ghost-user")
        response = client.get("/api/auth/verify", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401
