"""Pydantic request/response schemas for the Accounts API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

# --- Request Schemas ---


class RegisterRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "username": "coordinator",
                    "email": "coordinator@shipsy.com",
                    "password": "shipment123",
                    "full_name": "Logistics Coordinator",
                }
            ]
        }
    }

    username: str = Field(..., max_length=50)
    email: str = Field(..., max_length=254)
    password: str = Field(..., max_length=128)
    full_name: str = Field(..., max_length=100)


class LoginRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"username": "coordinator", "password": "shipment123"}]}}

    username: str = Field(..., max_length=50)
    password: str = Field(..., max_length=128)


# --- Response Schemas ---


class UserResponse(BaseModel):
    id: str
    username: str
    email: str
    full_name: str
    role: str
    created_at: datetime | None = None


class AuthResponse(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                    "user": {
                        "id": "0f9e8d7c-6b5a-4321-9876-fedcba987654",
                        "username": "coordinator",
                        "email": "coordinator@shipsy.com",
                        "full_name": "Logistics Coordinator",
                        "role": "coordinator",
                        "created_at": "2024-01-01T00:00:00Z",
                    },
                }
            ]
        }
    }

    token: str
    user: UserResponse


class VerifyResponse(BaseModel):
    user: UserResponse
