"""FastAPI endpoints for the Accounts domain."""

from fastapi import APIRouter, Header
from protean.utils.globals import current_domain

from accounts.api.schemas import AuthResponse, LoginRequest, RegisterRequest, UserResponse, VerifyResponse
from accounts.user.authentication import authenticate, user_for_token_subject
from accounts.user.registration import RegisterUser
from accounts.user.user import User
from shared.security import bearer_token, decode_access_token, issue_access_token

auth_router = APIRouter(prefix="/api/auth", tags=["auth"])


def _user_response(user: User) -> UserResponse:
    return UserResponse(
        id=str(user.id),
        username=user.username,
        email=user.email,
        full_name=user.full_name,
        role=user.role,
        created_at=user.created_at,
    )


def _signed_in(user: User) -> AuthResponse:
    token = issue_access_token(str(user.id), username=user.username, role=user.role)
    return AuthResponse(token=token, user=_user_response(user))


@auth_router.post("/register", status_code=201, response_model=AuthResponse)
async def register(body: RegisterRequest) -> AuthResponse:
    command = RegisterUser(
        username=body.username,
        email=body.email,
        password=body.password,
        full_name=body.full_name,
    )
    user_id = current_domain.process(command, asynchronous=False)
    return _signed_in(user_for_token_subject(user_id))


@auth_router.post("/login", response_model=AuthResponse)
async def login(body: LoginRequest) -> AuthResponse:
    return _signed_in(authenticate(body.username, body.password))


@auth_router.get("/verify", response_model=VerifyResponse)
async def verify(authorization: str | None = Header(default=None)) -> VerifyResponse:
    claims = decode_access_token(bearer_token(authorization))
    return VerifyResponse(user=_user_response(user_for_token_subject(claims["sub"])))
