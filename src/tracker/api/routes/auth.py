"""Authentication endpoints."""

from fastapi import APIRouter, status

from src.tracker.api.dependencies import AuthServiceDep
from src.tracker.core.exceptions import ValidationFailedError
from src.tracker.schemas import (
    ApiResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    UserRead,
)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/register",
    response_model=ApiResponse[UserRead],
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {"description": "User registered"},
        400: {"description": "Invalid payload or email already registered"},
    },
)
async def register(register_data: RegisterRequest, service: AuthServiceDep) -> ApiResponse[UserRead]:
    """Register a new user. The role is assigned by the server, never by the client."""
    user = await service.register(email=register_data.email, password=register_data.password)
    return ApiResponse(message="User registered successfully", data=user)


@router.post(
    "/login",
    response_model=ApiResponse[LoginResponse],
    responses={
        200: {
            "description": "Successful authentication",
            "content": {
                "application/json": {
                    "example": {
                        "success": True,
                        "message": "Login successful",
                        "data": {
                            "user": {
                                "id": "0190f5e2-7c1a-7b8e-9a51-3f0d2c4b6e11",
                                "email": "alice@example.com",
                                "role": "member",
                                "created_at": "2026-01-15T10:30:00",
                                "updated_at": "2026-01-15T10:30:00",
                            },
                            "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                            "token_type": "bearer",
                        },
                    }
                }
            },
        },
        400: {"description": "Email or password missing"},
        401: {"description": "Invalid credentials"},
    },
)
async def login(login_data: LoginRequest, service: AuthServiceDep) -> ApiResponse[LoginResponse]:
    """Exchange email and password for a bearer token."""
    if not login_data.email or not login_data.password:
        raise ValidationFailedError("Email and password are required")

    result = await service.login(login_data.email, login_data.password)
    return ApiResponse(message="Login successful", data=result)
