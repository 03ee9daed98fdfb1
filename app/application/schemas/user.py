"""Pydantic DTOs for the User feature."""

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """Schema for registering a user with a plain-text password."""

    email: str = Field(
        ..., min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$",
        examples=["jane@example.com"],
    )
    password: str = Field(..., min_length=1, max_length=1024)


class UserResponse(BaseModel):
    """Schema returned to the client — the password hash is never included."""

    id: int
    email: str

    model_config = {"from_attributes": True}


class UserEnvelope(BaseModel):
    data: UserResponse
