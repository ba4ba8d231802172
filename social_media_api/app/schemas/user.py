"""
Pydantic models for user data.

Registration and login payloads keep every field optional so that a
missing field reaches the service layer and is reported with the API's
own message instead of a framework validation error.  ``UserRead`` is
the public view of an account; the password hash is never part of it.
"""

from typing import Optional

from pydantic import BaseModel, Field


class UserRegister(BaseModel):
    """Schema for registering a user."""

    username: Optional[str] = Field(None, examples=["alice"])
    email: Optional[str] = Field(None, examples=["alice@example.com"])
    password: Optional[str] = Field(None, examples=["s3cret"])


class UserLogin(BaseModel):
    email: Optional[str] = Field(None, examples=["alice@example.com"])
    password: Optional[str] = Field(None, examples=["s3cret"])


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: int
    username: str
    email: str

    model_config = {
        "from_attributes": True,
    }


class TokenIdentity(BaseModel):
    """Claims carried by a verified bearer token."""

    id: int
    username: str
