from typing import Optional

from pydantic import BaseModel, EmailStr, Field


class UserRegistrationRequest(BaseModel):
    """DTO for user registration request"""
    username: str = Field(min_length=3, max_length=50)
    email: EmailStr
    password: str = Field(min_length=8, max_length=72)
    first_name: Optional[str] = Field(default=None, max_length=50)
    last_name: Optional[str] = Field(default=None, max_length=50)


class UserLoginRequest(BaseModel):
    """DTO for user login request"""
    username: str = Field(min_length=1, max_length=50)
    password: str = Field(min_length=1, max_length=256)


class TokenResponse(BaseModel):
    """DTO for authentication token response"""
    access_token: str
    token_type: str = "bearer"
