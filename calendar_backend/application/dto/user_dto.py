from typing import Optional

from pydantic import BaseModel, EmailStr


class UserResponse(BaseModel):
    """DTO for user response (no password)"""
    id: str
    username: str
    email: EmailStr
    first_name: Optional[str] = None
    last_name: Optional[str] = None
