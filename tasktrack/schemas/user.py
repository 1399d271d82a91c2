from pydantic import BaseModel, EmailStr, ConfigDict
from typing import Optional

# required-ness is checked by the service so the error message stays "username and password required"
class UserCreate(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None
    email: Optional[EmailStr] = None

class UserResponse(BaseModel):
    id: int
    username: str

    model_config = ConfigDict(from_attributes=True)

class LoginRequest(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None

class TokenResponse(BaseModel):
    token: str
    user: UserResponse
