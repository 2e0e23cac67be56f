from pydantic import BaseModel, EmailStr, Field
from typing import Optional


class RegisterRequest(BaseModel):
    username: str = Field(min_length=1)
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    email: EmailStr
    phone: Optional[str] = None
    password: str = Field(min_length=1)


class RegisterResponse(BaseModel):
    customer_id: str
    username: str
    email: str

    class Config:
        from_attributes = True


class LoginRequest(BaseModel):
    email: str
    password: str


class LoginResponse(BaseModel):
    message: str
    token: str


class CustomerUpdate(BaseModel):
    """Profile edit. Leaving password out keeps the stored hash."""
    username: str = Field(min_length=1)
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    email: EmailStr
    phone: Optional[str] = None
    password: Optional[str] = None


class CustomerOut(BaseModel):
    customer_id: str
    username: str
    first_name: str
    last_name: str
    email: str
    phone: Optional[str]

    class Config:
        from_attributes = True
