from pydantic import BaseModel, Field


class UserRegister(BaseModel):
    username: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserLogin(BaseModel):
    username: str
    password: str


class UserPublic(BaseModel):
    """User as exposed after login, never carries the password"""
    username: str
    email: str


class LoginOut(BaseModel):
    message: str
    user: UserPublic
