"""Pydantic schemas for User and Auth."""

from pydantic import BaseModel

from legalcase.domain.models.enums import UserRole


class UserCreate(BaseModel):
    username: str
    password: str
    email: str
    name: str
    surname: str
    role: UserRole = UserRole.LAWYER
    enabled: bool = True
