"""Pydantic schemas for Client domain."""

from typing import Optional

from pydantic import BaseModel, field_validator


class ClientBase(BaseModel):
    name: str
    surname: str
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None

    @field_validator("email")
    @classmethod
    def blank_email_is_none(cls, value: Optional[str]) -> Optional[str]:
        # An empty email must not collide with other clients' empty emails
        if value is not None and not value.strip():
            return None
        return value


class ClientCreate(ClientBase):
    pass


class ClientUpdate(ClientBase):
    pass
