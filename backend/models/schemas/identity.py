"""Authenticated identities as resolved per request."""

from typing import Literal

from pydantic import BaseModel

Role = Literal["student", "graduate", "mentor", "admin"]
ROLES: tuple[str, ...] = ("student", "graduate", "mentor", "admin")


class Identity(BaseModel):
    id: str
    email: str
    name: str
    role: Role
    created_at: str = ""


class Session(BaseModel):
    token: str
    identity: Identity
