"""The shopper running a session."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Role(Enum):
    GUEST = "User"
    ADMIN = "Admin"


@dataclass(frozen=True)
class User:
    name: str = "Guest"
    email: str = ""
    role: Role = Role.GUEST

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN

    def __str__(self) -> str:
        return f"{self.name} ({self.role.value})"
