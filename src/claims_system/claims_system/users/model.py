from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..core.enums import Role


@dataclass(frozen=True)
class Claimant:
    """Domain entity: a lecturer who submits claims.

    Note: plain data object, repositories replace it rather than mutate it.
    """

    claimant_id: int
    name: str
    hourly_rate: float
    first_name: str
    last_name: str
    unique_id: str

    @property
    def role(self) -> Role:
        return Role.LECTURER


@dataclass(frozen=True)
class AdminIdentity:
    """Administrator resolved from the login form. Never stored."""

    first_name: str
    last_name: str
    unique_id: str

    @property
    def name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def role(self) -> Role:
        return Role.ADMIN


Identity = Union[Claimant, AdminIdentity]
