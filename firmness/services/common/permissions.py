# firmness/services/common/permissions.py
"""
Authenticated identity used by the authorization layer.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterable, Union

RoleLike = Union[str, Enum]


def role_name(role: RoleLike) -> str:
    """Plain role name for a string or a role enum member."""
    return role.value if isinstance(role, Enum) else role


@dataclass(frozen=True)
class Principal:
    """
    Represents an authenticated user.

    Only ``TokenService.validate`` builds one, from a verified claim set.

    Attributes:
        subject_id: User identifier (the token ``sub`` claim)
        email: User email
        roles: Role names; flat and compared by exact value
    """
    subject_id: str
    email: str
    roles: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        # Accept any iterable of names but always store an immutable set
        object.__setattr__(self, "roles", frozenset(role_name(r) for r in self.roles))

    def has_role(self, role: RoleLike) -> bool:
        """Check if principal has a specific role."""
        return role_name(role) in self.roles

    def has_any_role(self, roles: Iterable[RoleLike]) -> bool:
        """Check if principal has any of the specified roles."""
        return not self.roles.isdisjoint(role_name(r) for r in roles)
