"""
Role-based access gate.

Roles are flat, unordered sets: no role implies another, so an ``Admin``
principal only passes a check that lists ``Admin``.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable

from firmness.services.common.permissions import Principal, RoleLike, role_name

logger = logging.getLogger(__name__)


class AccessDecision(str, Enum):
    ALLOWED = "allowed"
    DENIED = "denied"


def authorize(principal: Principal, required_roles: Iterable[RoleLike]) -> AccessDecision:
    """
    Allow ``principal`` iff it holds at least one of ``required_roles``.

    Example:
        >>> authorize(principal, [UserRole.ADMIN, UserRole.CUSTOMER])
    """
    required = frozenset(role_name(r) for r in required_roles)
    if principal.has_any_role(required):
        return AccessDecision.ALLOWED

    logger.info(
        f"Access denied for user {principal.subject_id}: "
        f"has {sorted(principal.roles)}, needs one of {sorted(required)}"
    )
    return AccessDecision.DENIED
