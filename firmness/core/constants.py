# firmness/core/constants.py
"""
Core application constants.

These values centralize the role names and header names used across the
application rather than hard-coding literals in multiple places.
"""
from __future__ import annotations

from enum import Enum


class UserRole(str, Enum):
    """Closed set of roles the routes are gated on."""

    ADMIN = "Admin"
    CUSTOMER = "Customer"


DEFAULT_ROLE: UserRole = UserRole.CUSTOMER

# Common HTTP header names
HEADER_REQUEST_ID: str = "X-Request-ID"
HEADER_PROCESS_TIME: str = "X-Process-Time"
