"""
Security utilities: password hashing, token issuance/validation and the
role-based access gate.
"""
from .access_gate import AccessDecision, authorize
from .jwt_handler import RejectionReason, TokenRejected, TokenService
from .password_hasher import PasswordHasher

__all__ = [
    "AccessDecision",
    "authorize",
    "PasswordHasher",
    "RejectionReason",
    "TokenRejected",
    "TokenService",
]
