"""
JWT token management.

Issues signed, time-bounded identity tokens and validates them on every
request. Tokens are stateless: there is no server-side session and no
revocation before expiry.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Callable, Dict, Union

import jwt

from firmness.services.common.permissions import Principal

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class RejectionReason(str, Enum):
    """Why a presented token was not accepted."""

    SIGNATURE_INVALID = "signature_invalid"
    EXPIRED = "expired"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class TokenRejected:
    """Outcome of validating a token that must not be trusted."""

    reason: RejectionReason
    detail: str = ""


class TokenService:
    """
    JWT token service for authentication.

    Signs tokens with a symmetric key (HS256 by default). The expiry check is
    done against the injected clock with no leeway, so a token is accepted
    only while ``now < exp``.
    """

    DEFAULT_ALGORITHM = "HS256"
    DEFAULT_EXPIRES_DELTA = timedelta(hours=4)
    ROLE_CLAIM = "role"
    REQUIRED_CLAIMS = ["sub", "email", "exp"]

    def __init__(
        self,
        signing_key: str,
        algorithm: str = DEFAULT_ALGORITHM,
        expires_delta: timedelta = DEFAULT_EXPIRES_DELTA,
        clock: Clock = utc_now,
    ):
        """
        Initialize the token service.

        Args:
            signing_key: Secret key for signing tokens
            algorithm: JWT algorithm (default: HS256)
            expires_delta: Token lifetime (default: 4 hours)
            clock: Returns the current aware UTC time

        Raises:
            ValueError: If no signing key is supplied
        """
        if not signing_key:
            raise ValueError("A JWT signing key is required")

        self._signing_key = signing_key
        self.algorithm = algorithm
        self.expires_delta = expires_delta
        self._clock = clock

        logger.info(
            f"Token service initialized with algorithm {algorithm}, "
            f"tokens expire in {expires_delta}"
        )

    @property
    def expires_in_seconds(self) -> int:
        return int(self.expires_delta.total_seconds())

    def issue(self, principal: Principal) -> str:
        """
        Create a signed access token for ``principal``.

        Args:
            principal: Identity whose id, email and roles become claims

        Returns:
            Encoded JWT token
        """
        now = self._clock()
        payload: Dict[str, Any] = {
            "sub": principal.subject_id,
            "email": principal.email,
            "uid": principal.subject_id,
            self.ROLE_CLAIM: sorted(principal.roles),
            "iat": int(now.timestamp()),
            "exp": int((now + self.expires_delta).timestamp()),
        }

        token = jwt.encode(payload, self._signing_key, algorithm=self.algorithm)
        logger.debug(f"Access token issued for user {principal.subject_id}")
        return token

    def validate(self, token: str) -> Union[Principal, TokenRejected]:
        """
        Verify ``token`` and extract its principal.

        Returns:
            The principal carried by the token, or a ``TokenRejected``
            naming why the token is not trusted
        """
        try:
            payload = jwt.decode(
                token,
                self._signing_key,
                algorithms=[self.algorithm],
                options={
                    "require": self.REQUIRED_CLAIMS,
                    # Expiry is checked below against the service clock.
                    "verify_exp": False,
                    "verify_iat": False,
                },
            )
        except jwt.InvalidSignatureError as e:
            logger.warning(f"Token rejected: {e}")
            return TokenRejected(RejectionReason.SIGNATURE_INVALID, str(e))
        except jwt.InvalidTokenError as e:
            logger.warning(f"Token rejected as malformed: {e}")
            return TokenRejected(RejectionReason.MALFORMED, str(e))

        try:
            expires_at = datetime.fromtimestamp(int(payload["exp"]), tz=timezone.utc)
            principal = Principal(
                subject_id=str(payload["sub"]),
                email=str(payload["email"]),
                roles=self._role_claims(payload),
            )
        except (TypeError, ValueError, OverflowError) as e:
            logger.warning(f"Token rejected as malformed: {e}")
            return TokenRejected(RejectionReason.MALFORMED, str(e))

        if not self._clock() < expires_at:
            logger.warning(f"Token rejected: expired at {expires_at.isoformat()}")
            return TokenRejected(RejectionReason.EXPIRED, "Signature has expired")

        return principal

    def _role_claims(self, payload: Dict[str, Any]) -> frozenset:
        roles = payload.get(self.ROLE_CLAIM, [])
        if isinstance(roles, str):
            roles = [roles]
        if not isinstance(roles, list) or not all(isinstance(r, str) for r in roles):
            raise ValueError("Role claim must be a string or a list of strings")
        return frozenset(roles)
