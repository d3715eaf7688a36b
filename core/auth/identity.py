"""
Identity verification - turns a bearer credential into a verified subject id.

The production verifier checks Firebase ID tokens (RS256 JWTs) against the
provider's published signing keys. Callers only depend on the
IdentityVerifier interface, so tests can substitute a fake.
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import jwt
from jwt import PyJWKClient

from core.exceptions import AuthInvalidException, AuthMissingException

logger = logging.getLogger(__name__)

FIREBASE_JWKS_URL = (
    "https://www.googleapis.com/service_accounts/v1/jwk/"
    "securetoken@system.gserviceaccount.com"
)
FIREBASE_ISSUER_PREFIX = "https://securetoken.google.com/"

BEARER_PREFIX = "Bearer "


@dataclass(frozen=True)
class VerifiedIdentity:
    """Result of a successful verification."""
    subject_id: str
    claims: Dict[str, Any] = field(default_factory=dict)


def describe_auth_header(header: Optional[str]) -> str:
    """Describe the shape of an Authorization header without exposing the secret."""
    if header is None:
        return "<missing>"
    if not header.strip():
        return "<empty>"
    scheme, _, credential = header.partition(" ")
    if header.startswith(BEARER_PREFIX):
        return f"Bearer <redacted len={len(credential.strip())}>"
    if not credential:
        return "<no scheme>"
    return f"{scheme[:16]} <redacted>"


def parse_bearer_token(header: Optional[str]) -> str:
    """
    Extract the credential from a ``Bearer <token>`` header.

    Raises:
        AuthMissingException: If the header is absent, uses another scheme,
            or carries an empty credential.
    """
    if not header or not header.startswith(BEARER_PREFIX):
        logger.warning(f"Token missing or malformed: {describe_auth_header(header)}")
        raise AuthMissingException("Token missing or malformed")

    token = header[len(BEARER_PREFIX):].strip()
    if not token:
        logger.warning(f"Token missing or malformed: {describe_auth_header(header)}")
        raise AuthMissingException("Token missing or malformed")
    return token


class IdentityVerifier(ABC):
    """
    Abstract interface for identity providers.
    """

    @abstractmethod
    def verify(self, token: str) -> VerifiedIdentity:
        """
        Verify a credential.

        Raises:
            AuthInvalidException: If the provider rejects the credential.
        """
        pass

    def close(self) -> None:
        """Release any held resources."""
        pass


class FirebaseTokenVerifier(IdentityVerifier):
    """Verifies Firebase Authentication ID tokens with PyJWT."""

    def __init__(
        self,
        project_id: str,
        jwks_url: str = FIREBASE_JWKS_URL,
        timeout_seconds: int = 10,
        leeway_seconds: int = 0,
    ):
        self.project_id = project_id
        self.issuer = f"{FIREBASE_ISSUER_PREFIX}{project_id}"
        self.leeway_seconds = leeway_seconds
        self._jwks_client = PyJWKClient(jwks_url, timeout=timeout_seconds)

    def verify(self, token: str) -> VerifiedIdentity:
        if not self.project_id:
            logger.error("Identity verification attempted without a configured project id")
            raise AuthInvalidException("Token invalid")

        try:
            signing_key = self._jwks_client.get_signing_key_from_jwt(token)
            claims = jwt.decode(
                token,
                signing_key.key,
                algorithms=["RS256"],
                audience=self.project_id,
                issuer=self.issuer,
                leeway=self.leeway_seconds,
                options={"require": ["exp", "iat", "sub"]},
            )
        except jwt.ExpiredSignatureError:
            logger.warning("Token rejected: expired")
            raise AuthInvalidException("Token invalid")
        except jwt.PyJWTError as e:
            logger.warning(f"Token rejected: {e.__class__.__name__}: {e}")
            raise AuthInvalidException("Token invalid")

        subject_id = claims.get("sub")
        if not isinstance(subject_id, str) or not subject_id:
            logger.warning("Token rejected: empty subject")
            raise AuthInvalidException("Token invalid")

        return VerifiedIdentity(subject_id=subject_id, claims=claims)
