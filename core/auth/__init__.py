"""Auth Module - bearer credential verification."""
from core.auth.identity import (
    IdentityVerifier,
    FirebaseTokenVerifier,
    VerifiedIdentity,
    describe_auth_header,
    parse_bearer_token,
)

__all__ = [
    'IdentityVerifier',
    'FirebaseTokenVerifier',
    'VerifiedIdentity',
    'describe_auth_header',
    'parse_bearer_token',
]
