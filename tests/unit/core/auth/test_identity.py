"""
Unit tests for bearer parsing and Firebase ID token verification.

Tokens are signed with a throwaway RSA key; the JWKS lookup is mocked so no
network is involved.
"""
import time
from unittest.mock import MagicMock

import jwt
import pytest
from cryptography.hazmat.primitives.asymmetric import rsa

from core.auth.identity import (
    FIREBASE_ISSUER_PREFIX,
    FirebaseTokenVerifier,
    describe_auth_header,
    parse_bearer_token,
)
from core.exceptions import AuthInvalidException, AuthMissingException

PROJECT_ID = "onepercent-test"


@pytest.fixture(scope="module")
def signing_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


def _make_token(private_key, **overrides) -> str:
    now = int(time.time())
    claims = {
        "iss": f"{FIREBASE_ISSUER_PREFIX}{PROJECT_ID}",
        "aud": PROJECT_ID,
        "sub": "user-abc",
        "iat": now,
        "exp": now + 3600,
        "email": "ada@example.com",
    }
    claims.update(overrides)
    claims = {k: v for k, v in claims.items() if v is not None}
    return jwt.encode(claims, private_key, algorithm="RS256", headers={"kid": "test-key"})


def _verifier(public_key, project_id: str = PROJECT_ID) -> FirebaseTokenVerifier:
    verifier = FirebaseTokenVerifier(project_id=project_id)
    verifier._jwks_client = MagicMock()
    verifier._jwks_client.get_signing_key_from_jwt.return_value = MagicMock(key=public_key)
    return verifier


class TestParseBearerToken:

    def test_extracts_credential(self):
        assert parse_bearer_token("Bearer abc.def.ghi") == "abc.def.ghi"

    @pytest.mark.parametrize("header", [None, "", "Basic dXNlcjpwYXNz", "Bearer ", "bearer abc"])
    def test_missing_or_malformed_header_is_auth_missing(self, header):
        with pytest.raises(AuthMissingException) as exc_info:
            parse_bearer_token(header)
        assert exc_info.value.status_code == 401
        assert exc_info.value.message == "Token missing or malformed"


class TestDescribeAuthHeader:

    def test_never_includes_the_credential(self):
        described = describe_auth_header("Bearer super-secret-token")
        assert "super-secret-token" not in described
        assert described == "Bearer <redacted len=18>"

    def test_missing_header(self):
        assert describe_auth_header(None) == "<missing>"


class TestFirebaseTokenVerifier:

    def test_valid_token_yields_subject_and_claims(self, signing_key):
        verifier = _verifier(signing_key.public_key())
        identity = verifier.verify(_make_token(signing_key))

        assert identity.subject_id == "user-abc"
        assert identity.claims["email"] == "ada@example.com"

    def test_expired_token_is_rejected(self, signing_key):
        verifier = _verifier(signing_key.public_key())
        token = _make_token(signing_key, iat=int(time.time()) - 7200, exp=int(time.time()) - 3600)

        with pytest.raises(AuthInvalidException) as exc_info:
            verifier.verify(token)
        assert exc_info.value.status_code == 403

    def test_wrong_audience_is_rejected(self, signing_key):
        verifier = _verifier(signing_key.public_key())
        with pytest.raises(AuthInvalidException):
            verifier.verify(_make_token(signing_key, aud="someone-elses-project"))

    def test_wrong_issuer_is_rejected(self, signing_key):
        verifier = _verifier(signing_key.public_key())
        with pytest.raises(AuthInvalidException):
            verifier.verify(_make_token(signing_key, iss="https://evil.example.com/"))

    def test_signature_from_another_key_is_rejected(self, signing_key):
        other_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
        verifier = _verifier(signing_key.public_key())
        with pytest.raises(AuthInvalidException):
            verifier.verify(_make_token(other_key))

    def test_empty_subject_is_rejected(self, signing_key):
        verifier = _verifier(signing_key.public_key())
        with pytest.raises(AuthInvalidException):
            verifier.verify(_make_token(signing_key, sub=""))

    def test_garbage_token_is_rejected(self, signing_key):
        verifier = FirebaseTokenVerifier(project_id=PROJECT_ID)
        verifier._jwks_client = MagicMock()
        verifier._jwks_client.get_signing_key_from_jwt.side_effect = jwt.exceptions.DecodeError("bad")
        with pytest.raises(AuthInvalidException):
            verifier.verify("not-a-jwt")

    def test_unconfigured_project_rejects_everything(self, signing_key):
        verifier = _verifier(signing_key.public_key(), project_id="")
        with pytest.raises(AuthInvalidException):
            verifier.verify(_make_token(signing_key))
        verifier._jwks_client.get_signing_key_from_jwt.assert_not_called()
