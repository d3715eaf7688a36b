#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.

Process-scoped services are built once in the application lifespan and
stored on ``app.state.context``; these functions hand them to path
operations. Tests replace them through ``app.dependency_overrides``.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Generator, Optional

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from core.auth.identity import IdentityVerifier, describe_auth_header, parse_bearer_token
from core.exceptions import AuthInvalidException
from core.llm.interfaces import GenerativeProvider
from intake.pipeline import DocumentIntakePipeline
from .app_context import AppContext
from .config import AppConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestContext:
    """Verified caller identity, passed explicitly to every service call."""
    subject_id: str
    claims: Dict[str, Any] = field(default_factory=dict)


def get_app_context(request: Request) -> AppContext:
    """Return the services built at startup."""
    return request.app.state.context


def get_settings(request: Request) -> AppConfig:
    """Return the configuration the app was created with."""
    return request.app.state.config


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a database session.

    Usage:
        @router.get("/endpoint")
        def my_endpoint(db: Session = Depends(get_db)):
            ...

    Yields:
        Session: Database session that will be automatically closed.
    """
    yield from get_app_context(request).db.get_session()


def get_identity_verifier(request: Request) -> IdentityVerifier:
    return get_app_context(request).identity_verifier


def get_generative_provider(request: Request) -> GenerativeProvider:
    return get_app_context(request).generative_provider


def get_intake_pipeline(
    provider: GenerativeProvider = Depends(get_generative_provider),
    settings: AppConfig = Depends(get_settings)
) -> DocumentIntakePipeline:
    return DocumentIntakePipeline(provider, max_size_bytes=settings.upload.max_size_bytes)


def get_request_context(
    authorization: Optional[str] = Header(None),
    verifier: IdentityVerifier = Depends(get_identity_verifier)
) -> RequestContext:
    """
    Identity gate: verify the bearer credential and return the caller's context.

    Raises:
        AuthMissingException: No ``Bearer`` credential (401).
        AuthInvalidException: The identity provider rejected it (403).
    """
    token = parse_bearer_token(authorization)
    try:
        identity = verifier.verify(token)
    except AuthInvalidException:
        logger.warning(f"Token invalid: {describe_auth_header(authorization)}")
        raise

    logger.debug(f"[{identity.subject_id}] Authenticated")
    return RequestContext(subject_id=identity.subject_id, claims=identity.claims)
