#!/usr/bin/env python3
"""
User service - keeps the users table in step with the identity provider.
"""

import logging
from typing import Any, Dict, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.exceptions import PersistenceException
from database.repositories.user import DEFAULT_USER_NAME
from database.uow import store_uow
from ..dependencies import RequestContext
from ..models.requests import SyncRequest
from ..models.responses import SyncResponse, UserResponse

logger = logging.getLogger(__name__)

SYNC_SUCCESS_MESSAGE = "User synchronized"


def _pick(*candidates: Optional[Any]) -> Optional[str]:
    for candidate in candidates:
        if isinstance(candidate, str) and candidate.strip():
            return candidate
    return None


class UserService:
    """Service for user synchronization."""

    def __init__(self, db: Session):
        self.db = db

    def sync(self, ctx: RequestContext, body: SyncRequest) -> Dict[str, Any]:
        """
        Create or update the caller's user row.

        Body fields win; the token's ``email`` and ``name`` claims fill the
        gaps, and the name finally falls back to the default display name.

        Raises:
            PersistenceException: If the database write fails.
        """
        email = _pick(body.email, ctx.claims.get("email"))
        name = _pick(body.name, ctx.claims.get("name")) or DEFAULT_USER_NAME

        try:
            with store_uow(self.db) as store:
                user = store.users.sync(ctx.subject_id, email=email, name=name)
                response = SyncResponse(
                    message=SYNC_SUCCESS_MESSAGE,
                    user=UserResponse.model_validate(user)
                )
        except SQLAlchemyError as e:
            logger.error(f"[{ctx.subject_id}] User sync failed: {e}")
            raise PersistenceException("Failed to synchronize user") from e

        logger.info(f"[{ctx.subject_id}] User synchronized")
        return response.model_dump(by_alias=True, mode="json")
