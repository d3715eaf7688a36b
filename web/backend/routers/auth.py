#!/usr/bin/env python3
"""
Account endpoints - sync the signed-in user into the store.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..dependencies import RequestContext, get_db, get_request_context
from ..models.requests import SyncRequest
from ..services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["auth"])


@router.post("/sync")
def sync_user(
    ctx: RequestContext = Depends(get_request_context),
    body: Optional[SyncRequest] = None,
    db: Session = Depends(get_db)
):
    """
    Create or update the caller's user record.

    Email and name default to the token's claims when the body omits them.
    """
    return UserService(db).sync(ctx, body or SyncRequest())
