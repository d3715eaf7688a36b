#!/usr/bin/env python3
"""
AI endpoints - generate-content proxy and CV document analysis.

Both relay the upstream response body unchanged.
"""

import logging
from typing import Any, Dict, Optional
from fastapi import APIRouter, Body, Depends, File, Form, UploadFile
from starlette.concurrency import run_in_threadpool

from core.exceptions import ServerMisconfiguredException
from core.llm.interfaces import GenerativeProvider
from intake.pipeline import DocumentIntakePipeline
from ..dependencies import (
    RequestContext,
    get_generative_provider,
    get_intake_pipeline,
    get_request_context,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["ai"])


@router.post("/generate")
def generate(
    ctx: RequestContext = Depends(get_request_context),
    payload: Dict[str, Any] = Body(...),
    provider: GenerativeProvider = Depends(get_generative_provider)
):
    """
    Forward a generateContent body to the AI service.

    The request body is passed through as-is and the upstream JSON is
    returned verbatim.
    """
    if not provider.is_configured:
        logger.error("GOOGLE_API_KEY is not set on the server")
        raise ServerMisconfiguredException("Server is not configured correctly")

    logger.info(f"[{ctx.subject_id}] Forwarding generate request")
    return provider.generate(payload)


@router.post("/process-document")
async def process_document(
    ctx: RequestContext = Depends(get_request_context),
    cv_file: Optional[UploadFile] = File(default=None, alias="cvFile"),
    prompt_id: Optional[str] = Form(default=None, alias="promptId"),
    pipeline: DocumentIntakePipeline = Depends(get_intake_pipeline)
):
    """
    Analyse an uploaded CV.

    - **cvFile**: the PDF document
    - **promptId**: ``job-scout`` for job search advice, anything else for CV feedback
    """
    content = None
    filename = None
    if cv_file is not None:
        filename = cv_file.filename
        try:
            content = await cv_file.read()
        finally:
            await cv_file.close()

    logger.info(f"[{ctx.subject_id}] Processing document {filename!r} with template {prompt_id!r}")
    return await run_in_threadpool(
        pipeline.run,
        content,
        filename=filename,
        template_id=prompt_id,
        subject_id=ctx.subject_id
    )
