"""
Document intake pipeline - upload -> text extraction -> template selection ->
generate-content dispatch -> verbatim relay.

One attempt per request. The first failing stage ends the request:
parse failures can only come from extraction, upstream failures only from
dispatch.
"""
import logging
from enum import Enum
from typing import Any, Dict, Optional

from core.exceptions import (
    ServerMisconfiguredException,
    UpstreamServiceException,
    ValidationException,
)
from core.llm.interfaces import GenerativeProvider
from core.llm.system_prompts import (
    ANALYSIS_TEMPLATES,
    CV_TEXT_HEADER,
    DEFAULT_ANALYSIS_TEMPLATE,
)
from intake.parser import DocumentParser

logger = logging.getLogger(__name__)

NO_FILE_MESSAGE = "No file uploaded"
UPSTREAM_FAILURE_MESSAGE = "Failed to process CV"


class IntakeStage(str, Enum):
    RECEIVED = "received"
    EXTRACTED = "extracted"
    DISPATCHED = "dispatched"
    RELAYED = "relayed"


def select_template(template_id: Optional[str]) -> str:
    """Return the instruction text for a template id; unknown ids use the default."""
    if template_id in ANALYSIS_TEMPLATES:
        return ANALYSIS_TEMPLATES[template_id]
    if template_id:
        logger.info(f"Unknown analysis template {template_id!r}, using {DEFAULT_ANALYSIS_TEMPLATE!r}")
    return ANALYSIS_TEMPLATES[DEFAULT_ANALYSIS_TEMPLATE]


def compose_prompt(template: str, document_text: str) -> str:
    return f"{template}\n\n{CV_TEXT_HEADER}\n{document_text}"


class DocumentIntakePipeline:
    """Runs one uploaded document through extraction and AI analysis."""

    def __init__(
        self,
        provider: GenerativeProvider,
        parser: Optional[DocumentParser] = None,
        max_size_bytes: Optional[int] = None
    ):
        self.provider = provider
        self.parser = parser or DocumentParser()
        self.max_size_bytes = max_size_bytes

    def run(
        self,
        content: Optional[bytes],
        filename: Optional[str] = None,
        template_id: Optional[str] = None,
        subject_id: str = "-",
    ) -> Dict[str, Any]:
        """
        Process an uploaded document.

        Args:
            content: Uploaded file bytes, or None when no file was attached
            filename: Original filename (logging only)
            template_id: Analysis template identifier
            subject_id: Verified subject id of the caller (logging only)

        Returns:
            The upstream generate-content response, unmodified.

        Raises:
            ServerMisconfiguredException: If the provider has no credentials
            ValidationException: If no file was uploaded or it is too large
            DocumentParseException: If text extraction fails
            UpstreamServiceException: If the generate-content call fails
        """
        if not self.provider.is_configured:
            logger.error("GOOGLE_API_KEY is not set on the server")
            raise ServerMisconfiguredException("Server is not configured correctly")

        if not content:
            raise ValidationException(NO_FILE_MESSAGE)
        if self.max_size_bytes and len(content) > self.max_size_bytes:
            raise ValidationException(
                f"File size exceeds {self.max_size_bytes // (1024 * 1024)}MB limit"
            )
        self._log_stage(IntakeStage.RECEIVED, subject_id)

        parsed = self.parser.parse(content, filename=filename)
        self._log_stage(IntakeStage.EXTRACTED, subject_id)
        logger.info(f"[{subject_id}] Parsed {filename!r} ({parsed.page_count} pages)")

        prompt = compose_prompt(select_template(template_id), parsed.text)

        self._log_stage(IntakeStage.DISPATCHED, subject_id)
        try:
            result = self.provider.generate_from_prompt(prompt)
        except UpstreamServiceException as e:
            logger.error(f"[{subject_id}] Upstream failure at stage {IntakeStage.DISPATCHED.value}: {e.detail}")
            raise UpstreamServiceException(UPSTREAM_FAILURE_MESSAGE, detail=e.detail) from e

        self._log_stage(IntakeStage.RELAYED, subject_id)
        logger.info(f"[{subject_id}] Received AI response for CV")
        return result

    @staticmethod
    def _log_stage(stage: IntakeStage, subject_id: str) -> None:
        logger.debug(f"[{subject_id}] Intake stage: {stage.value}")
