"""
Document Parser - extract text from uploaded page-oriented documents (PDF).

Uploads are handled in memory and never written to disk. Whether a file is
readable is decided by pypdf alone: anything pypdf refuses becomes a
DocumentParseException, which the boundary reports as a user error.
"""
import io
import logging
from dataclasses import dataclass
from typing import Optional

from pypdf import PdfReader

from core.exceptions import DocumentParseException

logger = logging.getLogger(__name__)

INVALID_DOCUMENT_MESSAGE = "File is not a valid document or is corrupted"


@dataclass
class ParsedDocument:
    """Result of parsing an uploaded document.

    Attributes:
        text: Extracted text suitable for LLM processing
        page_count: Number of pages in the document
        filename: Original filename as sent by the client (display only)
    """
    text: str
    page_count: int
    filename: Optional[str] = None


class DocumentParser:
    """Extract text from PDF bytes."""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def parse(self, content: bytes, filename: Optional[str] = None) -> ParsedDocument:
        """Parse an uploaded document and extract its text.

        Args:
            content: Raw file bytes
            filename: Original filename, used for logging only

        Returns:
            ParsedDocument with the text of all pages

        Raises:
            DocumentParseException: If pypdf cannot read the bytes as a document
        """
        try:
            reader = PdfReader(io.BytesIO(content))

            if len(reader.pages) == 0:
                raise ValueError("PDF file has no pages")

            # An extraction error on any page rejects the whole document
            pages_text = []
            for page in reader.pages:
                page_text = page.extract_text()
                if page_text and page_text.strip():
                    pages_text.append(page_text.strip())

            text = '\n'.join(pages_text)
            page_count = len(reader.pages)
        except Exception as e:
            self.logger.warning(f"Failed to parse uploaded document {filename!r}: {e}")
            raise DocumentParseException(INVALID_DOCUMENT_MESSAGE) from e

        if not text.strip():
            self.logger.warning(
                f"No text extracted from {filename!r}. "
                f"The PDF may be scanned images or have text extraction disabled."
            )

        self.logger.debug(
            f"Parsed document {filename!r} ({page_count} pages, {len(text)} chars extracted)"
        )

        return ParsedDocument(text=text, page_count=page_count, filename=filename)
