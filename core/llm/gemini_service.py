"""
Gemini Service - generate-content client for the Google Generative Language API.

The API key and endpoint come from configuration and are attached per request;
the service never retries, a failed call surfaces immediately.
"""
from typing import Dict, Any, Optional
import logging

import requests

from core.exceptions import ServerMisconfiguredException, UpstreamServiceException
from core.llm.interfaces import GenerativeProvider

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-pro"


def _error_detail(response: requests.Response) -> Any:
    """Return the upstream error body as JSON when possible, else as text."""
    try:
        return response.json()
    except ValueError:
        return response.text


class GeminiService(GenerativeProvider):
    """
    Gemini generateContent client.

    Holds one requests.Session for connection reuse across requests.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = DEFAULT_MODEL,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = 60.0,
        session: Optional[requests.Session] = None
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.session = session or requests.Session()

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    def generate(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        if not self.is_configured:
            logger.error("GOOGLE_API_KEY is not set on the server")
            raise ServerMisconfiguredException("Server is not configured correctly")

        try:
            response = self.session.post(
                self.endpoint,
                params={"key": self.api_key},
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout_seconds,
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Generate-content request failed: {e}")
            raise UpstreamServiceException("Failed to reach AI service", detail=str(e)) from e

        if not response.ok:
            detail = _error_detail(response)
            logger.error(f"Generate-content API error: {response.status_code} - {detail}")
            raise UpstreamServiceException("Failed to reach AI service", detail=detail)

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Generate-content API returned a non-JSON body: {response.text[:200]}")
            raise UpstreamServiceException("Failed to reach AI service", detail=response.text) from e

    def close(self) -> None:
        self.session.close()
