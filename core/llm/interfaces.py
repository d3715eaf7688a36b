"""
Generative Provider Interface - Abstract base for generate-content services.

This module defines the interface the request boundary and the document
intake pipeline depend on. Implementations relay the upstream payload
without reinterpreting it.
"""
from abc import ABC, abstractmethod
from typing import Dict, Any


class GenerativeProvider(ABC):
    """
    Abstract Interface for generate-content providers (Gemini, test fakes, etc.).
    """

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """True when the provider holds the credentials it needs to dispatch."""
        pass

    @abstractmethod
    def generate(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Send a generate-content request and return the upstream JSON verbatim.

        Args:
            payload: Request body in the provider's wire format

        Raises:
            ServerMisconfiguredException: If the provider is not configured
            UpstreamServiceException: On network errors, timeouts, non-2xx
                responses or non-JSON bodies
        """
        pass

    def generate_from_prompt(self, prompt: str) -> Dict[str, Any]:
        """Wrap a single text prompt in the provider's request shape and dispatch it."""
        return self.generate(build_prompt_payload(prompt))

    def close(self) -> None:
        """Release any held resources."""
        pass


def build_prompt_payload(prompt: str) -> Dict[str, Any]:
    """Build a single-turn generateContent body for a text prompt."""
    return {"contents": [{"parts": [{"text": prompt}]}]}
