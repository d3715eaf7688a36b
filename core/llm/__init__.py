"""LLM Module - generate-content services and interfaces."""
from core.llm.interfaces import GenerativeProvider, build_prompt_payload
from core.llm.gemini_service import GeminiService

__all__ = ['GenerativeProvider', 'GeminiService', 'build_prompt_payload']
