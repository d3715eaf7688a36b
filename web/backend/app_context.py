import logging
from dataclasses import dataclass

from core.auth.identity import FirebaseTokenVerifier, IdentityVerifier
from core.llm.gemini_service import GeminiService
from core.llm.interfaces import GenerativeProvider
from database.database import DatabaseManager
from .config import AppConfig

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Application context container that holds all process-scoped services.

    Built once at startup and closed at shutdown. Request handlers receive
    these through FastAPI dependencies; DB sessions are opened per request.
    """
    config: AppConfig
    db: DatabaseManager
    identity_verifier: IdentityVerifier
    generative_provider: GenerativeProvider

    @classmethod
    def build(cls, config: AppConfig) -> "AppContext":
        """Build an AppContext from config.

        Args:
            config: Loaded application configuration

        Returns:
            Fully wired AppContext instance
        """
        db = DatabaseManager(
            config.database.url,
            pool_size=config.database.pool_size,
            max_overflow=config.database.max_overflow
        )
        if config.database.create_tables:
            db.create_tables()

        if not config.auth.firebase_project_id:
            logger.warning("FIREBASE_PROJECT_ID is not set; every bearer token will be rejected")
        identity_verifier = FirebaseTokenVerifier(
            project_id=config.auth.firebase_project_id or "",
            jwks_url=config.auth.jwks_url,
            timeout_seconds=config.auth.timeout_seconds,
            leeway_seconds=config.auth.leeway_seconds
        )

        if not config.llm.api_key:
            logger.warning("GOOGLE_API_KEY is not set; AI endpoints will answer 500")
        generative_provider = GeminiService(
            api_key=config.llm.api_key,
            model=config.llm.model,
            base_url=config.llm.base_url,
            timeout_seconds=config.llm.timeout_seconds
        )

        return cls(
            config=config,
            db=db,
            identity_verifier=identity_verifier,
            generative_provider=generative_provider
        )

    def close(self) -> None:
        """Release connections held by the services."""
        self.generative_provider.close()
        self.identity_verifier.close()
        self.db.dispose()
