import logging
from typing import Optional

from sqlalchemy import select

from database.models import User
from database.models.base import utcnow
from database.repositories.base import BaseRepository, dialect_insert

logger = logging.getLogger(__name__)

DEFAULT_USER_NAME = 'New User'


class UserRepository(BaseRepository):
    def get_by_id(self, user_id: str) -> Optional[User]:
        stmt = select(User).where(User.id == user_id).execution_options(populate_existing=True)
        return self.db.execute(stmt).scalar_one_or_none()

    def ensure_exists(self, user_id: str) -> None:
        """Insert a placeholder user row unless one already exists."""
        now = utcnow()
        stmt = dialect_insert(self.db, User).values(
            id=user_id,
            name=DEFAULT_USER_NAME,
            created_at=now,
            updated_at=now
        ).on_conflict_do_nothing(index_elements=['id'])
        self.db.execute(stmt)

    def sync(self, user_id: str, email: Optional[str], name: Optional[str]) -> User:
        """Create or update the user keyed by the verified subject id."""
        now = utcnow()
        stmt = dialect_insert(self.db, User).values(
            id=user_id,
            email=email,
            name=name or DEFAULT_USER_NAME,
            created_at=now,
            updated_at=now
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=['id'],
            set_={
                'email': stmt.excluded.email,
                'name': stmt.excluded.name,
                'updated_at': stmt.excluded.updated_at,
            }
        )
        self.db.execute(stmt)
        return self.get_by_id(user_id)
