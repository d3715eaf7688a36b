import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

from database.models.base import utcnow

logger = logging.getLogger(__name__)

# Columns the store manages itself; never taken from caller-supplied values.
MANAGED_COLUMNS = {'id', 'user_id', 'created_at', 'updated_at'}


def dialect_insert(db: Session, model):
    """Return an INSERT construct supporting ON CONFLICT for the session's dialect."""
    dialect = db.get_bind().dialect.name
    if dialect == 'postgresql':
        return postgresql.insert(model)
    if dialect == 'sqlite':
        return sqlite.insert(model)
    raise ValueError(f"Upsert is not supported on dialect {dialect!r}")


class BaseRepository:
    def __init__(self, db: Session):
        self.db = db


class OwnedResourceRepository(BaseRepository):
    """
    Create-or-replace store for resources keyed by (owner[, natural key]).

    Subclasses set ``model`` and, for kinds that allow several rows per
    owner, ``key_column``. Writes are a single INSERT ... ON CONFLICT DO
    UPDATE against the unique constraint, so concurrent upserts to one key
    serialize in the database and never leave two rows.
    """
    model = None
    key_column: Optional[str] = None

    def _data_columns(self) -> List[str]:
        excluded = MANAGED_COLUMNS | ({self.key_column} if self.key_column else set())
        return [c.name for c in self.model.__table__.columns if c.name not in excluded]

    def _conflict_columns(self) -> List[str]:
        if self.key_column:
            return ['user_id', self.key_column]
        return ['user_id']

    def _check_key(self, key: Optional[str]) -> None:
        if self.key_column and key is None:
            raise ValueError(f"{self.model.__name__} requires a {self.key_column} key")
        if not self.key_column and key is not None:
            raise ValueError(f"{self.model.__name__} has no secondary key")

    def _owner_filter(self, owner_id: str, key: Optional[str]) -> list:
        clauses = [self.model.user_id == owner_id]
        if self.key_column:
            clauses.append(getattr(self.model, self.key_column) == key)
        return clauses

    def upsert(self, owner_id: str, values: Dict[str, Any], key: Optional[str] = None):
        """
        Create the row for (owner_id, key) or fully replace its data columns.

        Data columns missing from ``values`` are written as NULL.
        Returns the stored row.
        """
        self._check_key(key)

        unknown = set(values) - set(self._data_columns())
        if unknown:
            raise ValueError(f"Unknown {self.model.__name__} columns: {sorted(unknown)}")

        from database.repositories.user import UserRepository
        UserRepository(self.db).ensure_exists(owner_id)

        row_values = {column: values.get(column) for column in self._data_columns()}
        row_values['user_id'] = owner_id
        if self.key_column:
            row_values[self.key_column] = key
        row_values['updated_at'] = utcnow()

        conflict_columns = self._conflict_columns()
        stmt = dialect_insert(self.db, self.model).values(**row_values)
        stmt = stmt.on_conflict_do_update(
            index_elements=conflict_columns,
            set_={
                column: stmt.excluded[column]
                for column in row_values
                if column not in conflict_columns
            }
        )
        self.db.execute(stmt)
        return self.get(owner_id, key)

    def get(self, owner_id: str, key: Optional[str] = None):
        """Return the owner's row for ``key``, or None when nothing was ever saved."""
        self._check_key(key)
        stmt = (
            select(self.model)
            .where(*self._owner_filter(owner_id, key))
            .execution_options(populate_existing=True)
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def list_for_owner(self, owner_id: str) -> list:
        stmt = select(self.model).where(self.model.user_id == owner_id).order_by(self.model.id)
        return list(self.db.execute(stmt).scalars().all())
