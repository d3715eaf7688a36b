import contextlib
import logging

from sqlalchemy.orm import Session

from database.repository import ResourceStore

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def store_uow(session: Session):
    """Per-unit-of-work transaction scope.

    Yields a ResourceStore bound to the given request-scoped Session.
    Commits on success, rolls back on exception. Closing the session is
    left to whoever opened it.

    Usage:
        with store_uow(db) as store:
            task = store.tasks.create(owner_id, "Write tests")
        # commit happens automatically on successful exit
    """
    try:
        store = ResourceStore(session)
        yield store
        session.commit()
    except Exception:
        session.rollback()
        raise
