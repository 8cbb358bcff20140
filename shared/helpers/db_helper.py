import logging
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from shared.core.exceptions import PersistenceError

logger = logging.getLogger(__name__)


def commit_or_raise(db: Session, action: str):
    """Commit the session; on a store failure roll back and raise PersistenceError."""
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Database error while %s", action)
        raise PersistenceError(f"Database error while {action}") from exc

