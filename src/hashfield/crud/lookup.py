"""Row lookup by hash column, using plaintext or a tagged digest as the key"""

from typing import Any

from sqlalchemy.orm import QueryableAttribute
from sqlmodel import Session, select


def _by_hash(column: QueryableAttribute, value: Any):
    return select(column.class_).where(column == value)


def get_by_hash(session: Session, column: QueryableAttribute, value: Any) -> Any | None:
    """Return the first row whose hash column matches value, or None. None never matches."""
    if value is None:
        return None
    return session.exec(_by_hash(column, value)).first()


def list_by_hash(session: Session, column: QueryableAttribute, value: Any) -> list[Any]:
    """Return all rows whose hash column matches value."""
    if value is None:
        return []
    return list(session.exec(_by_hash(column, value)).all())
