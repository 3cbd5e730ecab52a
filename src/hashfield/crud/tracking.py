"""Keep a hash column in step with the column it is a lookup proxy for"""

import logging
from typing import Callable

from sqlalchemy import event, inspect
from sqlalchemy.orm import QueryableAttribute


logger = logging.getLogger(__name__)


def hash_from(source: QueryableAttribute, target: QueryableAttribute) -> Callable:
    """Copy source into target whenever a row is inserted or source changes.

    The copied value is plaintext; the target's SHA256Hash type hashes it when
    the row is written. Returns the listener, registered for before_insert and
    before_update on the mapped class, so it can be removed with event.remove.
    Raises ValueError if the attributes are the same or on different classes.
    """
    if source.class_ is not target.class_:
        raise ValueError(
            f"{source.class_.__name__}.{source.key} and "
            f"{target.class_.__name__}.{target.key} belong to different models"
        )
    if source.key == target.key:
        raise ValueError(f"Cannot hash {source.key} into itself")

    model = source.class_
    source_key, target_key = source.key, target.key

    def _copy(mapper, connection, instance) -> None:
        state = inspect(instance)
        if state.has_identity and not state.attrs[source_key].history.has_changes():
            return
        setattr(instance, target_key, getattr(instance, source_key))

    for name in ("before_insert", "before_update"):
        event.listen(model, name, _copy, propagate=True)
    logger.debug("Tracking %s.%s -> %s", model.__name__, source_key, target_key)
    return _copy
