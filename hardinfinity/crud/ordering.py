import logging
import uuid
from typing import Optional

from sqlalchemy import delete, func, select, update
from sqlalchemy.orm import Session

from hardinfinity.errors import InvalidArgumentError

logger = logging.getLogger(__name__)


class SiblingSet:
    def __init__(self, db: Session, model, parent_id: uuid.UUID):
        self.db = db
        self.model = model
        self.parent_id = parent_id
        self._parent_column = getattr(model, model.__sibling_parent__)

    @classmethod
    def of(cls, db: Session, entity) -> "SiblingSet":
        model = type(entity)
        return cls(db, model, getattr(entity, model.__sibling_parent__))

    def _in_scope(self):
        return self._parent_column == self.parent_id

    def max_order(self) -> int:
        return self.db.scalar(select(func.coalesce(func.max(self.model.order), 0)).where(self._in_scope())) or 0

    def _shift(self, delta: int, *conditions) -> None:
        self.db.execute(
            update(self.model)
            .where(self._in_scope(), *conditions)
            .values({self.model.order: self.model.order + delta})
            .execution_options(synchronize_session="fetch")
        )

    def insert(self, entity, order: Optional[int] = None) -> int:
        # explicit positions are clamped to [1, max + 1]
        next_order = self.max_order() + 1
        if not order or order >= next_order:
            target = next_order
        else:
            target = max(1, order)
            self._shift(1, self.model.order >= target)

        entity.order = target
        self.db.add(entity)
        self.db.flush()
        return target

    def move(self, entity, new_order: int) -> bool:
        # targets past the current maximum are not clamped
        if new_order <= 0:
            raise InvalidArgumentError("Order must be a positive integer")

        current = entity.order
        if new_order == current:
            return False

        if new_order < current:
            self._shift(1, self.model.order >= new_order, self.model.order < current)
        else:
            self._shift(-1, self.model.order > current, self.model.order <= new_order)

        entity.order = new_order
        self.db.add(entity)
        self.db.flush()
        logger.info(
            "Moved %s %s from %s to %s", self.model.__tablename__, entity.id, current, new_order
        )
        return True

    def remove(self, entity) -> None:
        removed_order = entity.order
        self.db.execute(
            delete(self.model)
            .where(self.model.id == entity.id)
            .execution_options(synchronize_session="fetch")
        )
        self._shift(-1, self.model.order > removed_order)
