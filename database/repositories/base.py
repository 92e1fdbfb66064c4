from typing import Any, Optional

from sqlalchemy.orm import Session


class BaseRepository:
    """Session-bound data access. Subclasses set `model` for primary-key lookups."""
    model = None

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, entity_id: Any) -> Optional[Any]:
        return self.db.get(self.model, entity_id)

    def add(self, entity: Any) -> Any:
        """Stage an entity and flush so generated keys are populated."""
        self.db.add(entity)
        self.db.flush()
        return entity
