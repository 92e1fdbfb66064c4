import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import select

from database.models import Company
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class CompanyRepository(BaseRepository):
    model = Company

    def get_by_name(self, name: str) -> Optional[Company]:
        stmt = select(Company).where(Company.name == name)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_all(self) -> List[Company]:
        """All companies in insertion order."""
        stmt = select(Company).order_by(Company.created_at)
        return self.db.execute(stmt).scalars().all()

    def upsert(self, name: str, fields: Dict[str, Any]) -> Company:
        company = self.get_by_name(name)
        if company is None:
            company = Company(name=name, **fields)
            self.db.add(company)
            logger.info(f"Created company profile {name}")
        else:
            for key, value in fields.items():
                setattr(company, key, value)
            logger.info(f"Updated company profile {name}")
        self.db.flush()
        return company
