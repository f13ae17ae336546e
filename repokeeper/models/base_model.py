from sqlmodel import SQLModel, Field, select
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from repokeeper.config.db import get_session


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BaseModel(SQLModel):
    id: Optional[int] = Field(default=None, primary_key=True)
    created: datetime = Field(default_factory=utcnow)
    updated: datetime = Field(default_factory=utcnow)

    # Override dict method to handle datetime fields
    def dict(self, *args, **kwargs) -> Dict[str, Any]:
        data = self.model_dump(*args, **kwargs)

        # Convert datetime fields to ISO format
        for key, value in data.items():
            if isinstance(value, datetime):
                data[key] = value.isoformat()
        return data

    def touch(self):
        """Refresh the updated timestamp."""
        self.updated = utcnow()

    def save(self):
        """Save or update an instance."""
        with next(get_session()) as session:
            session.add(self)
            session.commit()
            session.refresh(self)
        return self

    @classmethod
    def get(cls, model_id: int):
        """Fetch a single record by ID."""
        with next(get_session()) as session:
            result = session.exec(select(cls).where(cls.id == model_id)).first()
        return result

    @classmethod
    def get_all(cls):
        """Fetch all records."""
        with next(get_session()) as session:
            return session.exec(select(cls)).all()
