# socialgraph/db/base_class.py
from datetime import datetime, timezone
from typing import Any
from sqlalchemy.orm import as_declarative, declared_attr

@as_declarative()
class Base:
    id: Any
    __name__: str

    # Fallback table name when a model doesn't set one
    @declared_attr
    def __tablename__(cls) -> str:
        return cls.__name__.lower()

def utcnow() -> datetime:
    return datetime.now(timezone.utc)
