# socialgraph/models/account.py

from datetime import datetime
from typing import Optional
from sqlalchemy import Column, Integer, String, Boolean, DateTime
from pydantic import BaseModel, ConfigDict

from socialgraph.db.base_class import Base, utcnow

class Account(Base):
    """
    Read-mostly mirror of the identity service's account record.
    The engine only writes `is_private` (account privacy toggle).
    """
    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), unique=True, index=True, nullable=False)
    display_name = Column(String(100), default="")
    profile_image = Column(String(255), default="")
    verification_badge = Column(Boolean, default=False)

    is_private = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)

class AccountSummary(BaseModel):
    id: int
    username: str
    display_name: Optional[str] = None
    profile_image: Optional[str] = None
    verification_badge: bool = False
    is_private: bool = False
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
