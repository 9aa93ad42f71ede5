# socialgraph/models/restriction.py

from typing import List
from sqlalchemy import Column, Integer, ForeignKey, String, DateTime, UniqueConstraint
from pydantic import BaseModel

from socialgraph.db.base_class import Base, utcnow
from socialgraph.models.account import AccountSummary

class Restriction(Base):
    """One row per (restricter, restricted, kind); kinds are independent of each other."""
    __tablename__ = "restrictions"
    __table_args__ = (
        UniqueConstraint("restricter_id", "restricted_id", "kind", name="uq_restrictions_pair_kind"),
    )

    id = Column(Integer, primary_key=True, index=True)
    restricter_id = Column(Integer, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False, index=True)
    restricted_id = Column(Integer, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False, index=True)
    kind = Column(String(20), nullable=False, index=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)

class RestrictionOverview(BaseModel):
    blocked: List[AccountSummary] = []
    restricted: List[AccountSummary] = []
    muted: List[AccountSummary] = []
