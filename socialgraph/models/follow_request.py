# socialgraph/models/follow_request.py

from datetime import datetime
from typing import Optional
from sqlalchemy import Column, Integer, ForeignKey, String, DateTime, Index, CheckConstraint, text
from sqlalchemy.orm import relationship
from pydantic import BaseModel, ConfigDict

from socialgraph.common.enums import FollowRequestStatus
from socialgraph.db.base_class import Base, utcnow
from socialgraph.models.account import AccountSummary

_PENDING_ONLY = text("status = 'pending'")

class FollowRequest(Base):
    __tablename__ = "follow_requests"
    __table_args__ = (
        # Terminal rows stay for audit, so uniqueness only covers the pending one
        Index(
            "uq_follow_requests_pending_pair",
            "requester_id",
            "requested_id",
            unique=True,
            sqlite_where=_PENDING_ONLY,
            postgresql_where=_PENDING_ONLY,
        ),
        CheckConstraint("requester_id <> requested_id", name="ck_follow_requests_not_self"),
    )

    id = Column(Integer, primary_key=True, index=True)
    requester_id = Column(Integer, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False, index=True)
    requested_id = Column(Integer, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False, index=True)
    status = Column(String(20), default=FollowRequestStatus.PENDING.value, nullable=False, index=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    responded_at = Column(DateTime, nullable=True)

    requester = relationship("Account", foreign_keys=[requester_id])
    requested = relationship("Account", foreign_keys=[requested_id])

class FollowRequestRead(BaseModel):
    id: int
    requester_id: int
    requested_id: int
    status: FollowRequestStatus
    created_at: datetime
    responded_at: Optional[datetime] = None

    # Received lists eager-load requester, sent lists eager-load requested
    requester: Optional[AccountSummary] = None
    requested: Optional[AccountSummary] = None

    model_config = ConfigDict(from_attributes=True)
