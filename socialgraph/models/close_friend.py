# socialgraph/models/close_friend.py

from typing import List
from sqlalchemy import Column, Integer, ForeignKey, DateTime, UniqueConstraint, CheckConstraint
from pydantic import BaseModel

from socialgraph.db.base_class import Base, utcnow

class CloseFriend(Base):
    __tablename__ = "close_friends"
    __table_args__ = (
        UniqueConstraint("owner_id", "friend_id", name="uq_close_friends_pair"),
        CheckConstraint("owner_id <> friend_id", name="ck_close_friends_not_self"),
    )

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(Integer, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False, index=True)
    friend_id = Column(Integer, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)

class BulkCloseFriendsIn(BaseModel):
    friend_ids: List[int]

class BulkFailure(BaseModel):
    id: int
    reason: str

class BulkCloseFriendsResult(BaseModel):
    added: List[int] = []
    removed: List[int] = []
    failed: List[BulkFailure] = []
