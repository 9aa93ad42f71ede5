# socialgraph/models/follow.py

from sqlalchemy import Column, Integer, ForeignKey, DateTime, UniqueConstraint, CheckConstraint
from sqlalchemy.orm import relationship

from socialgraph.db.base_class import Base, utcnow

class FollowEdge(Base):
    """follower_id follows target_id. Mutual = two rows, one per direction."""
    __tablename__ = "follow_edges"
    __table_args__ = (
        UniqueConstraint("follower_id", "target_id", name="uq_follow_edges_pair"),
        CheckConstraint("follower_id <> target_id", name="ck_follow_edges_not_self"),
    )

    id = Column(Integer, primary_key=True, index=True)
    follower_id = Column(Integer, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False, index=True)
    target_id = Column(Integer, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    follower = relationship("Account", foreign_keys=[follower_id])
    target = relationship("Account", foreign_keys=[target_id])
