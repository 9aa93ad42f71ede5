# socialgraph/models/privacy.py

from datetime import datetime
from typing import Optional
from sqlalchemy import Column, Integer, ForeignKey, String, Boolean, DateTime
from pydantic import BaseModel, ConfigDict

from socialgraph.common.enums import ListVisibility
from socialgraph.db.base_class import Base, utcnow

class PrivacySettings(Base):
    __tablename__ = "privacy_settings"

    # PK doubles as the uniqueness guard for lazy get-or-create
    account_id = Column(Integer, ForeignKey("accounts.id", ondelete="CASCADE"), primary_key=True)

    who_can_see_followers = Column(String(20), default=ListVisibility.EVERYONE.value, nullable=False)
    who_can_see_following = Column(String(20), default=ListVisibility.EVERYONE.value, nullable=False)

    allow_tagging = Column(Boolean, default=True, nullable=False)
    allow_mentions = Column(Boolean, default=True, nullable=False)
    show_activity_status = Column(Boolean, default=True, nullable=False)
    allow_message_requests = Column(Boolean, default=True, nullable=False)
    allow_story_replies = Column(Boolean, default=True, nullable=False)

    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

class PrivacySettingsRead(BaseModel):
    account_id: int
    who_can_see_followers: ListVisibility
    who_can_see_following: ListVisibility
    allow_tagging: bool
    allow_mentions: bool
    show_activity_status: bool
    allow_message_requests: bool
    allow_story_replies: bool
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

class PrivacySettingsUpdate(BaseModel):
    who_can_see_followers: Optional[ListVisibility] = None
    who_can_see_following: Optional[ListVisibility] = None
    allow_tagging: Optional[bool] = None
    allow_mentions: Optional[bool] = None
    show_activity_status: Optional[bool] = None
    allow_message_requests: Optional[bool] = None
    allow_story_replies: Optional[bool] = None

class AccountPrivacyIn(BaseModel):
    is_private: bool
