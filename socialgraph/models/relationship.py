# socialgraph/models/relationship.py

from typing import Optional
from pydantic import BaseModel

from socialgraph.common.enums import RelationshipStatus

class FollowResult(BaseModel):
    success: bool
    status: RelationshipStatus
    requires_approval: Optional[bool] = None
    message: str = ""

class RelationshipStatusRead(BaseModel):
    viewer_id: int
    subject_id: int
    status: RelationshipStatus

class FollowCounts(BaseModel):
    followers: int
    following: int
