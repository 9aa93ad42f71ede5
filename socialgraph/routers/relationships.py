# socialgraph/routers/relationships.py

from typing import List
from fastapi import APIRouter, Depends

from socialgraph.common.deps import get_current_account, get_follow_service
from socialgraph.models.account import Account, AccountSummary
from socialgraph.models.relationship import FollowCounts, FollowResult, RelationshipStatusRead
from socialgraph.services.follow_service import FollowService

router = APIRouter()

@router.post("/{target_id}/follow", response_model=FollowResult)
def follow(
    target_id: int,
    current_account: Account = Depends(get_current_account),
    service: FollowService = Depends(get_follow_service),
):
    return service.follow_user(current_account.id, target_id)

@router.delete("/{target_id}/follow")
def unfollow(
    target_id: int,
    current_account: Account = Depends(get_current_account),
    service: FollowService = Depends(get_follow_service),
):
    # Also withdraws a pending request; fine to call when nothing is there
    service.unfollow_user(current_account.id, target_id)
    return {"message": "Unfollowed"}

@router.get("/{subject_id}/status", response_model=RelationshipStatusRead)
def relationship_status(
    subject_id: int,
    current_account: Account = Depends(get_current_account),
    service: FollowService = Depends(get_follow_service),
):
    status = service.get_relationship_status(current_account.id, subject_id)
    return RelationshipStatusRead(viewer_id=current_account.id, subject_id=subject_id, status=status)

@router.get("/{subject_id}/followers", response_model=List[AccountSummary])
def followers(
    subject_id: int,
    current_account: Account = Depends(get_current_account),
    service: FollowService = Depends(get_follow_service),
):
    return service.get_followers(subject_id, current_account.id)

@router.get("/{subject_id}/following", response_model=List[AccountSummary])
def following(
    subject_id: int,
    current_account: Account = Depends(get_current_account),
    service: FollowService = Depends(get_follow_service),
):
    return service.get_following(subject_id, current_account.id)

@router.get("/{subject_id}/mutual-followers", response_model=List[AccountSummary])
def mutual_followers(
    subject_id: int,
    current_account: Account = Depends(get_current_account),
    service: FollowService = Depends(get_follow_service),
):
    # "Followed by people you know": who follows both me and them
    return service.get_mutual_followers(current_account.id, subject_id)

@router.get("/{subject_id}/counts", response_model=FollowCounts)
def follow_counts(
    subject_id: int,
    current_account: Account = Depends(get_current_account),
    service: FollowService = Depends(get_follow_service),
):
    return service.get_follow_counts(subject_id)
