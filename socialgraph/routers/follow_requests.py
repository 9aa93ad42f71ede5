# socialgraph/routers/follow_requests.py

from typing import List
from fastapi import APIRouter, Depends

from socialgraph.common.deps import get_current_account, get_follow_service
from socialgraph.models.account import Account
from socialgraph.models.follow_request import FollowRequestRead
from socialgraph.services.follow_service import FollowService

router = APIRouter()

@router.get("/pending", response_model=List[FollowRequestRead])
def pending_requests(
    current_account: Account = Depends(get_current_account),
    service: FollowService = Depends(get_follow_service),
):
    return service.get_pending_follow_requests(current_account.id)

@router.get("/sent", response_model=List[FollowRequestRead])
def sent_requests(
    current_account: Account = Depends(get_current_account),
    service: FollowService = Depends(get_follow_service),
):
    return service.get_sent_follow_requests(current_account.id)

@router.post("/{requester_id}/accept")
def accept_request(
    requester_id: int,
    current_account: Account = Depends(get_current_account),
    service: FollowService = Depends(get_follow_service),
):
    service.accept_follow_request(current_account.id, requester_id)
    return {"message": "Follow request accepted"}

@router.post("/{requester_id}/reject")
def reject_request(
    requester_id: int,
    current_account: Account = Depends(get_current_account),
    service: FollowService = Depends(get_follow_service),
):
    service.reject_follow_request(current_account.id, requester_id)
    return {"message": "Follow request rejected"}

@router.delete("/{requested_id}")
def cancel_request(
    requested_id: int,
    current_account: Account = Depends(get_current_account),
    service: FollowService = Depends(get_follow_service),
):
    service.cancel_follow_request(current_account.id, requested_id)
    return {"message": "Follow request cancelled"}
