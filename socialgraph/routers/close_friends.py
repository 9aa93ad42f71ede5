# socialgraph/routers/close_friends.py

from typing import List
from fastapi import APIRouter, Depends

from socialgraph.common.deps import get_current_account, get_close_friends_service
from socialgraph.models.account import Account, AccountSummary
from socialgraph.models.close_friend import BulkCloseFriendsIn, BulkCloseFriendsResult
from socialgraph.services.close_friends_service import CloseFriendsService

router = APIRouter()

@router.get("", response_model=List[AccountSummary])
def list_close_friends(
    current_account: Account = Depends(get_current_account),
    service: CloseFriendsService = Depends(get_close_friends_service),
):
    # Only ever your own list
    return service.get_close_friends(current_account.id)

@router.get("/count")
def close_friends_count(
    current_account: Account = Depends(get_current_account),
    service: CloseFriendsService = Depends(get_close_friends_service),
):
    return {"count": service.get_close_friends_count(current_account.id)}

@router.get("/added-by", response_model=List[AccountSummary])
def added_by(
    current_account: Account = Depends(get_current_account),
    service: CloseFriendsService = Depends(get_close_friends_service),
):
    return service.get_added_by_close_friends(current_account.id)

@router.post("/bulk-add", response_model=BulkCloseFriendsResult)
def bulk_add(
    data: BulkCloseFriendsIn,
    current_account: Account = Depends(get_current_account),
    service: CloseFriendsService = Depends(get_close_friends_service),
):
    return service.bulk_add_close_friends(current_account.id, data.friend_ids)

@router.post("/bulk-remove", response_model=BulkCloseFriendsResult)
def bulk_remove(
    data: BulkCloseFriendsIn,
    current_account: Account = Depends(get_current_account),
    service: CloseFriendsService = Depends(get_close_friends_service),
):
    return service.bulk_remove_close_friends(current_account.id, data.friend_ids)

@router.put("/{friend_id}")
def add_close_friend(
    friend_id: int,
    current_account: Account = Depends(get_current_account),
    service: CloseFriendsService = Depends(get_close_friends_service),
):
    service.add_to_close_friends(current_account.id, friend_id)
    return {"message": "Added to close friends"}

@router.delete("/{friend_id}")
def remove_close_friend(
    friend_id: int,
    current_account: Account = Depends(get_current_account),
    service: CloseFriendsService = Depends(get_close_friends_service),
):
    service.remove_from_close_friends(current_account.id, friend_id)
    return {"message": "Removed from close friends"}
