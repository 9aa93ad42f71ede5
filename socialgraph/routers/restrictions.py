# socialgraph/routers/restrictions.py

from typing import List
from fastapi import APIRouter, Depends

from socialgraph.common.deps import get_current_account, get_restriction_service
from socialgraph.models.account import Account, AccountSummary
from socialgraph.models.restriction import RestrictionOverview
from socialgraph.services.restriction_service import RestrictionService

router = APIRouter()

# --- lists (literal paths first) ---

@router.get("", response_model=RestrictionOverview)
def all_restrictions(
    current_account: Account = Depends(get_current_account),
    service: RestrictionService = Depends(get_restriction_service),
):
    return service.get_all_restrictions(current_account.id)

@router.get("/blocked", response_model=List[AccountSummary])
def blocked_accounts(
    current_account: Account = Depends(get_current_account),
    service: RestrictionService = Depends(get_restriction_service),
):
    return service.get_blocked_accounts(current_account.id)

@router.get("/restricted", response_model=List[AccountSummary])
def restricted_accounts(
    current_account: Account = Depends(get_current_account),
    service: RestrictionService = Depends(get_restriction_service),
):
    return service.get_restricted_accounts(current_account.id)

@router.get("/muted", response_model=List[AccountSummary])
def muted_accounts(
    current_account: Account = Depends(get_current_account),
    service: RestrictionService = Depends(get_restriction_service),
):
    return service.get_muted_accounts(current_account.id)

# --- block ---

@router.post("/{target_id}/block")
def block(
    target_id: int,
    current_account: Account = Depends(get_current_account),
    service: RestrictionService = Depends(get_restriction_service),
):
    service.block_user(current_account.id, target_id)
    return {"message": "User blocked"}

@router.delete("/{target_id}/block")
def unblock(
    target_id: int,
    current_account: Account = Depends(get_current_account),
    service: RestrictionService = Depends(get_restriction_service),
):
    service.unblock_user(current_account.id, target_id)
    return {"message": "User unblocked"}

# --- restrict ---

@router.post("/{target_id}/restrict")
def restrict(
    target_id: int,
    current_account: Account = Depends(get_current_account),
    service: RestrictionService = Depends(get_restriction_service),
):
    service.restrict_user(current_account.id, target_id)
    return {"message": "User restricted"}

@router.delete("/{target_id}/restrict")
def unrestrict(
    target_id: int,
    current_account: Account = Depends(get_current_account),
    service: RestrictionService = Depends(get_restriction_service),
):
    service.unrestrict_user(current_account.id, target_id)
    return {"message": "User unrestricted"}

# --- mute ---

@router.post("/{target_id}/mute")
def mute(
    target_id: int,
    current_account: Account = Depends(get_current_account),
    service: RestrictionService = Depends(get_restriction_service),
):
    service.mute_user(current_account.id, target_id)
    return {"message": "User muted"}

@router.delete("/{target_id}/mute")
def unmute(
    target_id: int,
    current_account: Account = Depends(get_current_account),
    service: RestrictionService = Depends(get_restriction_service),
):
    service.unmute_user(current_account.id, target_id)
    return {"message": "User unmuted"}
