# socialgraph/routers/privacy.py

from fastapi import APIRouter, Depends

from socialgraph.common.deps import get_current_account, get_privacy_service
from socialgraph.models.account import Account, AccountSummary
from socialgraph.models.privacy import AccountPrivacyIn, PrivacySettingsRead, PrivacySettingsUpdate
from socialgraph.services.privacy_service import PrivacyService

router = APIRouter()

@router.get("/settings", response_model=PrivacySettingsRead)
def read_settings(
    current_account: Account = Depends(get_current_account),
    service: PrivacyService = Depends(get_privacy_service),
):
    return service.get_privacy_settings(current_account.id)

@router.patch("/settings", response_model=PrivacySettingsRead)
def update_settings(
    data: PrivacySettingsUpdate,
    current_account: Account = Depends(get_current_account),
    service: PrivacyService = Depends(get_privacy_service),
):
    return service.update_privacy_settings(current_account.id, data)

@router.put("/account", response_model=AccountSummary)
def set_account_privacy(
    data: AccountPrivacyIn,
    current_account: Account = Depends(get_current_account),
    service: PrivacyService = Depends(get_privacy_service),
):
    return service.set_account_privacy(current_account.id, data.is_private)
