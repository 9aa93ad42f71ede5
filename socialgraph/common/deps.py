# socialgraph/common/deps.py

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from socialgraph.core.security import decode_account_id
from socialgraph.db.session import get_db
from socialgraph.models.account import Account
from socialgraph.services.close_friends_service import CloseFriendsService
from socialgraph.services.follow_service import FollowService
from socialgraph.services.privacy_service import PrivacyService
from socialgraph.services.restriction_service import RestrictionService

# Tokens come from the identity service; this URL is only advertised in the OpenAPI docs
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/token")

def get_follow_service(db: Session = Depends(get_db)) -> FollowService:
    return FollowService(db=db)

def get_restriction_service(db: Session = Depends(get_db)) -> RestrictionService:
    return RestrictionService(db=db)

def get_close_friends_service(db: Session = Depends(get_db)) -> CloseFriendsService:
    return CloseFriendsService(db=db)

def get_privacy_service(db: Session = Depends(get_db)) -> PrivacyService:
    return PrivacyService(db=db)

def get_current_account(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db)
) -> Account:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    account_id = decode_account_id(token)
    if account_id is None:
        raise credentials_exception

    account = db.query(Account).filter(Account.id == account_id).first()
    if account is None:
        raise credentials_exception
    return account
