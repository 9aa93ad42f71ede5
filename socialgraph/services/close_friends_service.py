# socialgraph/services/close_friends_service.py

import logging
from typing import List

from sqlalchemy.orm import Session

from socialgraph.common.enums import FOLLOWING_STATUSES
from socialgraph.core.errors import PreconditionFailedError, SelfReferenceError, SocialGraphError
from socialgraph.models.account import Account
from socialgraph.models.close_friend import BulkCloseFriendsResult, BulkFailure
from socialgraph.services.relationship_store import RelationshipStore
from socialgraph.services.status_resolver import StatusResolver

logger = logging.getLogger(__name__)

class CloseFriendsService:

    def __init__(self, db: Session):
        self.db = db
        self.store = RelationshipStore(db)
        self.resolver = StatusResolver(self.store)

    def add_to_close_friends(self, owner_id: int, friend_id: int) -> None:
        if owner_id == friend_id:
            raise SelfReferenceError("Cannot add yourself to close friends")

        # Already listed: the resolver would now say CLOSE_FRIEND, so answer before asking it
        if self.store.is_close_friend(owner_id, friend_id):
            return

        status = self.resolver.resolve(owner_id, friend_id)
        if status not in FOLLOWING_STATUSES:
            logger.debug("close friend %s -> %s refused: status %s", owner_id, friend_id, status.value)
            raise PreconditionFailedError("Can only add accounts you follow to close friends")

        if self.store.add_close_friend(owner_id, friend_id):
            logger.info("account %s added %s to close friends", owner_id, friend_id)
        self.db.commit()

    def remove_from_close_friends(self, owner_id: int, friend_id: int) -> None:
        removed = self.store.delete_close_friend(owner_id, friend_id)
        self.db.commit()
        if removed:
            logger.info("account %s removed %s from close friends", owner_id, friend_id)

    def get_close_friends(self, owner_id: int) -> List[Account]:
        return self.store.close_friends_of(owner_id)

    def get_close_friends_count(self, owner_id: int) -> int:
        return self.store.count_close_friends(owner_id)

    def is_in_close_friends_list(self, account_id: int, owner_id: int) -> bool:
        """Has `owner_id` put `account_id` on their list?"""
        return self.store.is_close_friend(owner_id, account_id)

    def get_added_by_close_friends(self, account_id: int) -> List[Account]:
        return self.store.close_friend_owners(account_id)

    def bulk_add_close_friends(self, owner_id: int, friend_ids: List[int]) -> BulkCloseFriendsResult:
        result = BulkCloseFriendsResult()
        for friend_id in friend_ids:
            try:
                self.add_to_close_friends(owner_id, friend_id)
            except SocialGraphError as e:
                result.failed.append(BulkFailure(id=friend_id, reason=e.message))
            else:
                result.added.append(friend_id)
        return result

    def bulk_remove_close_friends(self, owner_id: int, friend_ids: List[int]) -> BulkCloseFriendsResult:
        result = BulkCloseFriendsResult()
        for friend_id in friend_ids:
            self.remove_from_close_friends(owner_id, friend_id)
            result.removed.append(friend_id)
        return result
