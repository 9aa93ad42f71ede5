# socialgraph/services/restriction_service.py

import logging
from typing import List

from sqlalchemy.orm import Session

from socialgraph.common.enums import FollowRequestStatus, RestrictionKind
from socialgraph.core.errors import NotFoundError, SelfReferenceError
from socialgraph.models.account import Account, AccountSummary
from socialgraph.models.restriction import RestrictionOverview
from socialgraph.services.relationship_store import RelationshipStore

logger = logging.getLogger(__name__)

_VERBS = {
    RestrictionKind.BLOCKED: "block",
    RestrictionKind.RESTRICTED: "restrict",
    RestrictionKind.MUTED: "mute",
}

class RestrictionService:
    """
    Block / restrict / mute.

    Blocking is destructive in both directions. Restrict and mute only damp
    visibility and never touch follow edges.
    """

    def __init__(self, db: Session):
        self.db = db
        self.store = RelationshipStore(db)

    def block_user(self, blocker_id: int, blocked_id: int) -> None:
        if blocker_id == blocked_id:
            raise SelfReferenceError("Cannot block yourself")

        # Same pair lock follow_user takes, so no follow can slip in mid-cleanup
        accounts = self.store.lock_pair(blocker_id, blocked_id)
        if blocked_id not in accounts:
            self.db.rollback()
            raise NotFoundError("User not found")

        try:
            for source, target in ((blocker_id, blocked_id), (blocked_id, blocker_id)):
                self.store.delete_edge(source, target)
                self.store.close_pending_requests(source, target, FollowRequestStatus.CANCELLED)
                self.store.delete_close_friend(source, target)
            self.store.add_restriction(blocker_id, blocked_id, RestrictionKind.BLOCKED)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        logger.info("account %s blocked %s", blocker_id, blocked_id)

    def unblock_user(self, blocker_id: int, blocked_id: int) -> None:
        # Earlier follow state is gone for good
        self._remove(blocker_id, blocked_id, RestrictionKind.BLOCKED)

    def restrict_user(self, restricter_id: int, restricted_id: int) -> None:
        self._add(restricter_id, restricted_id, RestrictionKind.RESTRICTED)

    def unrestrict_user(self, restricter_id: int, restricted_id: int) -> None:
        self._remove(restricter_id, restricted_id, RestrictionKind.RESTRICTED)

    def mute_user(self, muter_id: int, muted_id: int) -> None:
        self._add(muter_id, muted_id, RestrictionKind.MUTED)

    def unmute_user(self, muter_id: int, muted_id: int) -> None:
        self._remove(muter_id, muted_id, RestrictionKind.MUTED)

    def is_blocked_either_way(self, first_id: int, second_id: int) -> bool:
        return self.store.is_blocked_either_way(first_id, second_id)

    def get_blocked_accounts(self, account_id: int) -> List[Account]:
        return self.store.restricted_accounts(account_id, RestrictionKind.BLOCKED)

    def get_restricted_accounts(self, account_id: int) -> List[Account]:
        return self.store.restricted_accounts(account_id, RestrictionKind.RESTRICTED)

    def get_muted_accounts(self, account_id: int) -> List[Account]:
        return self.store.restricted_accounts(account_id, RestrictionKind.MUTED)

    def get_all_restrictions(self, account_id: int) -> RestrictionOverview:
        return RestrictionOverview(
            blocked=[AccountSummary.model_validate(a) for a in self.get_blocked_accounts(account_id)],
            restricted=[AccountSummary.model_validate(a) for a in self.get_restricted_accounts(account_id)],
            muted=[AccountSummary.model_validate(a) for a in self.get_muted_accounts(account_id)],
        )

    def _add(self, restricter_id: int, restricted_id: int, kind: RestrictionKind) -> None:
        if restricter_id == restricted_id:
            raise SelfReferenceError(f"Cannot {_VERBS[kind]} yourself")
        if self.store.get_account(restricted_id) is None:
            raise NotFoundError("User not found")

        if self.store.add_restriction(restricter_id, restricted_id, kind):
            logger.info("account %s %s %s", restricter_id, kind.value, restricted_id)
        self.db.commit()

    def _remove(self, restricter_id: int, restricted_id: int, kind: RestrictionKind) -> None:
        if restricter_id == restricted_id:
            raise SelfReferenceError(f"Cannot un{_VERBS[kind]} yourself")

        removed = self.store.delete_restriction(restricter_id, restricted_id, kind)
        self.db.commit()
        if removed:
            logger.info("account %s lifted %s on %s", restricter_id, kind.value, restricted_id)
