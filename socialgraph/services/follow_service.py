# socialgraph/services/follow_service.py

import logging
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from socialgraph.common.enums import FollowRequestStatus, RelationshipStatus
from socialgraph.core.errors import (
    AlreadyFollowingError,
    BlockedError,
    DuplicateRequestError,
    NotFoundError,
    PermissionDeniedError,
    SelfReferenceError,
)
from socialgraph.models.account import Account
from socialgraph.models.follow_request import FollowRequest
from socialgraph.models.relationship import FollowCounts, FollowResult
from socialgraph.services.privacy_service import PrivacyService
from socialgraph.services.relationship_store import RelationshipStore
from socialgraph.services.status_resolver import StatusResolver

logger = logging.getLogger(__name__)

class FollowService:
    """
    Follow workflow: one small state machine per ordered pair
    (none -> pending -> following, or none -> following for public targets).
    Also serves the follower/following lists, which are privacy gated.
    """

    def __init__(self, db: Session):
        self.db = db
        self.store = RelationshipStore(db)
        self.resolver = StatusResolver(self.store)
        self.privacy = PrivacyService(db)

    def get_relationship_status(self, viewer_id: int, subject_id: int) -> RelationshipStatus:
        return self.resolver.resolve(viewer_id, subject_id)

    # --- transitions ---

    def follow_user(self, follower_id: int, target_id: int) -> FollowResult:
        if follower_id == target_id:
            raise SelfReferenceError("Cannot follow yourself")

        accounts = self.store.lock_pair(follower_id, target_id)
        target = accounts.get(target_id)
        if target is None or follower_id not in accounts:
            self.db.rollback()
            raise NotFoundError("User not found")

        if self.store.is_blocked_either_way(follower_id, target_id):
            self.db.rollback()
            logger.debug("follow %s -> %s refused: block in place", follower_id, target_id)
            raise BlockedError("Cannot follow this user")
        if self.store.has_edge(follower_id, target_id):
            self.db.rollback()
            raise AlreadyFollowingError()
        if self.store.pending_request(follower_id, target_id) is not None:
            self.db.rollback()
            raise DuplicateRequestError()

        if target.is_private:
            try:
                self.store.add_request(follower_id, target_id)
            except IntegrityError:
                # Lost a race with an identical request
                self.db.rollback()
                logger.warning("duplicate follow request %s -> %s rejected by store", follower_id, target_id)
                raise DuplicateRequestError()
            self._ensure_not_blocked(follower_id, target_id)
            self.db.commit()
            logger.info("follow request %s -> %s created", follower_id, target_id)
            return FollowResult(
                success=True,
                status=RelationshipStatus.FOLLOW_REQUEST_SENT,
                requires_approval=True,
                message="Follow request sent",
            )

        try:
            self.store.add_edge(follower_id, target_id)
        except IntegrityError:
            self.db.rollback()
            logger.warning("duplicate follow edge %s -> %s rejected by store", follower_id, target_id)
            raise AlreadyFollowingError()
        self._ensure_not_blocked(follower_id, target_id)

        # Reverse edge read inside the same transaction, after our insert
        mutual = self.store.has_edge(target_id, follower_id)
        self.db.commit()
        logger.info("account %s now follows %s (mutual=%s)", follower_id, target_id, mutual)
        return FollowResult(
            success=True,
            status=RelationshipStatus.MUTUAL_FOLLOWERS if mutual else RelationshipStatus.FOLLOWING,
            message="Now following",
        )

    def unfollow_user(self, follower_id: int, target_id: int) -> None:
        self.store.lock_pair(follower_id, target_id)
        removed = self.store.delete_edge(follower_id, target_id)
        cancelled = self.store.close_pending_requests(follower_id, target_id, FollowRequestStatus.CANCELLED)
        self.db.commit()
        if removed or cancelled:
            logger.info("account %s unfollowed %s (edges=%s, requests=%s)", follower_id, target_id, removed, cancelled)

    def accept_follow_request(self, owner_id: int, requester_id: int) -> None:
        self.store.lock_pair(owner_id, requester_id)
        if self.store.pending_request(requester_id, owner_id) is None:
            self.db.rollback()
            raise NotFoundError("Follow request not found")

        # The update is the authority: a cancel or reject may have landed since the read
        if self.store.close_pending_requests(requester_id, owner_id, FollowRequestStatus.ACCEPTED) != 1:
            self.db.rollback()
            logger.debug("accept %s <- %s lost to a concurrent change", owner_id, requester_id)
            raise NotFoundError("Follow request not found")
        try:
            self.store.add_edge(requester_id, owner_id)
        except IntegrityError:
            self.db.rollback()
            raise AlreadyFollowingError()
        self._ensure_not_blocked(requester_id, owner_id)
        self.db.commit()
        logger.info("account %s accepted follow request from %s", owner_id, requester_id)

    def reject_follow_request(self, owner_id: int, requester_id: int) -> None:
        """Only the account that received the request may reject it."""
        self.store.lock_pair(owner_id, requester_id)
        if self.store.close_pending_requests(requester_id, owner_id, FollowRequestStatus.REJECTED):
            self.db.commit()
            logger.info("account %s rejected follow request from %s", owner_id, requester_id)
            return

        self.db.rollback()
        if self.store.pending_request(owner_id, requester_id) is not None:
            raise PermissionDeniedError("Only the recipient can reject a follow request")
        raise NotFoundError("Follow request not found")

    def cancel_follow_request(self, requester_id: int, requested_id: int) -> None:
        """Only the account that sent the request may cancel it."""
        self.store.lock_pair(requester_id, requested_id)
        if self.store.close_pending_requests(requester_id, requested_id, FollowRequestStatus.CANCELLED):
            self.db.commit()
            logger.info("account %s cancelled follow request to %s", requester_id, requested_id)
            return

        self.db.rollback()
        if self.store.pending_request(requested_id, requester_id) is not None:
            raise PermissionDeniedError("Only the requester can cancel a follow request")
        raise NotFoundError("Follow request not found")

    def _ensure_not_blocked(self, first_id: int, second_id: int) -> None:
        """
        Block check repeated after our insert. Without FOR UPDATE (SQLite) the
        first check is an unlocked read; once the insert holds the write lock
        this read sees every committed block and no new one can land.
        """
        if self.store.is_blocked_either_way(first_id, second_id):
            self.db.rollback()
            logger.warning("follow %s -> %s raced a block; rolled back", first_id, second_id)
            raise BlockedError("Cannot follow this user")

    # --- reads ---

    def get_pending_follow_requests(self, account_id: int) -> List[FollowRequest]:
        return self.store.requests_received(account_id)

    def get_sent_follow_requests(self, account_id: int) -> List[FollowRequest]:
        return self.store.requests_sent(account_id)

    def get_followers(self, subject_id: int, viewer_id: int) -> List[Account]:
        # Denied viewers get an empty list, same as an account nobody follows
        if not self.privacy.can_view_followers(subject_id, viewer_id):
            return []
        return self.store.followers_of(subject_id)

    def get_following(self, subject_id: int, viewer_id: int) -> List[Account]:
        if not self.privacy.can_view_following(subject_id, viewer_id):
            return []
        return self.store.following_of(subject_id)

    def get_mutual_followers(self, first_id: int, second_id: int) -> List[Account]:
        # No privacy gating: the caller has already checked visibility of both accounts
        return self.store.mutual_followers_of(first_id, second_id)

    def get_follow_counts(self, account_id: int) -> FollowCounts:
        return FollowCounts(
            followers=self.store.count_followers(account_id),
            following=self.store.count_following(account_id),
        )
