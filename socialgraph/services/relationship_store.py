# socialgraph/services/relationship_store.py

import logging
from typing import Dict, List, Optional

from sqlalchemy import and_, func
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, aliased, joinedload

from socialgraph.common.enums import FollowRequestStatus, RestrictionKind
from socialgraph.db.base_class import utcnow
from socialgraph.models.account import Account
from socialgraph.models.close_friend import CloseFriend
from socialgraph.models.follow import FollowEdge
from socialgraph.models.follow_request import FollowRequest
from socialgraph.models.restriction import Restriction

logger = logging.getLogger(__name__)

# Dialects that understand INSERT ... ON CONFLICT DO NOTHING
_CONFLICT_INSERTS = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}

class RelationshipStore:
    """
    Storage access for the four pair relations: follow edges, follow requests,
    restrictions and close friends.

    Nothing here commits. Callers own the transaction so multi-step
    changes (block cleanup, request acceptance) land as one unit.
    """

    def __init__(self, db: Session):
        self.db = db

    # --- accounts & locking ---

    def get_account(self, account_id: int) -> Optional[Account]:
        return self.db.query(Account).filter(Account.id == account_id).first()

    def lock_pair(self, first_id: int, second_id: int) -> Dict[int, Account]:
        """
        Row-lock both accounts in id order for the rest of the transaction.
        Every pair mutation that can race with block cleanup goes through here.
        SQLite has no FOR UPDATE; the dialect drops the clause.
        """
        rows = (
            self.db.query(Account)
            .filter(Account.id.in_([first_id, second_id]))
            .order_by(Account.id)
            .with_for_update()
            .all()
        )
        return {row.id: row for row in rows}

    def insert_ignore(self, model, **values) -> bool:
        """Insert a row unless a unique constraint already covers it. Returns True if a row was written."""
        dialect = self.db.get_bind().dialect.name
        insert = _CONFLICT_INSERTS.get(dialect)
        if insert is not None:
            result = self.db.execute(insert(model).values(**values).on_conflict_do_nothing())
            return result.rowcount > 0

        # Other backends: check then insert inside a savepoint
        try:
            with self.db.begin_nested():
                self.db.add(model(**values))
        except IntegrityError:
            logger.warning("insert_ignore: %s already present for %s", model.__tablename__, values)
            return False
        return True

    # --- follow edges ---

    def has_edge(self, follower_id: int, target_id: int) -> bool:
        return self.db.query(
            self.db.query(FollowEdge)
            .filter(FollowEdge.follower_id == follower_id, FollowEdge.target_id == target_id)
            .exists()
        ).scalar()

    def add_edge(self, follower_id: int, target_id: int) -> FollowEdge:
        # Flush so a concurrent duplicate surfaces as IntegrityError here
        edge = FollowEdge(follower_id=follower_id, target_id=target_id)
        self.db.add(edge)
        self.db.flush()
        return edge

    def delete_edge(self, follower_id: int, target_id: int) -> int:
        return (
            self.db.query(FollowEdge)
            .filter(FollowEdge.follower_id == follower_id, FollowEdge.target_id == target_id)
            .delete()
        )

    def followers_of(self, account_id: int) -> List[Account]:
        return (
            self.db.query(Account)
            .join(FollowEdge, FollowEdge.follower_id == Account.id)
            .filter(FollowEdge.target_id == account_id)
            .order_by(FollowEdge.created_at.desc(), FollowEdge.id.desc())
            .all()
        )

    def following_of(self, account_id: int) -> List[Account]:
        return (
            self.db.query(Account)
            .join(FollowEdge, FollowEdge.target_id == Account.id)
            .filter(FollowEdge.follower_id == account_id)
            .order_by(FollowEdge.created_at.desc(), FollowEdge.id.desc())
            .all()
        )

    def mutual_followers_of(self, first_id: int, second_id: int) -> List[Account]:
        """Accounts following both. Ordered by when they followed `first_id`."""
        other = aliased(FollowEdge)
        return (
            self.db.query(Account)
            .join(FollowEdge, FollowEdge.follower_id == Account.id)
            .join(other, and_(other.follower_id == Account.id, other.target_id == second_id))
            .filter(FollowEdge.target_id == first_id)
            .order_by(FollowEdge.created_at.desc(), FollowEdge.id.desc())
            .all()
        )

    def count_followers(self, account_id: int) -> int:
        return self.db.query(func.count(FollowEdge.id)).filter(FollowEdge.target_id == account_id).scalar()

    def count_following(self, account_id: int) -> int:
        return self.db.query(func.count(FollowEdge.id)).filter(FollowEdge.follower_id == account_id).scalar()

    # --- follow requests ---

    def pending_request(self, requester_id: int, requested_id: int) -> Optional[FollowRequest]:
        return (
            self.db.query(FollowRequest)
            .filter(
                FollowRequest.requester_id == requester_id,
                FollowRequest.requested_id == requested_id,
                FollowRequest.status == FollowRequestStatus.PENDING.value,
            )
            .first()
        )

    def add_request(self, requester_id: int, requested_id: int) -> FollowRequest:
        request = FollowRequest(
            requester_id=requester_id,
            requested_id=requested_id,
            status=FollowRequestStatus.PENDING.value,
        )
        self.db.add(request)
        self.db.flush()
        return request

    def close_pending_requests(self, requester_id: int, requested_id: int, status: FollowRequestStatus) -> int:
        """Move the pending request (if any) to a terminal status. Returns rows touched."""
        return (
            self.db.query(FollowRequest)
            .filter(
                FollowRequest.requester_id == requester_id,
                FollowRequest.requested_id == requested_id,
                FollowRequest.status == FollowRequestStatus.PENDING.value,
            )
            .update({"status": status.value, "responded_at": utcnow()})
        )

    def requests_received(self, account_id: int) -> List[FollowRequest]:
        return (
            self.db.query(FollowRequest)
            .options(joinedload(FollowRequest.requester))
            .filter(
                FollowRequest.requested_id == account_id,
                FollowRequest.status == FollowRequestStatus.PENDING.value,
            )
            .order_by(FollowRequest.created_at.desc(), FollowRequest.id.desc())
            .all()
        )

    def requests_sent(self, account_id: int) -> List[FollowRequest]:
        return (
            self.db.query(FollowRequest)
            .options(joinedload(FollowRequest.requested))
            .filter(
                FollowRequest.requester_id == account_id,
                FollowRequest.status == FollowRequestStatus.PENDING.value,
            )
            .order_by(FollowRequest.created_at.desc(), FollowRequest.id.desc())
            .all()
        )

    # --- restrictions ---

    def has_restriction(self, restricter_id: int, restricted_id: int, kind: RestrictionKind) -> bool:
        return self.db.query(
            self.db.query(Restriction)
            .filter(
                Restriction.restricter_id == restricter_id,
                Restriction.restricted_id == restricted_id,
                Restriction.kind == kind.value,
            )
            .exists()
        ).scalar()

    def is_blocked_either_way(self, first_id: int, second_id: int) -> bool:
        return self.has_restriction(first_id, second_id, RestrictionKind.BLOCKED) or \
            self.has_restriction(second_id, first_id, RestrictionKind.BLOCKED)

    def add_restriction(self, restricter_id: int, restricted_id: int, kind: RestrictionKind) -> bool:
        return self.insert_ignore(
            Restriction,
            restricter_id=restricter_id,
            restricted_id=restricted_id,
            kind=kind.value,
            created_at=utcnow(),
        )

    def delete_restriction(self, restricter_id: int, restricted_id: int, kind: RestrictionKind) -> int:
        return (
            self.db.query(Restriction)
            .filter(
                Restriction.restricter_id == restricter_id,
                Restriction.restricted_id == restricted_id,
                Restriction.kind == kind.value,
            )
            .delete()
        )

    def restricted_accounts(self, restricter_id: int, kind: RestrictionKind) -> List[Account]:
        return (
            self.db.query(Account)
            .join(Restriction, Restriction.restricted_id == Account.id)
            .filter(Restriction.restricter_id == restricter_id, Restriction.kind == kind.value)
            .order_by(Restriction.created_at.desc(), Restriction.id.desc())
            .all()
        )

    # --- close friends ---

    def is_close_friend(self, owner_id: int, friend_id: int) -> bool:
        return self.db.query(
            self.db.query(CloseFriend)
            .filter(CloseFriend.owner_id == owner_id, CloseFriend.friend_id == friend_id)
            .exists()
        ).scalar()

    def add_close_friend(self, owner_id: int, friend_id: int) -> bool:
        return self.insert_ignore(CloseFriend, owner_id=owner_id, friend_id=friend_id, created_at=utcnow())

    def delete_close_friend(self, owner_id: int, friend_id: int) -> int:
        return (
            self.db.query(CloseFriend)
            .filter(CloseFriend.owner_id == owner_id, CloseFriend.friend_id == friend_id)
            .delete()
        )

    def close_friends_of(self, owner_id: int) -> List[Account]:
        return (
            self.db.query(Account)
            .join(CloseFriend, CloseFriend.friend_id == Account.id)
            .filter(CloseFriend.owner_id == owner_id)
            .order_by(CloseFriend.created_at.desc(), CloseFriend.id.desc())
            .all()
        )

    def close_friend_owners(self, friend_id: int) -> List[Account]:
        return (
            self.db.query(Account)
            .join(CloseFriend, CloseFriend.owner_id == Account.id)
            .filter(CloseFriend.friend_id == friend_id)
            .order_by(CloseFriend.created_at.desc(), CloseFriend.id.desc())
            .all()
        )

    def count_close_friends(self, owner_id: int) -> int:
        return self.db.query(func.count(CloseFriend.id)).filter(CloseFriend.owner_id == owner_id).scalar()
