import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from socialgraph.common.enums import FollowRequestStatus
from socialgraph.core.errors import BlockedError, NotFoundError
from socialgraph.db.base_class import Base
from socialgraph.models.account import Account
from socialgraph.models.follow import FollowEdge
from socialgraph.models.follow_request import FollowRequest
from socialgraph.models.restriction import Restriction
from socialgraph.services.follow_service import FollowService
from socialgraph.services.restriction_service import RestrictionService


# Two sessions need two real connections, so these use a file database
# instead of the shared in-memory one from conftest.

@pytest.fixture
def file_sessions(tmp_path):
    engine = create_engine(
        f"sqlite:///{tmp_path / 'race.db'}",
        connect_args={"check_same_thread": False, "timeout": 1},
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    first, second = factory(), factory()
    yield first, second
    first.close()
    second.close()
    engine.dispose()


def seed(session, *specs):
    accounts = [Account(username=name, is_private=private) for name, private in specs]
    session.add_all(accounts)
    session.commit()
    return [a.id for a in accounts]


def run_after(target, name, action):
    """Wrap `target.name` so `action` runs once, right after the first call returns."""
    original = getattr(target, name)
    state = {"done": False}

    def wrapped(*args, **kwargs):
        result = original(*args, **kwargs)
        if not state["done"]:
            state["done"] = True
            action()
        return result

    setattr(target, name, wrapped)


def test_block_landing_mid_follow_wins(file_sessions):
    first, second = file_sessions
    alice_id, bob_id = seed(first, ("alice", False), ("bob", False))
    follows = FollowService(first)
    blocks = RestrictionService(second)

    # Block commits after follow_user has passed its block check
    run_after(follows.store, "pending_request", lambda: blocks.block_user(bob_id, alice_id))

    with pytest.raises(BlockedError):
        follows.follow_user(alice_id, bob_id)

    assert second.query(Restriction).count() == 1
    assert second.query(FollowEdge).count() == 0


def test_block_landing_mid_request_wins(file_sessions):
    first, second = file_sessions
    alice_id, carol_id = seed(first, ("alice", False), ("carol", True))
    follows = FollowService(first)
    blocks = RestrictionService(second)

    run_after(follows.store, "pending_request", lambda: blocks.block_user(carol_id, alice_id))

    with pytest.raises(BlockedError):
        follows.follow_user(alice_id, carol_id)

    pending = second.query(FollowRequest).filter(FollowRequest.status == FollowRequestStatus.PENDING.value)
    assert pending.count() == 0


def test_cancel_landing_mid_accept_wins(file_sessions):
    first, second = file_sessions
    alice_id, carol_id = seed(first, ("alice", False), ("carol", True))
    FollowService(first).follow_user(alice_id, carol_id)

    owner_side = FollowService(first)
    requester_side = FollowService(second)

    # Cancel commits between accept's pending read and its update
    run_after(owner_side.store, "pending_request",
              lambda: requester_side.cancel_follow_request(alice_id, carol_id))

    with pytest.raises(NotFoundError):
        owner_side.accept_follow_request(carol_id, alice_id)

    statuses = [r.status for r in second.query(FollowRequest).all()]
    assert statuses == [FollowRequestStatus.CANCELLED.value]
    assert second.query(FollowEdge).count() == 0


def test_block_landing_mid_accept_wins(file_sessions):
    first, second = file_sessions
    alice_id, carol_id = seed(first, ("alice", False), ("carol", True))
    FollowService(first).follow_user(alice_id, carol_id)

    owner_side = FollowService(first)
    blocks = RestrictionService(second)

    # Block after the request is confirmed pending but before accept writes.
    # The block cancels the request, so the accept update finds nothing.
    run_after(owner_side.store, "pending_request", lambda: blocks.block_user(alice_id, carol_id))

    with pytest.raises(NotFoundError):
        owner_side.accept_follow_request(carol_id, alice_id)

    assert second.query(FollowEdge).count() == 0
    assert second.query(Restriction).count() == 1
