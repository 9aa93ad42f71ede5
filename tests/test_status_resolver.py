import pytest

from socialgraph.common.enums import RelationshipStatus, RestrictionKind
from socialgraph.services.status_resolver import PRECEDENCE, StatusResolver


class FakeStore:
    """In-memory stand-in exposing only the reads the resolver uses."""

    def __init__(self, edges=(), requests=(), restrictions=(), close_friends=()):
        self.edges = set(edges)
        self.requests = set(requests)
        self.restrictions = set(restrictions)
        self.close_friends = set(close_friends)
        self.calls = 0

    def has_edge(self, follower_id, target_id):
        self.calls += 1
        return (follower_id, target_id) in self.edges

    def pending_request(self, requester_id, requested_id):
        self.calls += 1
        return object() if (requester_id, requested_id) in self.requests else None

    def has_restriction(self, restricter_id, restricted_id, kind):
        self.calls += 1
        return (restricter_id, restricted_id, kind) in self.restrictions

    def is_blocked_either_way(self, first_id, second_id):
        return self.has_restriction(first_id, second_id, RestrictionKind.BLOCKED) or \
            self.has_restriction(second_id, first_id, RestrictionKind.BLOCKED)

    def is_close_friend(self, owner_id, friend_id):
        self.calls += 1
        return (owner_id, friend_id) in self.close_friends


def resolve(store, viewer=1, subject=2):
    return StatusResolver(store).resolve(viewer, subject)


def test_precedence_order_is_fixed():
    assert [status for status, _ in PRECEDENCE] == [
        RelationshipStatus.BLOCKED,
        RelationshipStatus.RESTRICTED,
        RelationshipStatus.MUTED,
        RelationshipStatus.CLOSE_FRIEND,
        RelationshipStatus.FOLLOW_REQUEST_SENT,
        RelationshipStatus.FOLLOW_REQUEST_RECEIVED,
        RelationshipStatus.MUTUAL_FOLLOWERS,
        RelationshipStatus.FOLLOWING,
        RelationshipStatus.FOLLOWER,
    ]


def test_self_is_no_relation_without_touching_store():
    store = FakeStore(edges={(1, 1)})
    assert resolve(store, 1, 1) == RelationshipStatus.NO_RELATION
    assert store.calls == 0


def test_nothing_is_no_relation():
    assert resolve(FakeStore()) == RelationshipStatus.NO_RELATION


@pytest.mark.parametrize("edges, expected", [
    ({(1, 2)}, RelationshipStatus.FOLLOWING),
    ({(2, 1)}, RelationshipStatus.FOLLOWER),
    ({(1, 2), (2, 1)}, RelationshipStatus.MUTUAL_FOLLOWERS),
])
def test_edges(edges, expected):
    assert resolve(FakeStore(edges=edges)) == expected


def test_block_in_either_direction_beats_everything():
    everything = dict(
        edges={(1, 2), (2, 1)},
        requests={(1, 2)},
        restrictions={(1, 2, RestrictionKind.MUTED), (1, 2, RestrictionKind.RESTRICTED)},
        close_friends={(1, 2)},
    )
    outgoing = FakeStore(**everything)
    outgoing.restrictions.add((1, 2, RestrictionKind.BLOCKED))
    incoming = FakeStore(**everything)
    incoming.restrictions.add((2, 1, RestrictionKind.BLOCKED))

    assert resolve(outgoing) == RelationshipStatus.BLOCKED
    assert resolve(incoming) == RelationshipStatus.BLOCKED


def test_muted_close_friend_reads_as_muted():
    store = FakeStore(
        edges={(1, 2)},
        restrictions={(1, 2, RestrictionKind.MUTED)},
        close_friends={(1, 2)},
    )
    assert resolve(store) == RelationshipStatus.MUTED


def test_restricted_beats_muted():
    store = FakeStore(restrictions={(1, 2, RestrictionKind.MUTED), (1, 2, RestrictionKind.RESTRICTED)})
    assert resolve(store) == RelationshipStatus.RESTRICTED


def test_restriction_by_subject_does_not_show_for_viewer():
    store = FakeStore(edges={(1, 2)}, restrictions={(2, 1, RestrictionKind.RESTRICTED)})
    assert resolve(store) == RelationshipStatus.FOLLOWING


def test_close_friend_beats_following():
    store = FakeStore(edges={(1, 2), (2, 1)}, close_friends={(1, 2)})
    assert resolve(store) == RelationshipStatus.CLOSE_FRIEND


def test_sent_request_beats_received_and_edges():
    store = FakeStore(edges={(2, 1)}, requests={(1, 2), (2, 1)})
    assert resolve(store) == RelationshipStatus.FOLLOW_REQUEST_SENT


def test_received_request_beats_follower():
    store = FakeStore(edges={(2, 1)}, requests={(2, 1)})
    assert resolve(store) == RelationshipStatus.FOLLOW_REQUEST_RECEIVED
