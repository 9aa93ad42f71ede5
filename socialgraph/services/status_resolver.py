# socialgraph/services/status_resolver.py

from typing import Callable, Tuple

from socialgraph.common.enums import RelationshipStatus, RestrictionKind

# (status, predicate(store, viewer_id, subject_id)) checked top to bottom; first hit wins.
# Block dominates everything. Mute/restrict sit above the positive signals so a
# muted close friend reads as muted.
PRECEDENCE: Tuple[Tuple[RelationshipStatus, Callable], ...] = (
    (RelationshipStatus.BLOCKED,
     lambda store, viewer, subject: store.is_blocked_either_way(viewer, subject)),
    (RelationshipStatus.RESTRICTED,
     lambda store, viewer, subject: store.has_restriction(viewer, subject, RestrictionKind.RESTRICTED)),
    (RelationshipStatus.MUTED,
     lambda store, viewer, subject: store.has_restriction(viewer, subject, RestrictionKind.MUTED)),
    (RelationshipStatus.CLOSE_FRIEND,
     lambda store, viewer, subject: store.is_close_friend(viewer, subject)),
    (RelationshipStatus.FOLLOW_REQUEST_SENT,
     lambda store, viewer, subject: store.pending_request(viewer, subject) is not None),
    (RelationshipStatus.FOLLOW_REQUEST_RECEIVED,
     lambda store, viewer, subject: store.pending_request(subject, viewer) is not None),
    (RelationshipStatus.MUTUAL_FOLLOWERS,
     lambda store, viewer, subject: store.has_edge(viewer, subject) and store.has_edge(subject, viewer)),
    (RelationshipStatus.FOLLOWING,
     lambda store, viewer, subject: store.has_edge(viewer, subject)),
    (RelationshipStatus.FOLLOWER,
     lambda store, viewer, subject: store.has_edge(subject, viewer)),
)

class StatusResolver:
    """
    Collapses every relation between two accounts into one RelationshipStatus.

    `store` only needs the read methods used by PRECEDENCE, so tests can hand
    in a fake without touching a database.
    """

    def __init__(self, store):
        self.store = store

    def resolve(self, viewer_id: int, subject_id: int) -> RelationshipStatus:
        if viewer_id == subject_id:
            return RelationshipStatus.NO_RELATION

        for status, matches in PRECEDENCE:
            if matches(self.store, viewer_id, subject_id):
                return status
        return RelationshipStatus.NO_RELATION
