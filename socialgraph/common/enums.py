# socialgraph/common/enums.py

from enum import Enum

class RelationshipStatus(str, Enum):
    NO_RELATION = "no_relation"
    FOLLOWING = "following"
    FOLLOWER = "follower"
    MUTUAL_FOLLOWERS = "mutual_followers"
    FOLLOW_REQUEST_SENT = "follow_request_sent"
    FOLLOW_REQUEST_RECEIVED = "follow_request_received"
    BLOCKED = "blocked"
    RESTRICTED = "restricted"
    MUTED = "muted"
    CLOSE_FRIEND = "close_friend"

# Statuses that count as "viewer follows subject" for privacy and close-friend checks
FOLLOWING_STATUSES = frozenset({RelationshipStatus.FOLLOWING, RelationshipStatus.MUTUAL_FOLLOWERS})

class FollowRequestStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    CANCELLED = "cancelled"

class RestrictionKind(str, Enum):
    BLOCKED = "blocked"
    RESTRICTED = "restricted"
    MUTED = "muted"

class ListVisibility(str, Enum):
    EVERYONE = "everyone"
    FOLLOWERS = "followers"
    NO_ONE = "no_one"
