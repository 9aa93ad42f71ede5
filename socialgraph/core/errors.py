# socialgraph/core/errors.py

from typing import Optional


class SocialGraphError(Exception):
    """Base class for every typed failure the engine hands back to callers."""

    status_code = 400
    default_message = "Social graph error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class SelfReferenceError(SocialGraphError):
    status_code = 400
    default_message = "Cannot target yourself"


class NotFoundError(SocialGraphError):
    status_code = 404
    default_message = "Not found"


class BlockedError(SocialGraphError):
    status_code = 403
    default_message = "Interaction blocked"


class DuplicateRequestError(SocialGraphError):
    status_code = 409
    default_message = "Follow request already sent"


class AlreadyFollowingError(SocialGraphError):
    status_code = 409
    default_message = "Already following"


class PreconditionFailedError(SocialGraphError):
    status_code = 412
    default_message = "Precondition failed"


class PermissionDeniedError(SocialGraphError):
    status_code = 403
    default_message = "Permission denied"
