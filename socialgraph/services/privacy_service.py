# socialgraph/services/privacy_service.py

import logging

from sqlalchemy.orm import Session

from socialgraph.common.enums import FOLLOWING_STATUSES, ListVisibility
from socialgraph.core.errors import NotFoundError
from socialgraph.db.base_class import utcnow
from socialgraph.models.account import Account
from socialgraph.models.privacy import PrivacySettings, PrivacySettingsUpdate
from socialgraph.services.relationship_store import RelationshipStore
from socialgraph.services.status_resolver import StatusResolver

logger = logging.getLogger(__name__)

class PrivacyService:

    def __init__(self, db: Session):
        self.db = db
        self.store = RelationshipStore(db)
        self.resolver = StatusResolver(self.store)

    def get_privacy_settings(self, account_id: int) -> PrivacySettings:
        """
        Read-or-create. The insert is ignore-on-conflict against the primary key,
        so two first reads racing each other both end up with the same row.
        """
        settings = self._find(account_id)
        if settings is not None:
            return settings
        if self.store.get_account(account_id) is None:
            raise NotFoundError("Account not found")

        if self.store.insert_ignore(PrivacySettings, account_id=account_id, updated_at=utcnow()):
            logger.info("created default privacy settings for account %s", account_id)
        self.db.commit()
        return self._find(account_id)

    def update_privacy_settings(self, account_id: int, changes: PrivacySettingsUpdate) -> PrivacySettings:
        settings = self.get_privacy_settings(account_id)

        # Fields the caller left out keep their current value
        update_data = changes.model_dump(exclude_unset=True, exclude_none=True)
        for key, value in update_data.items():
            if isinstance(value, ListVisibility):
                value = value.value
            setattr(settings, key, value)
        settings.updated_at = utcnow()

        self.db.add(settings)
        self.db.commit()
        self.db.refresh(settings)
        logger.info("account %s updated privacy settings: %s", account_id, sorted(update_data))
        return settings

    def set_account_privacy(self, account_id: int, is_private: bool) -> Account:
        # Pending requests are left as they are when an account goes public
        account = self.store.get_account(account_id)
        if account is None:
            raise NotFoundError("Account not found")

        account.is_private = is_private
        self.db.commit()
        self.db.refresh(account)
        logger.info("account %s is now %s", account_id, "private" if is_private else "public")
        return account

    # --- list gating ---

    def can_view_followers(self, subject_id: int, viewer_id: int) -> bool:
        if subject_id == viewer_id:
            return True
        return self._allows(self.get_privacy_settings(subject_id).who_can_see_followers, subject_id, viewer_id)

    def can_view_following(self, subject_id: int, viewer_id: int) -> bool:
        if subject_id == viewer_id:
            return True
        return self._allows(self.get_privacy_settings(subject_id).who_can_see_following, subject_id, viewer_id)

    def _allows(self, visibility: str, subject_id: int, viewer_id: int) -> bool:
        if visibility == ListVisibility.EVERYONE.value:
            return True
        if visibility == ListVisibility.FOLLOWERS.value:
            return self.resolver.resolve(viewer_id, subject_id) in FOLLOWING_STATUSES
        # no_one, and anything unrecognised, denies
        return False

    # --- interaction toggles ---

    def can_tag(self, target_id: int) -> bool:
        return self.get_privacy_settings(target_id).allow_tagging

    def can_mention(self, target_id: int) -> bool:
        return self.get_privacy_settings(target_id).allow_mentions

    def can_send_message_request(self, target_id: int) -> bool:
        return self.get_privacy_settings(target_id).allow_message_requests

    def can_reply_to_story(self, story_owner_id: int) -> bool:
        return self.get_privacy_settings(story_owner_id).allow_story_replies

    def is_activity_status_visible(self, account_id: int) -> bool:
        return self.get_privacy_settings(account_id).show_activity_status

    def _find(self, account_id: int):
        return self.db.query(PrivacySettings).filter(PrivacySettings.account_id == account_id).first()
