"""Tag service: bulk tag creation and the owner's tag-id list."""
from typing import List, Optional, Sequence, Tuple
import logging
import uuid

from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, col, select

from task_mcp import config
from task_mcp.models.tag import Tag
from task_mcp.models.user import User
from task_mcp.schemas.tag import TagInput
from task_mcp.services.errors import NotFoundError, StoreError, ValidationError, require_user_id

logger = logging.getLogger(__name__)


class TagService:
    """
    Creates tags and appends their ids to ``User.tags``.

    The tag inserts and the list append commit together. The append is a
    conditional write on ``User.version``; if another writer bumped the
    version since we read it, the transaction is rolled back and retried.
    """

    def __init__(self, session: Session, max_retries: Optional[int] = None):
        self.session = session
        self.max_retries = config.TAG_APPEND_MAX_RETRIES if max_retries is None else max_retries

    def create_tags(self, tags: Sequence[TagInput], user_id: str) -> int:
        """Create ``tags`` for ``user_id`` and return how many were created."""
        require_user_id(user_id)
        if not tags:
            raise ValidationError("At least one tag is required", details={"field": "tags"})

        for attempt in range(1, self.max_retries + 1):
            try:
                existing_ids, version = self._read_user_tags(user_id)

                new_tags = [
                    Tag(id=str(uuid.uuid4()), user_id=user_id, text=tag.text, color=tag.color)
                    for tag in tags
                ]
                self.session.add_all(new_tags)
                self.session.flush()

                new_ids = [tag.id for tag in new_tags]
                if self._write_user_tags(user_id, version, existing_ids + new_ids):
                    self.session.commit()
                    logger.info(f"Created {len(new_ids)} tag(s) for user {user_id}")
                    return len(new_ids)

                self.session.rollback()
                logger.warning(
                    f"Concurrent tag update for user {user_id} "
                    f"(attempt {attempt}/{self.max_retries}), retrying"
                )
            except SQLAlchemyError as exc:
                self.session.rollback()
                raise StoreError("Failed to create tags", details={"error": str(exc)}) from exc

        raise StoreError(
            f"Could not update tags for user {user_id} after {self.max_retries} attempts",
            details={"user_id": user_id},
        )

    def _read_user_tags(self, user_id: str) -> Tuple[List[str], int]:
        statement = select(User.tags, User.version).where(User.user_id == user_id)
        row = self.session.exec(statement).first()
        if row is None:
            raise NotFoundError(f"User {user_id} not found", details={"user_id": user_id})
        tags, version = row
        return list(tags or []), version

    def _write_user_tags(self, user_id: str, expected_version: int, tag_ids: List[str]) -> bool:
        """Write ``tag_ids`` only if the row is still at ``expected_version``."""
        statement = (
            update(User)
            .where(col(User.user_id) == user_id)
            .where(col(User.version) == expected_version)
            .values(tags=tag_ids, version=expected_version + 1)
            .execution_options(synchronize_session=False)
        )
        result = self.session.execute(statement)
        return result.rowcount == 1
