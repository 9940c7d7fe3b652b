"""
User record model: typed view of one user document from the record store.

Built from store snapshots via ensure_records(), which accepts the
`{id: document}` mapping the Realtime Database returns as well as plain lists.
"""

import logging
import math
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)


class UserRecord(BaseModel):
    """
    One user as stored in the `users` node.

    Stored documents use camelCase keys (createdAt, lastActive, isActive);
    the model exposes them as snake_case attributes and dumps them back with
    by_alias=True. Unknown keys (email, role, ...) are kept in model_extra.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str
    username: Optional[str] = None
    points: int = 0
    submissions: int = 0
    created_at: Optional[int] = Field(default=None, alias="createdAt")
    last_active: Optional[int] = Field(default=None, alias="lastActive")
    is_active: bool = Field(default=True, alias="isActive")

    @field_validator("points", "submissions", mode="before")
    @classmethod
    def _coerce_count(cls, v: Any) -> Any:
        if v is None or v == "":
            return 0
        if isinstance(v, str):
            try:
                v = float(v.strip())
            except ValueError:
                return v
        if isinstance(v, float):
            # Fractional counters are truncated; NaN and infinities count as 0
            return int(v) if math.isfinite(v) else 0
        return v

    @field_validator("created_at", "last_active", mode="before")
    @classmethod
    def _coerce_timestamp(cls, v: Any) -> Any:
        # 0 and empty values mean "never set"
        if v is None or v == "" or v == 0:
            return None
        if isinstance(v, float):
            return int(v) if math.isfinite(v) else None
        return v

    @field_validator("created_at", "last_active")
    @classmethod
    def _zero_timestamp_is_unset(cls, v: Optional[int]) -> Optional[int]:
        return v or None

    @field_validator("is_active", mode="before")
    @classmethod
    def _missing_flag_is_active(cls, v: Any) -> Any:
        return True if v is None else v

    @property
    def effective_last_active(self) -> Optional[int]:
        """lastActive, falling back to createdAt."""
        return self.last_active or self.created_at

    def get_field(self, name: str) -> Any:
        """Value of a stored field by its document key (e.g. "username", "createdAt", "email")."""
        return self.model_dump(by_alias=True).get(name)


def _record_from_document(user_id: str, document: Any) -> Optional[UserRecord]:
    if not isinstance(document, dict):
        return None
    data = dict(document)
    data["id"] = str(user_id)
    try:
        return UserRecord.model_validate(data)
    except ValidationError as e:
        logger.warning("Skipping malformed user record %s: %s", user_id, e.error_count())
        return None


def ensure_records(
    snapshot: Union[Mapping[str, Any], Iterable[Union[Dict[str, Any], UserRecord]], None],
) -> List[UserRecord]:
    """
    Convert a store snapshot to UserRecords, preserving snapshot order.

    Mapping snapshots use the key as id (the key wins over any stored id).
    List entries use their own id/uid, or their position when they have none.
    Entries that are not documents or fail validation are skipped.
    """
    if not snapshot:
        return []
    records: List[UserRecord] = []
    if isinstance(snapshot, Mapping):
        for user_id, document in snapshot.items():
            record = _record_from_document(user_id, document)
            if record is not None:
                records.append(record)
        return records
    for index, item in enumerate(snapshot):
        if isinstance(item, UserRecord):
            records.append(item)
            continue
        if not isinstance(item, dict):
            continue
        record = _record_from_document(item.get("id") or item.get("uid") or index, item)
        if record is not None:
            records.append(record)
    return records
