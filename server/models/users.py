"""Request models for account endpoints (login, token checks, admin create, duplicates)."""

import re
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Characters the Realtime Database rejects in keys and query paths
_INVALID_FIELD_CHARS = re.compile(r"[/.#$\[\]]")


class TokenRequest(BaseModel):
    """Body for login and token verification."""

    model_config = ConfigDict(populate_by_name=True)

    id_token: Optional[str] = Field(default=None, alias="idToken")


class CreateUserRequest(BaseModel):
    """Body for admin user creation."""

    email: Optional[str] = None
    password: Optional[str] = None
    username: Optional[str] = None


class CheckDuplicateRequest(BaseModel):
    """Equality lookup of a scalar `value` in stored `field`."""

    field: Optional[str] = None
    value: Optional[Union[bool, int, float, str]] = None

    @field_validator("field")
    @classmethod
    def _plain_field_name(cls, v: Optional[str]) -> Optional[str]:
        if v and _INVALID_FIELD_CHARS.search(v):
            raise ValueError("field may not contain '/', '.', '#', '$', '[' or ']'")
        return v
