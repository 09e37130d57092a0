"""
Pydantic models for user data.

``User`` is the stored record.  ``UserIn`` is what clients send on
create and update: every field is optional and defaults to an empty
string, mirroring how the service has always accepted partial bodies.
Ids and timestamps are owned by the store, so any such keys in a request
body are ignored.
"""

from typing import List

from pydantic import BaseModel, Field

from doc_agent_api.core.store import TimestampedRecord


class User(TimestampedRecord):
    """A user as stored and returned by the API."""

    name: str = ""
    email: str = ""
    role: str = ""
    phone_number: str = ""
    avatar: str = ""


class UserIn(BaseModel):
    """Request body for creating or replacing a user."""

    name: str = Field("", examples=["Alice Johnson"])
    email: str = Field("", examples=["alice@example.com"])
    role: str = Field("", examples=["admin"])
    phone_number: str = Field("", examples=["+1-555-0100"])
    avatar: str = Field("", examples=["https://example.com/avatars/alice.png"])

    def to_record(self) -> User:
        return User(**self.model_dump())


class UserList(BaseModel):
    users: List[User]
    count: int


class UserProfile(BaseModel):
    """Fields derived from a user for the profile view."""

    has_avatar: bool
    has_phone_number: bool
    is_admin: bool
    account_age_days: int


class UserProfileResponse(BaseModel):
    user: User
    profile: UserProfile
