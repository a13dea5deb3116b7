"""User domain schemas.

Request and response schemas for user operations.

JSON payloads use camelCase keys (membershipType, isActive, ...) to match
the rest of the library suite; snake_case keys are accepted on input too.
"""

from datetime import date

from pydantic import ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel
from sqlmodel import SQLModel

from user_service.user.models import MembershipType

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+$"


class CamelModel(SQLModel):
    """Base schema serializing fields with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserBase(CamelModel):
    """Fields shared by create and update payloads."""

    name: str = Field(min_length=1, max_length=100)
    email: str = Field(min_length=3, max_length=150, pattern=EMAIL_PATTERN)
    membership_type: MembershipType | None = None
    is_active: bool | None = None
    phone: str | None = Field(default=None, max_length=20)
    address: str | None = Field(default=None, max_length=255)


class UserCreate(UserBase):
    """Schema for creating a user.

    is_active defaults to true and registration_date to today when omitted.
    Any id in the payload is ignored.
    """

    registration_date: date | None = None


class UserUpdate(UserBase):
    """Schema for a full update (PUT).

    All six mutable fields are replaced; omitted optional fields are cleared.
    id and registration_date cannot be changed.
    """


class UserRead(CamelModel):
    """Response schema for a patron record."""

    id: int
    name: str
    email: str
    membership_type: MembershipType | None
    is_active: bool | None
    registration_date: date | None
    phone: str | None
    address: str | None

    @computed_field(alias="maxBooksAllowed")  # type: ignore[prop-decorator]
    @property
    def max_books_allowed(self) -> int:
        if self.membership_type is None:
            return 0
        return self.membership_type.max_books


class UserStats(CamelModel):
    """Snapshot of user counts.

    Built from independent count queries, so the totals are not guaranteed
    to add up while other requests are writing.
    """

    total_users: int
    active_users: int
    basic_users: int
    premium_users: int
    student_users: int


class MembershipPolicyRead(CamelModel):
    """Loan policy of one membership tier."""

    type: MembershipType
    display_name: str
    max_books: int
    loan_duration_days: int
