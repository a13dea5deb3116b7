"""User domain models.

SQLModel table definition for library patrons and the membership tiers
that govern their loan limits.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from sqlalchemy import Column
from sqlalchemy import Enum as SAEnum
from sqlmodel import Field, SQLModel


@dataclass(frozen=True)
class MembershipPolicy:
    """Loan policy attached to a membership tier."""

    display_name: str
    max_books: int
    loan_duration_days: int


class MembershipType(str, Enum):
    """Membership tier of a patron.

    - BASIC: 3 concurrent loans, 14 days each
    - PREMIUM: 10 concurrent loans, 30 days each
    - STUDENT: 5 concurrent loans, 21 days each
    """

    BASIC = "BASIC"
    PREMIUM = "PREMIUM"
    STUDENT = "STUDENT"

    @property
    def policy(self) -> MembershipPolicy:
        return MEMBERSHIP_POLICIES[self]

    @property
    def display_name(self) -> str:
        return self.policy.display_name

    @property
    def max_books(self) -> int:
        return self.policy.max_books

    @property
    def loan_duration_days(self) -> int:
        return self.policy.loan_duration_days


MEMBERSHIP_POLICIES: dict[MembershipType, MembershipPolicy] = {
    MembershipType.BASIC: MembershipPolicy("Básica", 3, 14),
    MembershipType.PREMIUM: MembershipPolicy("Premium", 10, 30),
    MembershipType.STUDENT: MembershipPolicy("Estudiante", 5, 21),
}


class User(SQLModel, table=True):
    """Patron database model.

    is_active and registration_date are filled by UserService on create;
    the columns stay nullable because a full update may clear is_active.
    """

    __tablename__: str = "users"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=100)
    email: str = Field(index=True, unique=True, max_length=150)
    membership_type: MembershipType | None = Field(
        default=None,
        sa_column=Column(
            "membership_type",
            SAEnum(MembershipType, name="membershiptype", length=50),
            nullable=True,
        ),
    )
    is_active: bool | None = Field(default=None)
    registration_date: date | None = Field(default=None)
    phone: str | None = Field(default=None, max_length=20)
    address: str | None = Field(default=None, max_length=255)

    def can_borrow_books(self) -> bool:
        """Active patrons with any membership tier may borrow."""
        return self.is_active is True and self.membership_type is not None

    @property
    def max_books_allowed(self) -> int:
        if self.membership_type is None:
            return 0
        return self.membership_type.max_books
