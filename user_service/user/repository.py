"""Persistence gateway for User records.

Thin query layer over a SQLModel session. Lookups return ``None`` when
nothing matches; list queries return possibly-empty lists. Business rules
live in UserService.
"""

from datetime import date

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, col, select

from user_service.user.exceptions import EmailExistsError
from user_service.user.models import MembershipType, User


def _is_email_conflict(error: IntegrityError) -> bool:
    # SQLite: "UNIQUE constraint failed: users.email"
    # PostgreSQL: duplicate key value violates unique constraint "ix_users_email"
    message = str(error.orig).lower()
    return "email" in message and ("unique" in message or "duplicate" in message)


class UserRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    # --- single-record lookups ---

    def get(self, user_id: int) -> User | None:
        return self.session.get(User, user_id)

    def get_by_email(self, email: str) -> User | None:
        return self.session.exec(select(User).where(User.email == email)).first()

    def exists_by_email(self, email: str) -> bool:
        statement = select(User.id).where(User.email == email).limit(1)
        return self.session.exec(statement).first() is not None

    # --- list queries ---

    def list_all(self) -> list[User]:
        return list(self.session.exec(select(User)).all())

    def list_active(self) -> list[User]:
        return self._list_where(col(User.is_active).is_(True))

    def list_inactive(self) -> list[User]:
        return self._list_where(col(User.is_active).is_(False))

    def list_by_membership(self, membership_type: MembershipType) -> list[User]:
        return self._list_where(col(User.membership_type) == membership_type)

    def list_by_membership_and_active(
        self, membership_type: MembershipType, is_active: bool
    ) -> list[User]:
        return self._list_where(
            col(User.membership_type) == membership_type,
            col(User.is_active).is_(is_active),
        )

    def list_by_name(self, name: str) -> list[User]:
        """Case-insensitive substring match on name."""
        pattern = name.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        return self._list_where(col(User.name).ilike(f"%{pattern}%", escape="\\"))

    def list_registered_between(self, start: date, end: date) -> list[User]:
        """Users registered on any day from start to end, inclusive."""
        return self._list_where(col(User.registration_date).between(start, end))

    def list_registered_on(self, day: date) -> list[User]:
        return self._list_where(col(User.registration_date) == day)

    def list_borrow_eligible(self) -> list[User]:
        return self._list_where(
            col(User.is_active).is_(True),
            col(User.membership_type).is_not(None),
        )

    # --- counts ---

    def count_all(self) -> int:
        return self._count()

    def count_active(self) -> int:
        return self._count(col(User.is_active).is_(True))

    def count_by_membership(self, membership_type: MembershipType) -> int:
        return self._count(col(User.membership_type) == membership_type)

    # --- writes ---

    def save(self, user: User) -> User:
        """Insert or update by id, then reload the stored row.

        The unique index on email is the final guard against two writers
        racing past UserService's existence check. Other integrity errors
        propagate unchanged.
        """
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            if _is_email_conflict(e):
                raise EmailExistsError.for_email(user.email) from e
            raise
        self.session.refresh(user)
        return user

    def delete(self, user: User) -> None:
        self.session.delete(user)
        self.session.commit()

    def _list_where(self, *conditions) -> list[User]:
        statement = select(User).where(*conditions).order_by(col(User.id))
        return list(self.session.exec(statement).all())

    def _count(self, *conditions) -> int:
        statement = select(func.count()).select_from(User)
        if conditions:
            statement = statement.where(*conditions)
        return self.session.exec(statement).one()
