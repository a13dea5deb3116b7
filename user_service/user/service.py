"""User domain service.

Business rules for patron records: email uniqueness, creation defaults,
status and membership changes, loan eligibility and statistics. The service
holds nothing but its repository, so one instance per request is enough.
"""

import logging
from datetime import date

from user_service.core.exceptions import BadRequestError
from user_service.user.exceptions import EmailExistsError, UserNotFoundError
from user_service.user.models import MEMBERSHIP_POLICIES, MembershipType, User
from user_service.user.repository import UserRepository
from user_service.user.schemas import (
    MembershipPolicyRead,
    UserCreate,
    UserStats,
    UserUpdate,
)

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, repository: UserRepository) -> None:
        self.repository = repository

    # --- queries ---

    def list_users(self) -> list[User]:
        logger.info("Listing all users")
        return self.repository.list_all()

    def get_user(self, user_id: int) -> User:
        logger.info("Looking up user %s", user_id, extra={"user_id": user_id})
        user = self.repository.get(user_id)
        if user is None:
            raise UserNotFoundError.with_id(user_id)
        return user

    def get_user_by_email(self, email: str) -> User:
        logger.info("Looking up user by email %s", email)
        user = self.repository.get_by_email(email)
        if user is None:
            raise UserNotFoundError.with_email(email)
        return user

    def list_active_users(self) -> list[User]:
        logger.info("Listing active users")
        return self.repository.list_active()

    def list_inactive_users(self) -> list[User]:
        logger.info("Listing inactive users")
        return self.repository.list_inactive()

    def list_borrow_eligible_users(self) -> list[User]:
        """Active users holding any membership tier."""
        logger.info("Listing users who can borrow")
        return self.repository.list_borrow_eligible()

    def list_users_by_membership(self, membership_type: MembershipType) -> list[User]:
        logger.info("Listing users with membership %s", membership_type.value)
        return self.repository.list_by_membership(membership_type)

    def search_users_by_name(self, name: str) -> list[User]:
        logger.info("Searching users by name %r", name)
        return self.repository.list_by_name(name)

    def list_users_registered_between(self, start: date, end: date) -> list[User]:
        if start > end:
            raise BadRequestError(
                f"Start date {start.isoformat()} is after end date {end.isoformat()}"
            )
        logger.info("Listing users registered between %s and %s", start, end)
        return self.repository.list_registered_between(start, end)

    def list_users_registered_today(self) -> list[User]:
        logger.info("Listing users registered today")
        return self.repository.list_registered_on(date.today())

    def validate_user(self, user_id: int) -> bool:
        """Whether the user may borrow books.

        Raises UserNotFoundError for unknown ids instead of returning False.
        """
        user = self.get_user(user_id)
        can_borrow = user.can_borrow_books()
        logger.info(
            "User %s %s borrow books",
            user.name,
            "can" if can_borrow else "cannot",
            extra={"user_id": user_id},
        )
        return can_borrow

    def get_stats(self) -> UserStats:
        logger.info("Computing user statistics")
        return UserStats(
            total_users=self.repository.count_all(),
            active_users=self.repository.count_active(),
            basic_users=self.repository.count_by_membership(MembershipType.BASIC),
            premium_users=self.repository.count_by_membership(MembershipType.PREMIUM),
            student_users=self.repository.count_by_membership(MembershipType.STUDENT),
        )

    @staticmethod
    def list_membership_policies() -> list[MembershipPolicyRead]:
        return [
            MembershipPolicyRead(
                type=membership_type,
                display_name=policy.display_name,
                max_books=policy.max_books,
                loan_duration_days=policy.loan_duration_days,
            )
            for membership_type, policy in MEMBERSHIP_POLICIES.items()
        ]

    # --- mutations ---

    def create_user(self, data: UserCreate) -> User:
        logger.info("Creating user %s", data.name)
        if self.repository.exists_by_email(data.email):
            raise EmailExistsError.for_email(data.email)

        user = User.model_validate(data.model_dump())
        if user.is_active is None:
            user.is_active = True
        if user.registration_date is None:
            user.registration_date = date.today()

        saved = self.repository.save(user)
        logger.info("Created user %s", saved.id, extra={"user_id": saved.id})
        return saved

    def update_user(self, user_id: int, data: UserUpdate) -> User:
        """Replace the six mutable fields of an existing user.

        Creation defaults are not re-applied: an unset is_active clears the
        stored flag.
        """
        logger.info("Updating user %s", user_id, extra={"user_id": user_id})
        user = self.get_user(user_id)

        if data.email != user.email and self.repository.exists_by_email(data.email):
            raise EmailExistsError.for_email(data.email)

        user.name = data.name
        user.email = data.email
        user.membership_type = data.membership_type
        user.is_active = data.is_active
        user.phone = data.phone
        user.address = data.address

        updated = self.repository.save(user)
        logger.info("Updated user %s", user_id, extra={"user_id": user_id})
        return updated

    def delete_user(self, user_id: int) -> None:
        logger.info("Deleting user %s", user_id, extra={"user_id": user_id})
        user = self.get_user(user_id)
        self.repository.delete(user)
        logger.info("Deleted user %s", user_id, extra={"user_id": user_id})

    def toggle_user_status(self, user_id: int) -> User:
        logger.info("Toggling status of user %s", user_id, extra={"user_id": user_id})
        user = self.get_user(user_id)
        # An unset flag counts as inactive, so toggling activates it.
        user.is_active = not user.is_active
        updated = self.repository.save(user)
        logger.info(
            "User %s %s",
            user_id,
            "activated" if updated.is_active else "deactivated",
            extra={"user_id": user_id},
        )
        return updated

    def update_membership(
        self, user_id: int, membership_type: MembershipType
    ) -> User:
        logger.info(
            "Changing membership of user %s to %s",
            user_id,
            membership_type.value,
            extra={"user_id": user_id},
        )
        user = self.get_user(user_id)
        user.membership_type = membership_type
        return self.repository.save(user)
