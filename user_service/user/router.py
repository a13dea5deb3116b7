"""User domain router.

Maps /api/users requests onto UserService calls. Static paths are declared
before /{user_id} so they are never parsed as ids.
"""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Query, status
from fastapi.responses import PlainTextResponse

from user_service.core.constants import CommonResponses, Routes
from user_service.core.deps import SettingsDep, UserServiceDep
from user_service.user.models import MembershipType
from user_service.user.schemas import (
    MembershipPolicyRead,
    UserCreate,
    UserRead,
    UserStats,
    UserUpdate,
)

router = APIRouter(
    prefix=Routes.USER.prefix,
    tags=[Routes.USER.tag],
    responses={**CommonResponses.BAD_REQUEST},
)

MembershipQuery = Annotated[MembershipType, Query(alias="type")]


@router.get("/health", response_class=PlainTextResponse)
async def health(settings: SettingsDep) -> str:
    """Liveness message for the library gateway."""
    return settings.health_message


@router.get("", response_model=list[UserRead])
@router.get("/", response_model=list[UserRead], include_in_schema=False)
async def list_users(service: UserServiceDep):
    """List all users."""
    return service.list_users()


@router.get("/stats", response_model=UserStats)
async def get_stats(service: UserServiceDep):
    """Total, active and per-membership user counts."""
    return service.get_stats()


@router.get("/active", response_model=list[UserRead])
async def list_active_users(service: UserServiceDep):
    return service.list_active_users()


@router.get("/inactive", response_model=list[UserRead])
async def list_inactive_users(service: UserServiceDep):
    return service.list_inactive_users()


@router.get("/can-borrow", response_model=list[UserRead])
async def list_borrow_eligible_users(service: UserServiceDep):
    """Active users with a membership tier."""
    return service.list_borrow_eligible_users()


@router.get("/membership", response_model=list[UserRead])
async def list_users_by_membership(
    membership_type: MembershipQuery, service: UserServiceDep
):
    """List users of one membership tier (?type=BASIC|PREMIUM|STUDENT)."""
    return service.list_users_by_membership(membership_type)


@router.get("/membership/types", response_model=list[MembershipPolicyRead])
async def list_membership_types(service: UserServiceDep):
    """Loan limits and durations of every membership tier."""
    return service.list_membership_policies()


@router.get("/search/name", response_model=list[UserRead])
async def search_users_by_name(
    name: Annotated[str, Query()], service: UserServiceDep
):
    """Case-insensitive substring search on name."""
    return service.search_users_by_name(name)


@router.get("/registered", response_model=list[UserRead])
async def list_users_registered_between(
    start: Annotated[date, Query()],
    end: Annotated[date, Query()],
    service: UserServiceDep,
):
    """Users registered from start to end (inclusive, YYYY-MM-DD)."""
    return service.list_users_registered_between(start, end)


@router.get("/registered/today", response_model=list[UserRead])
async def list_users_registered_today(service: UserServiceDep):
    return service.list_users_registered_today()


@router.get(
    "/email/{email}",
    response_model=UserRead,
    responses={**CommonResponses.NOT_FOUND},
)
async def get_user_by_email(email: str, service: UserServiceDep):
    """Get a user by exact email."""
    return service.get_user_by_email(email)


@router.post(
    "",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    responses={**CommonResponses.CONFLICT},
)
@router.post(
    "/",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
async def create_user(user_create: UserCreate, service: UserServiceDep):
    """Create a user.

    isActive defaults to true and registrationDate to today.
    """
    return service.create_user(user_create)


@router.get(
    "/{user_id}",
    response_model=UserRead,
    responses={**CommonResponses.NOT_FOUND},
)
async def get_user(user_id: int, service: UserServiceDep):
    """Get a user by ID."""
    return service.get_user(user_id)


@router.get(
    "/{user_id}/validate",
    response_model=bool,
    responses={**CommonResponses.NOT_FOUND},
)
async def validate_user(user_id: int, service: UserServiceDep):
    """Whether the user can borrow books (active and with a membership)."""
    return service.validate_user(user_id)


@router.put(
    "/{user_id}",
    response_model=UserRead,
    responses={**CommonResponses.NOT_FOUND, **CommonResponses.CONFLICT},
)
async def update_user(
    user_id: int, user_update: UserUpdate, service: UserServiceDep
):
    """Replace name, email, membership, status, phone and address of a user."""
    return service.update_user(user_id, user_update)


@router.patch(
    "/{user_id}/toggle-status",
    response_model=UserRead,
    responses={**CommonResponses.NOT_FOUND},
)
async def toggle_user_status(user_id: int, service: UserServiceDep):
    """Activate an inactive user or deactivate an active one."""
    return service.toggle_user_status(user_id)


@router.patch(
    "/{user_id}/membership",
    response_model=UserRead,
    responses={**CommonResponses.NOT_FOUND},
)
async def update_membership(
    user_id: int, membership_type: MembershipQuery, service: UserServiceDep
):
    """Change the membership tier of a user (?type=BASIC|PREMIUM|STUDENT)."""
    return service.update_membership(user_id, membership_type)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={**CommonResponses.NOT_FOUND},
)
async def delete_user(user_id: int, service: UserServiceDep):
    """Delete a user permanently."""
    service.delete_user(user_id)
