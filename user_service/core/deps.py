"""Centralized dependency type aliases for FastAPI routes.

Import all dependencies from this single module:
    from user_service.core.deps import SessionDep, SettingsDep, UserServiceDep

The chain is explicit: a request gets one Session, one UserRepository over
it and one UserService over the repository.
"""

from typing import Annotated

from fastapi import Depends
from sqlmodel import Session

from user_service.core.settings import Settings, get_settings
from user_service.db.engine import get_session
from user_service.user.repository import UserRepository
from user_service.user.service import UserService

# Database session
SessionDep = Annotated[Session, Depends(get_session)]

# Application settings
SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_user_repository(session: SessionDep) -> UserRepository:
    return UserRepository(session)


UserRepositoryDep = Annotated[UserRepository, Depends(get_user_repository)]


def get_user_service(repository: UserRepositoryDep) -> UserService:
    return UserService(repository)


UserServiceDep = Annotated[UserService, Depends(get_user_service)]
