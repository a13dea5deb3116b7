import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI
from sqladmin import Admin

from user_service.admin.auth import AdminAuth
from user_service.admin.views import UserAdmin
from user_service.core.cors import add_cors_middleware
from user_service.core.exception_handlers import register_exception_handlers
from user_service.core.logging import configure_logging
from user_service.core.request_logging import add_request_logging_middleware
from user_service.core.settings import Settings, get_settings
from user_service.db.engine import engine, init_db
from user_service.health.router import router as health_router
from user_service.user.router import router as user_router

configure_logging()

logger = logging.getLogger("user_service")


@asynccontextmanager
async def lifespan(_: FastAPI):
    init_db()
    settings = get_settings()
    logger.info("%s started on port %s", settings.service_name, settings.port)
    yield


def mount_admin(app: FastAPI, settings: Settings) -> Admin | None:
    """Mount the SQLAdmin UI at /admin when admin credentials are configured."""
    if not settings.admin_enabled:
        logger.info("Admin panel disabled (no admin credentials configured)")
        return None

    admin = Admin(
        app=app,
        engine=engine,
        authentication_backend=AdminAuth(settings),
    )
    admin.add_view(UserAdmin)
    return admin


app = FastAPI(title="Library User Service", version="0.1.0", lifespan=lifespan)

api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(user_router)

app.include_router(api_router)

add_request_logging_middleware(app)
add_cors_middleware(app)
register_exception_handlers(app)

mount_admin(app, get_settings())
