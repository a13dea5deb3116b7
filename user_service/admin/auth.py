from sqladmin.authentication import AuthenticationBackend
from starlette.requests import Request

from user_service.core.settings import Settings


class AdminAuth(AuthenticationBackend):
    """SQLAdmin auth for library staff using Starlette sessions.

    Only constructed when ``settings.admin_enabled`` is true.
    """

    def __init__(self, settings: Settings) -> None:
        if not settings.admin_enabled:
            raise ValueError("Admin panel requires SESSION_SECRET_KEY and credentials")
        self.settings = settings
        super().__init__(secret_key=settings.session_secret_key)

    async def login(self, request: Request) -> bool:
        form = await request.form()
        username = str(form.get("username", ""))
        password = str(form.get("password", ""))

        ok = (
            username.strip() == self.settings.admin_username
            and password == self.settings.admin_password
        )
        if ok:
            request.session["admin_user"] = username.strip()
        return ok

    async def logout(self, request: Request) -> bool:
        request.session.clear()
        return True

    async def authenticate(self, request: Request) -> bool:
        return bool(request.session.get("admin_user"))
