from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from user_service.core.settings import get_settings


def add_cors_middleware(app: FastAPI):
    """Allow browser clients of the library suite to call the user API."""
    settings = get_settings()
    origins = settings.cors_origins_list

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # Credentialed requests cannot be combined with a wildcard origin.
        allow_credentials="*" not in origins,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
