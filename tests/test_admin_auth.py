"""Tests for user_service/admin/auth.py - SQLAdmin authentication."""

from unittest.mock import MagicMock

import pytest

from user_service.admin.auth import AdminAuth
from user_service.core.settings import Settings


@pytest.fixture
def admin_settings():
    return Settings(
        database_url="sqlite://",
        session_secret_key="test-secret-key",
        admin_username="librarian",
        admin_password="s3cret",
    )


@pytest.fixture
def admin_auth(admin_settings):
    """Create AdminAuth instance."""
    return AdminAuth(admin_settings)


@pytest.fixture
def mock_request():
    """Create a mock Starlette request with session."""
    request = MagicMock()
    request.session = {}
    return request


def _form(**fields):
    async def mock_form():
        return fields

    return mock_form


def test_admin_auth_requires_credentials():
    settings = Settings(database_url="sqlite://", admin_username=None)

    with pytest.raises(ValueError):
        AdminAuth(settings)


@pytest.mark.asyncio
async def test_admin_login_success(admin_auth, mock_request):
    """Test AdminAuth.login() with valid credentials returns True."""
    mock_request.form = _form(username="librarian", password="s3cret")

    result = await admin_auth.login(mock_request)

    assert result is True
    assert mock_request.session["admin_user"] == "librarian"


@pytest.mark.asyncio
async def test_admin_login_invalid_username(admin_auth, mock_request):
    """Test AdminAuth.login() with invalid username returns False."""
    mock_request.form = _form(username="wrong-user-name", password="s3cret")

    result = await admin_auth.login(mock_request)

    assert result is False
    assert "admin_user" not in mock_request.session


@pytest.mark.asyncio
async def test_admin_login_invalid_password(admin_auth, mock_request):
    """Test AdminAuth.login() with invalid password returns False."""
    mock_request.form = _form(username="librarian", password="wrong-password")

    result = await admin_auth.login(mock_request)

    assert result is False
    assert "admin_user" not in mock_request.session


@pytest.mark.asyncio
async def test_admin_login_strips_whitespace(admin_auth, mock_request):
    """Test AdminAuth.login() strips whitespace from username."""
    mock_request.form = _form(username="  librarian  ", password="s3cret")

    result = await admin_auth.login(mock_request)

    assert result is True
    assert mock_request.session["admin_user"] == "librarian"


@pytest.mark.asyncio
async def test_admin_logout(admin_auth, mock_request):
    """Test AdminAuth.logout() clears session and returns True."""
    mock_request.session["admin_user"] = "librarian"
    mock_request.session["other_data"] = "test"

    result = await admin_auth.logout(mock_request)

    assert result is True
    assert mock_request.session == {}


@pytest.mark.asyncio
async def test_admin_authenticate_with_session(admin_auth, mock_request):
    """Test AdminAuth.authenticate() returns True when admin_user in session."""
    mock_request.session["admin_user"] = "librarian"

    assert await admin_auth.authenticate(mock_request) is True


@pytest.mark.asyncio
async def test_admin_authenticate_without_session(admin_auth, mock_request):
    """Test AdminAuth.authenticate() returns False when no admin_user in session."""
    assert await admin_auth.authenticate(mock_request) is False
