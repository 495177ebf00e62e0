from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse

from salon.core.errors import store_errors
from salon.core.rate_limiter import rate_limit_ip
from salon.core.utils import sanitize_text
from salon.domain.schemas import AdminCreateRequest, LoginRequest
from salon.services.auth_service import (
    AccountExistsError,
    AuthService,
    InvalidCredentialsError,
    RegistrationError,
    public_admin,
)
from salon.services.session_service import SESSION_COOKIE_NAME, SessionService
from salon.routers.deps import get_auth_service, get_session_service, require_admin

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["admin"])


def _escaped(admin: dict) -> dict:
    public = public_admin(admin)
    return {
        "id": public["id"],
        "email": sanitize_text(public["email"]),
        "full_name": sanitize_text(public["full_name"]),
    }


def login_rate_limit(request: Request) -> None:
    # Counts every attempt, including bodies that fail validation.
    settings = request.app.state.settings
    rate_limit_ip(
        request,
        "admin:login",
        limit=settings.max_login_attempts,
        window_seconds=settings.login_window_seconds,
    )


@router.post("/login", dependencies=[Depends(login_rate_limit)])
def login(
    payload: LoginRequest,
    auth: AuthService = Depends(get_auth_service),
    sessions: SessionService = Depends(get_session_service),
):
    try:
        admin = auth.authenticate(payload.email, payload.password)
    except InvalidCredentialsError:
        logger.info("Rejected admin login for %s", payload.email)
        raise HTTPException(401, "Invalid credentials")
    token = sessions.issue_session(admin)
    response = JSONResponse({"success": True, "admin": _escaped(admin)})
    sessions.set_session_cookie(response, token)
    return response


@router.post("/logout")
def logout(request: Request, sessions: SessionService = Depends(get_session_service)):
    sessions.delete_session(request.cookies.get(SESSION_COOKIE_NAME))
    response = JSONResponse({"success": True})
    sessions.clear_session_cookie(response)
    return response


@router.post("/create")
def create_admin(
    request: Request,
    payload: AdminCreateRequest,
    auth: AuthService = Depends(get_auth_service),
    sessions: SessionService = Depends(get_session_service),
):
    # Open for the very first account only; later accounts need a signed-in admin.
    if auth.has_admins() and not sessions.current_session(request):
        raise HTTPException(401, "Authentication required")
    with store_errors("Failed to create admin"):
        try:
            admin = auth.create_admin(payload.email, payload.password, payload.full_name)
        except RegistrationError as exc:
            raise HTTPException(400, exc.message)
        except AccountExistsError:
            raise HTTPException(400, "Admin already exists")
    return {"success": True, "admin": public_admin(admin)}


@router.get("/me")
def me(sess=Depends(require_admin), auth: AuthService = Depends(get_auth_service)):
    admin = auth.find_by_email(sess.email)
    if not admin:
        raise HTTPException(401, "Authentication required")
    return {"admin": _escaped(admin)}
