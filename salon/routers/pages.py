from __future__ import annotations

import logging

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from salon.core.errors import store_errors
from salon.services.booking_service import MissingFieldsError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="", tags=["pages"])


def _templates(request: Request):
    tpl = getattr(getattr(request.app, "state", None), "templates", None)
    if tpl:
        return tpl
    raise RuntimeError("templates not configured")


def _render(request: Request, name: str, context: dict | None = None, status_code: int = 200):
    settings = request.app.state.settings
    ctx = {"business_name": settings.business_name}
    ctx.update(context or {})
    return _templates(request).TemplateResponse(request, name, ctx, status_code=status_code)


def _home(request: Request, *, error: str = "", form: dict | None = None, status_code: int = 200):
    state = request.app.state
    return _render(
        request,
        "index.html",
        {
            "services": state.catalog_service.list(),
            "gallery": state.media_service.gallery(),
            "error": error,
            "form": form or {},
        },
        status_code=status_code,
    )


@router.get("/", response_class=HTMLResponse)
def index(request: Request):
    return _home(request)


@router.post("/book")
def book(
    request: Request,
    name: str = Form(""),
    phone: str = Form(""),
    service: str = Form(""),
    date: str = Form(""),
    time: str = Form(""),
    notes: str = Form(""),
):
    bookings = request.app.state.booking_service
    form = {"name": name, "phone": phone, "service": service, "date": date, "time": time, "notes": notes}
    with store_errors("Failed to save booking"):
        try:
            _, whatsapp_url = bookings.create(
                customer_name=name,
                customer_phone=phone,
                service_name=service,
                booking_date=date,
                booking_time=time,
                notes=notes,
            )
        except MissingFieldsError:
            return _home(
                request,
                error="Please fill in all required fields (Name, Phone, Service, Date, and Time)",
                form=form,
                status_code=400,
            )
    return RedirectResponse(whatsapp_url, status_code=303)


@router.get("/products", response_class=HTMLResponse)
def products_page(request: Request):
    return _render(request, "products.html", {"products": request.app.state.product_service.list()})


@router.get("/videos", response_class=HTMLResponse)
def videos_page(request: Request):
    return _render(request, "videos.html", {"videos": request.app.state.media_service.videos()})


@router.get("/admin/login", response_class=HTMLResponse)
def admin_login_page(request: Request):
    return _render(request, "admin/login.html")


@router.get("/admin/signup", response_class=HTMLResponse)
def admin_signup_page(request: Request):
    return _render(request, "admin/signup.html")


@router.get("/admin/reset", response_class=HTMLResponse)
def admin_reset_page(request: Request):
    return _render(request, "admin/reset.html")


@router.get("/admin/dashboard", response_class=HTMLResponse)
def admin_dashboard(request: Request):
    sess = request.app.state.session_service.current_session(request)
    if not sess:
        return RedirectResponse("/admin/login", status_code=303)
    state = request.app.state
    return _render(
        request,
        "admin/dashboard.html",
        {
            "email": sess.email,
            "bookings": state.booking_service.list(),
            "products": state.product_service.list(),
            "services": state.catalog_service.list(),
        },
    )
