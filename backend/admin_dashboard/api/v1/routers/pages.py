# admin_dashboard/api/v1/routers/pages.py
"""
Server-rendered dashboard pages.
The pages only carry the session claims; all user data is loaded by the
browser from the JSON API.
"""
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates

from admin_dashboard.api.v1.deps import optional_session_claims
from admin_dashboard.config import settings
from admin_dashboard.models.user import Role
from admin_dashboard.schemas.auth import SessionClaims

TEMPLATES_DIR = Path(__file__).resolve().parents[3] / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["pages"], include_in_schema=False)

SIGN_IN_PATH = "/"


def _to_sign_in() -> RedirectResponse:
    return RedirectResponse(SIGN_IN_PATH, status_code=status.HTTP_303_SEE_OTHER)


def _home_for(claims: SessionClaims) -> str:
    return "/admin" if claims.is_admin else "/member"


@router.get("/")
async def sign_in_page(request: Request, claims: Optional[SessionClaims] = Depends(optional_session_claims)):
    # Already signed in: go straight to the matching area
    if claims:
        return RedirectResponse(_home_for(claims), status_code=status.HTTP_303_SEE_OTHER)
    return templates.TemplateResponse(request, "login.html", {"app_name": settings.APP_NAME})


@router.get("/member")
async def member_page(request: Request, claims: Optional[SessionClaims] = Depends(optional_session_claims)):
    if not claims:
        return _to_sign_in()
    return templates.TemplateResponse(
        request,
        "member.html",
        {"app_name": settings.APP_NAME, "claims": claims},
    )


@router.get("/admin")
async def admin_page(request: Request, claims: Optional[SessionClaims] = Depends(optional_session_claims)):
    if not claims or not claims.is_admin:
        return _to_sign_in()
    return templates.TemplateResponse(
        request,
        "admin.html",
        {
            "app_name": settings.APP_NAME,
            "claims": claims,
            "roles": [r.value for r in Role],
            "poll_interval_ms": settings.poll_interval_ms,
        },
    )
