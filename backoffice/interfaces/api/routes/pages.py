"""Server-rendered pages for the self-service password reset."""

import logging

from fastapi import APIRouter, Depends, Form
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session

from backoffice.application.use_cases.users import reset_password as reset_password_uc
from backoffice.config import Settings, get_settings
from backoffice.infrastructure.database import get_db
from backoffice.infrastructure.rendering import render_page

router = APIRouter(tags=["pages"], include_in_schema=False)
logger = logging.getLogger(__name__)

RESET_TITLE = "Reset Password"
LOGIN_TITLE = "Login"
GENERIC_RESET_ERROR = "Something went wrong while resetting your password. Please try again."
RESET_SUCCESS_MESSAGE = "Your password has been reset. Please sign in with your new password."


def _reset_form(token: str | None, error: str | None = None) -> HTMLResponse:
    return HTMLResponse(render_page("reset-password", title=RESET_TITLE, token=token or "", error=error))


@router.get("/reset-password", response_class=HTMLResponse)
def reset_password_form(token: str | None = None):
    return _reset_form(token)


@router.post("/reset-password", response_class=HTMLResponse)
def reset_password(
    token: str | None = Form(default=None),
    password: str | None = Form(default=None),
    confirm_password: str | None = Form(default=None, alias="confirmPassword"),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Redeem a reset token; every outcome is an HTML page with status 200."""

    try:
        outcome = reset_password_uc(
            db,
            settings,
            token=token,
            password=password,
            confirm_password=confirm_password,
        )
    except Exception:
        logger.exception("Error resetting password")
        return _reset_form(token, GENERIC_RESET_ERROR)

    if not outcome.ok:
        return _reset_form(token, outcome.error)

    return HTMLResponse(
        render_page(
            "login",
            title=LOGIN_TITLE,
            success=RESET_SUCCESS_MESSAGE,
            login_url=settings.login_url,
        )
    )


@router.get("/login", response_class=HTMLResponse)
def login_page(settings: Settings = Depends(get_settings)):
    return HTMLResponse(render_page("login", title=LOGIN_TITLE, login_url=settings.login_url))


__all__ = ["router"]
