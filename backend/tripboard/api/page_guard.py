"""
Route guard for pages served outside the JSON API.

Anonymous visitors are sent to ``/login``; signed-in users visiting
``/login`` or ``/signup`` are sent to ``/``.
"""
from fastapi import Request
from fastapi.responses import RedirectResponse
from tripboard.services.auth_service import resolve_session

UNGUARDED_PREFIXES = ("/api", "/static", "/health", "/docs", "/redoc", "/openapi.json", "/favicon.ico")
AUTH_PAGES = ("/login", "/signup")


async def page_guard(request: Request, call_next):
    path = request.url.path
    if path.startswith(UNGUARDED_PREFIXES):
        return await call_next(request)

    settings = request.app.state.settings
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    db = request.app.state.db.session()
    try:
        user_id = resolve_session(token, db, settings=settings)
    finally:
        db.close()

    on_auth_page = path.startswith(AUTH_PAGES)
    if user_id is None and not on_auth_page:
        return RedirectResponse(url="/login")
    if user_id is not None and on_auth_page:
        return RedirectResponse(url="/")

    return await call_next(request)
