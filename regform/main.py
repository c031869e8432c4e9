from __future__ import annotations
import logging
from datetime import date

from fastapi import FastAPI, Depends, Request
from fastapi.responses import HTMLResponse
from starlette.exceptions import HTTPException
from starlette.formparsers import MultiPartException

from .config import APP_TITLE, LOG_LEVEL
from .handler import handle_form_submission
from .rendering import templates

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S",
)
log = logging.getLogger("regform")

app = FastAPI(title=APP_TITLE)


def get_today() -> date:
    return date.today()


def _page(request: Request, outcome) -> HTMLResponse:
    return templates.TemplateResponse(
        request, "index.html", {"outcome": outcome, "title": APP_TITLE}
    )


@app.get("/", response_class=HTMLResponse)
def register_page(request: Request):
    return _page(request, handle_form_submission(request.method, None))


@app.post("/", response_class=HTMLResponse)
async def register_submit(request: Request, today: date = Depends(get_today)):
    try:
        form = await request.form()
    except (HTTPException, MultiPartException) as e:
        # unreadable body: every field counts as missing.
        # Inside an app, starlette turns MultiPartException into a 400 HTTPException.
        if isinstance(e, HTTPException) and e.status_code != 400:
            raise
        log.warning("could not parse form body: %s", e)
        form = {}
    return _page(request, handle_form_submission(request.method, form, today=today))


@app.get("/health")
def health():
    return {"status": "ok"}


@app.exception_handler(Exception)
async def unhandled_exception(request: Request, exc: Exception):
    log.error("Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc)
    return HTMLResponse(
        "<p>An unexpected error occurred. Please try again.</p>", status_code=500
    )
