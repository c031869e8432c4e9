from __future__ import annotations

from fastapi.templating import Jinja2Templates

from .config import TEMPLATES_DIR
from .schemas import Outcome

templates = Jinja2Templates(directory=TEMPLATES_DIR)


def render_outcome(outcome: Outcome) -> str:
    """Render only the page body: result block, or error list plus the form."""
    return templates.get_template("register.html").render(outcome=outcome)
