from __future__ import annotations
from typing import Any

from markupsafe import Markup, escape


def trim(value: Any) -> str:
    """Strip surrounding whitespace; anything that isn't a string counts as empty."""
    if not isinstance(value, str):
        return ""
    return value.strip()


def escape_markup(value: str) -> Markup:
    # & < > " ' -> &amp; &lt; &gt; &#34; &#39;
    return escape(value)


def sanitize_input(value: Any) -> Markup:
    """
    Trim first, then escape. The result is a Markup string so templates
    render it as-is instead of escaping it twice.
    """
    return escape_markup(trim(value))
