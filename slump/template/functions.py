"""
Template functions available inside delimiters.

These mirror the small set of built-in functions found in Go-style text
templates (printf, print, index, ...) so messages such as
``{printf("%.2f", value)}`` work without extra setup.
"""

from __future__ import annotations

import html as _html
import json
import re
from typing import Any, Callable, Dict
from urllib.parse import quote_plus

_VERB_RE = re.compile(r"%%|%([-+ #0]*\d*(?:\.\d+)?)v")


def _translate_verbs(fmt: str) -> str:
    # %v is the generic "value" verb; Python spells it %s
    return _VERB_RE.sub(lambda m: m.group(0) if m.group(1) is None else f"%{m.group(1)}s", fmt)


def printf(fmt: str, *args: Any) -> str:
    """Format ``args`` with a printf-style format string."""
    return _translate_verbs(fmt) % args


def sprint(*args: Any) -> str:
    """Concatenate arguments, adding spaces between non-string operands."""
    out = []
    prev_string = True
    for i, arg in enumerate(args):
        is_string = isinstance(arg, str)
        if i > 0 and not is_string and not prev_string:
            out.append(" ")
        out.append(str(arg))
        prev_string = is_string
    return "".join(out)


def sprintln(*args: Any) -> str:
    """Join arguments with spaces and append a newline."""
    return " ".join(str(arg) for arg in args) + "\n"


def index(obj: Any, *keys: Any) -> Any:
    """Index successively into ``obj`` with each key."""
    for key in keys:
        obj = obj[key]
    return obj


def js_escape(value: Any) -> str:
    """Escape a value for embedding inside a JavaScript string literal."""
    escaped = json.dumps(str(value))[1:-1]
    return escaped.replace("<", "\\u003c").replace(">", "\\u003e").replace("'", "\\'")


def html_escape(value: Any) -> str:
    return _html.escape(str(value))


def urlquery(*args: Any) -> str:
    return quote_plus(sprint(*args))


def template_functions() -> Dict[str, Callable[..., Any]]:
    """Return the functions installed as globals in every environment."""
    return {
        "printf": printf,
        "print": sprint,
        "println": sprintln,
        "len": len,
        "index": index,
        "html": html_escape,
        "js": js_escape,
        "urlquery": urlquery,
    }
