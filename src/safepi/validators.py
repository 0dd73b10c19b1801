"""Input validation for domains, report links and output paths.

Domains end up interpolated into the API query string and into report
filenames, so ``is_valid_domain`` is the only gate in front of both.
"""

import os
import re
from pathlib import Path
from typing import Any
from urllib.parse import unquote, urlparse

MAX_DOMAIN_LENGTH = 253

_LABEL = r"[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
DOMAIN_PATTERN = re.compile(rf"^{_LABEL}(?:\.{_LABEL})*$")

BLOCKED_DOMAIN_PATTERNS = (
    "localhost",
    "127.0.0.1",
    "0.0.0.0",
    "file://",
    "javascript:",
    "data:",
    "ftp://",
    "ftps://",
)

ALLOWED_URL_SCHEMES = frozenset({"http", "https"})

# Checked against the decoded and normalized path.
TRAVERSAL_MARKERS = ("..", "/./", "\\", "%2e%2e", "..%2f", "%2e%2e%2f")

_HTML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)


def is_valid_domain(domain: Any) -> bool:
    """Return True when ``domain`` is a plain, public-looking hostname."""
    if not isinstance(domain, str) or not domain:
        return False
    if len(domain) > MAX_DOMAIN_LENGTH:
        return False

    lowered = domain.lower()
    if any(pattern in lowered for pattern in BLOCKED_DOMAIN_PATTERNS):
        return False

    return DOMAIN_PATTERN.fullmatch(domain) is not None


def is_valid_url(url: Any) -> bool:
    """Return True for well-formed http(s) URLs with a host."""
    if not isinstance(url, str) or not url:
        return False
    try:
        parsed = urlparse(url)
        hostname = parsed.hostname
    except ValueError:
        return False
    return parsed.scheme.lower() in ALLOWED_URL_SCHEMES and bool(hostname)


def escape_html(text: Any) -> str:
    """Escape text for interpolation into HTML. ``None`` becomes an empty string."""
    if text is None:
        return ""
    escaped = str(text)
    # Ampersand goes first so entities produced below are not escaped again.
    for char, entity in _HTML_ESCAPES:
        escaped = escaped.replace(char, entity)
    return escaped


def is_path_traversal(input_path: Any, root: str | Path | None = None) -> bool:
    """
    Return True when ``input_path`` is unsafe to use as a report directory.

    The path is URL-decoded and normalized before the pattern checks, so
    encoded sequences such as ``%2e%2e%2f`` are caught too. Finally the path
    is resolved against ``root`` (the working directory by default) and must
    stay inside it.
    """
    if not isinstance(input_path, str):
        return True

    decoded = unquote(input_path)
    if os.path.isabs(input_path) or os.path.isabs(decoded):
        return True
    if "\\" in decoded:
        return True

    normalized = os.path.normpath(decoded) if decoded else "."
    lowered = normalized.lower()
    if any(marker in lowered for marker in TRAVERSAL_MARKERS):
        return True

    base = Path(root).resolve() if root is not None else Path.cwd().resolve()
    try:
        target = (base / normalized).resolve()
    except (OSError, RuntimeError):
        return True
    return not target.is_relative_to(base)
