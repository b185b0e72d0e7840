"""Legacy regex-chain sanitizer and plain-text helpers.

Used for constrained description fields. It is deliberately stricter about
attributes than :mod:`htmlguard.sanitizer` (every attribute is dropped) and
looser about text (nothing is escaped).
"""
from __future__ import annotations

import re

from .allowlists import LEGACY_ALLOWED_TAGS

_SCRIPT_BLOCK_RE = re.compile(r"<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>", re.IGNORECASE)
_QUOTED_HANDLER_RE = re.compile(r"""\son\w+\s*=\s*["'][^"']*["']""", re.IGNORECASE)
_BARE_HANDLER_RE = re.compile(r"\son\w+\s*=\s*[^\s>]*", re.IGNORECASE)
_JAVASCRIPT_RE = re.compile(r"javascript:", re.IGNORECASE)
_DATA_HTML_RE = re.compile(r"data:text/html", re.IGNORECASE)
# Tag names run until whitespace, "/" or ">", as browsers read them.
_TAG_RE = re.compile(r"</?([a-z][^\s/>]*)(?:[\s/][^>]*)?>", re.IGNORECASE)
_ANY_TAG_RE = re.compile(r"<[^>]*>")


def sanitize_legacy_html(html: str | None) -> str:
    """Sanitize *html* with the legacy profile.

    Script blocks are removed together with their content, event handlers,
    ``javascript:`` and ``data:text/html`` are cut out, and every tag outside
    the legacy allowlist is stripped while its text is kept. Allowed tags are
    re-emitted bare.
    """
    if not html:
        return ""

    sanitized = _SCRIPT_BLOCK_RE.sub("", html)
    sanitized = _QUOTED_HANDLER_RE.sub("", sanitized)
    sanitized = _BARE_HANDLER_RE.sub("", sanitized)
    sanitized = _JAVASCRIPT_RE.sub("", sanitized)
    sanitized = _DATA_HTML_RE.sub("", sanitized)

    # Removing a tag can splice a new one together ("<<x>img ...>"), so
    # repeat until nothing changes.
    while True:
        rebuilt = _TAG_RE.sub(_rebuild_bare_tag, sanitized)
        if rebuilt == sanitized:
            return rebuilt
        sanitized = rebuilt


def _rebuild_bare_tag(match: re.Match[str]) -> str:
    tag = match.group(1).lower()
    if tag not in LEGACY_ALLOWED_TAGS:
        return ""
    markup = match.group(0)
    if markup.endswith("/>"):
        return f"<{tag} />"
    if markup.startswith("</"):
        return f"</{tag}>"
    return f"<{tag}>"


def nl2br(text: str | None) -> str:
    """Replace every newline in *text* with ``<br>``."""
    if not text:
        return ""
    return text.replace("\n", "<br>")


def strip_html(html: str | None) -> str:
    """Remove every tag from *html*, leaving a plain-text preview."""
    if not html:
        return ""
    return _ANY_TAG_RE.sub("", html)
