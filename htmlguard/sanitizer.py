"""Strict HTML sanitizer for untrusted rich text.

The scanner makes a single left-to-right pass over the input and classifies
each run as text, comment, or tag. Text is escaped, comments are dropped, and
tags survive only when their name is allowlisted; surviving tags are rebuilt
from scratch with the attributes that pass validation. A ``script`` element
is dropped together with its content; every other unknown tag, ``style``,
``iframe``, ``object`` and void ``embed`` included, loses only its markup
and its text is kept.

The output is meant to be injected into a rendering sink without any further
checks, so every branch degrades to something safe instead of raising.
"""
from __future__ import annotations

import re

from .allowlists import (
    DANGEROUS_PROTOCOLS,
    DANGEROUS_STYLE_PATTERNS,
    STRICT_ALLOWED_TAGS,
    URL_ATTRS,
    allowed_attrs_for,
)

_ESCAPE_TABLE = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#39;",
    }
)

# name, optionally followed by ="...", ='...' or a bare token
_ATTR_RE = re.compile(
    r"""([a-zA-Z_:][-a-zA-Z0-9_:.]*)(?:\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s"'=<>`]+)))?"""
)
_TAG_NAME_END_RE = re.compile(r"[\s/]")

# Script source is code, not text: it goes together with its element.
_SCRIPT_CLOSE_RE = re.compile(r"</script(?=[\s/>])", re.IGNORECASE)

# Browsers drop these before resolving a URL scheme.
_URL_TAB_NEWLINE_RE = re.compile(r"[\t\n\r]")
_URL_EDGE_CHARS = "".join(chr(c) for c in range(0x21))

_REL_HARDENING = ' rel="noopener noreferrer"'


def escape_html(text: str) -> str:
    """Escape ``& < > " '`` so *text* is inert in element and attribute context."""
    return text.translate(_ESCAPE_TABLE)


def parse_attributes(attr_string: str) -> dict[str, str]:
    """Parse the attribute text of a tag into an ordered ``name -> value`` dict.

    Parsing is lenient: fragments that do not look like an attribute are
    skipped, valueless attributes map to ``""``, names are lowercased and a
    re-declared name keeps its first position but takes the last value.
    """
    attrs: dict[str, str] = {}
    for match in _ATTR_RE.finditer(attr_string):
        name, double_quoted, single_quoted, bare = match.groups()
        if double_quoted is not None:
            value = double_quoted
        elif single_quoted is not None:
            value = single_quoted
        elif bare is not None:
            value = bare
        else:
            value = ""
        attrs[name.lower()] = value
    return attrs


def is_safe_url(url: str) -> bool:
    """Return False when *url* starts with a dangerous scheme such as ``javascript:``."""
    normalized = _URL_TAB_NEWLINE_RE.sub("", url).strip(_URL_EDGE_CHARS).strip().lower()
    return not normalized.startswith(DANGEROUS_PROTOCOLS)


def sanitize_style(css: str) -> str:
    """Delete script-capable tokens from an inline ``style`` value.

    Unlike URL attributes the value is never rejected outright; each
    dangerous token is removed and the rest of the declaration is kept.
    """
    for pattern in DANGEROUS_STYLE_PATTERNS:
        css = pattern.sub("", css)
    return css


def sanitize_attribute(tag: str, name: str, value: str) -> str | None:
    """Validate one attribute of an allowed tag.

    Returns the value to emit (unescaped), or ``None`` when the attribute
    must be dropped.
    """
    tag = tag.lower()
    name = name.lower()
    if name not in allowed_attrs_for(tag):
        return None
    if name in URL_ATTRS:
        return value if is_safe_url(value) else None
    if name == "style":
        return sanitize_style(value)
    return value


def sanitize_html(html: str | None) -> str:
    """Sanitize untrusted HTML with the strict allowlist profile.

    Args:
        html: Raw, user-authored markup. ``None`` and ``""`` give ``""``.

    Returns:
        Markup containing only allowlisted tags and attributes, with every
        text run and attribute value escaped.

    Example:
        >>> sanitize_html('<script>alert(1)</script><p>hi</p>')
        '<p>hi</p>'
    """
    if not html:
        return ""

    parts: list[str] = []
    index = 0
    length = len(html)

    while index < length:
        tag_start = html.find("<", index)
        if tag_start == -1:
            parts.append(escape_html(html[index:]))
            break
        if tag_start > index:
            parts.append(escape_html(html[index:tag_start]))

        if html.startswith("<!--", tag_start):
            comment_end = html.find("-->", tag_start + 4)
            # An unterminated comment swallows the rest of the input.
            index = length if comment_end == -1 else comment_end + 3
            continue

        tag_end = html.find(">", tag_start)
        if tag_end == -1:
            parts.append(escape_html(html[tag_start:]))
            break

        index = tag_end + 1
        tag, attr_string, is_closing, is_self_closing = _split_tag(html[tag_start + 1 : tag_end])

        if tag == "script" and not is_closing:
            index = _skip_script_content(html, index)
        elif tag in STRICT_ALLOWED_TAGS:
            if is_closing:
                parts.append(f"</{tag}>")
            else:
                parts.append(_render_start_tag(tag, attr_string, is_self_closing))

    return "".join(parts)


def _split_tag(body: str) -> tuple[str, str, bool, bool]:
    """Split the text between ``<`` and ``>`` into name, attribute text and flags."""
    is_closing = body.startswith("/")
    is_self_closing = body.endswith("/")
    content = body[1:] if is_closing else body

    split = _TAG_NAME_END_RE.search(content)
    if split is None:
        return content.lower(), "", is_closing, is_self_closing

    attr_string = content[split.start() :]
    if attr_string.endswith("/"):
        attr_string = attr_string[:-1]
    return content[: split.start()].lower(), attr_string, is_closing, is_self_closing


def _skip_script_content(html: str, start: int) -> int:
    """Return the index just past the next ``</script>``, or the input length if it never closes."""
    close = _SCRIPT_CLOSE_RE.search(html, start)
    if close is None:
        return len(html)
    end = html.find(">", close.end())
    return len(html) if end == -1 else end + 1


def _render_start_tag(tag: str, attr_string: str, is_self_closing: bool) -> str:
    attrs = parse_attributes(attr_string)
    rendered: list[str] = []
    for attr_name, raw_value in attrs.items():
        value = sanitize_attribute(tag, attr_name, raw_value)
        if value is not None:
            rendered.append(f' {attr_name}="{escape_html(value)}"')

    if tag == "a" and attrs.get("target") == "_blank" and "rel" not in attrs:
        rendered.append(_REL_HARDENING)

    end = " />" if is_self_closing else ">"
    return f"<{tag}{''.join(rendered)}{end}"
