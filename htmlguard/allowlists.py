"""Static allowlist and denylist tables shared by the sanitizer profiles."""
from __future__ import annotations

import re
from types import MappingProxyType

STRICT_ALLOWED_TAGS = frozenset(
    {
        # Text formatting
        "p",
        "br",
        "b",
        "i",
        "u",
        "strong",
        "em",
        "s",
        "strike",
        "del",
        "ins",
        "sub",
        "sup",
        "mark",
        "small",
        "span",
        # Headings
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        # Lists
        "ul",
        "ol",
        "li",
        # Blocks
        "div",
        "blockquote",
        "pre",
        "code",
        "hr",
        # Tables
        "table",
        "thead",
        "tbody",
        "tfoot",
        "tr",
        "th",
        "td",
        "caption",
        # Links (href is validated)
        "a",
    }
)

LEGACY_ALLOWED_TAGS = frozenset(
    {"b", "i", "u", "strong", "em", "br", "p", "ul", "ol", "li", "span", "div"}
)

# "*" holds the attributes allowed on every strict tag.
STRICT_ALLOWED_ATTRS: MappingProxyType[str, frozenset[str]] = MappingProxyType(
    {
        "a": frozenset({"href", "title", "target", "rel"}),
        "img": frozenset({"src", "alt", "title", "width", "height"}),
        "td": frozenset({"colspan", "rowspan"}),
        "th": frozenset({"colspan", "rowspan", "scope"}),
        "*": frozenset({"class", "id", "style"}),
    }
)

URL_ATTRS = frozenset({"href", "src"})

DANGEROUS_PROTOCOLS = (
    "javascript:",
    "vbscript:",
    "data:",
    "file:",
)

# Deleted from style values, one pass per pattern in this order.
DANGEROUS_STYLE_PATTERNS = (
    re.compile(r"expression\s*\(", re.IGNORECASE),
    re.compile(r"javascript:", re.IGNORECASE),
    re.compile(r"vbscript:", re.IGNORECASE),
    re.compile(r"@import", re.IGNORECASE),
    re.compile(r"behavior\s*:", re.IGNORECASE),
)

DANGEROUS_SIGNATURES: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("<script", re.compile(r"<script", re.IGNORECASE)),
    ("<iframe", re.compile(r"<iframe", re.IGNORECASE)),
    ("<object", re.compile(r"<object", re.IGNORECASE)),
    ("<embed", re.compile(r"<embed", re.IGNORECASE)),
    ("<form", re.compile(r"<form", re.IGNORECASE)),
    ("javascript:", re.compile(r"javascript:", re.IGNORECASE)),
    ("vbscript:", re.compile(r"vbscript:", re.IGNORECASE)),
    ("event handler", re.compile(r"on\w+\s*=", re.IGNORECASE)),
    ("<link", re.compile(r"<link", re.IGNORECASE)),
    ("<meta", re.compile(r"<meta", re.IGNORECASE)),
)


def allowed_attrs_for(tag: str) -> frozenset[str]:
    """Return the attribute names permitted on *tag*, global ones included."""
    return STRICT_ALLOWED_ATTRS.get(tag, frozenset()) | STRICT_ALLOWED_ATTRS["*"]
