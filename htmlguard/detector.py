"""Signature-based detector for dangerous markup in raw, unsanitized input.

This is an audit utility. It never modifies its input and neither sanitizer
consults it.
"""
from __future__ import annotations

from .allowlists import DANGEROUS_SIGNATURES


def find_dangerous_signatures(html: str | None) -> list[str]:
    """Return the labels of every danger signature found in *html*, in table order."""
    if not html:
        return []
    return [label for label, pattern in DANGEROUS_SIGNATURES if pattern.search(html)]


def contains_dangerous_html(html: str | None) -> bool:
    """Return True if *html* matches any known-dangerous signature."""
    if not html:
        return False
    return any(pattern.search(html) for _, pattern in DANGEROUS_SIGNATURES)
