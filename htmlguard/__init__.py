from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .api import DangerousHtmlWarning, get_sanitizer, sanitize, supported_profiles
from .config import AuditConfig, Config, SafetyConfig
from .detector import contains_dangerous_html, find_dangerous_signatures
from .legacy import nl2br, sanitize_legacy_html, strip_html
from .sanitizer import escape_html, sanitize_html

try:
    __version__ = version("htmlguard")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "AuditConfig",
    "Config",
    "DangerousHtmlWarning",
    "SafetyConfig",
    "contains_dangerous_html",
    "escape_html",
    "find_dangerous_signatures",
    "get_sanitizer",
    "nl2br",
    "sanitize",
    "sanitize_html",
    "sanitize_legacy_html",
    "strip_html",
    "supported_profiles",
]
