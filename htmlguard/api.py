"""Programmatic API: profile registry and the ``sanitize`` dispatcher."""
from __future__ import annotations

import warnings
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from .config import Config, load_config, load_config_from_dict
from .detector import find_dangerous_signatures
from .legacy import sanitize_legacy_html
from .sanitizer import sanitize_html


class DangerousHtmlWarning(UserWarning):
    """Raw input matched a danger signature. The sanitized output is unaffected."""


_PROFILES: dict[str, Callable[[str | None], str]] = {
    "strict": sanitize_html,
    "legacy": sanitize_legacy_html,
}


def get_sanitizer(profile: str) -> Callable[[str | None], str]:
    """Return the sanitize function registered for *profile*."""
    if profile not in _PROFILES:
        raise ValueError(
            f"Unknown sanitizer profile: {profile}. Supported: {list(_PROFILES.keys())}"
        )
    return _PROFILES[profile]


def supported_profiles() -> list[str]:
    """Return supported sanitizer profile names."""
    return list(_PROFILES.keys())


def sanitize(
    html: str | None,
    *,
    profile: str | None = None,
    config: Config | Mapping[str, Any] | str | Path | None = None,
) -> str:
    """Sanitize untrusted markup with the selected profile.

    Args:
        html: Raw markup; ``None`` is treated as empty.
        profile: ``strict`` or ``legacy``. Overrides ``config.profile``.
        config: Sanitizer config as one of:
            - ``None`` (use defaults)
            - ``Config`` instance
            - dict-like mapping using the same schema as ``config.yaml``
            - path to a YAML config file

    Returns:
        Markup that is safe to inject into a rendering sink as-is.

    When auditing is enabled and the raw input matches a danger signature, a
    :class:`DangerousHtmlWarning` is emitted. It never changes the result.
    """
    resolved_config = _resolve_config(config)
    sanitizer = get_sanitizer(profile or resolved_config.profile)

    if resolved_config.audit.enabled:
        matched = find_dangerous_signatures(html)
        if matched:
            warnings.warn(
                f"Input contains potentially dangerous HTML: {', '.join(matched)}",
                DangerousHtmlWarning,
                stacklevel=2,
            )

    return sanitizer(html)


def _resolve_config(
    config: Config | Mapping[str, Any] | str | Path | None,
) -> Config:
    if config is None:
        return Config()
    if isinstance(config, Config):
        return config
    if isinstance(config, Mapping):
        return load_config_from_dict(config)
    if isinstance(config, (str, Path)):
        return load_config(Path(config))
    raise TypeError(
        "config must be None, Config, dict-like mapping, or a config file path."
    )
