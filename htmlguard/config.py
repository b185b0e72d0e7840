from __future__ import annotations

import yaml
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional


@dataclass
class AuditConfig:
    """Controls for the danger classifier run over raw input."""

    enabled: bool = True  # warn when raw input matches a danger signature
    fail_on_dangerous: bool = False  # CLI exits 1 when raw input is flagged


@dataclass
class SafetyConfig:
    """Limits applied by the command line before any sanitizing happens."""

    max_input_bytes: int = 5 * 1024 * 1024  # max size of an input file


@dataclass
class Config:
    """Top-level configuration: default profile plus audit and safety settings."""

    profile: str = "strict"  # strict | legacy
    audit: AuditConfig = field(default_factory=AuditConfig)
    safety: SafetyConfig = field(default_factory=SafetyConfig)


def load_config(path: Optional[Path]) -> Config:
    """Load configuration from a YAML file, returning defaults if *path* is None or missing."""
    if path is None or not path.exists():
        return Config()

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Config file '{path}' is not valid YAML: {exc}") from exc

    if not isinstance(data, Mapping):
        raise ValueError(f"Config file '{path}' must contain a mapping at the top level.")
    return load_config_from_dict(data)


def load_config_from_dict(data: Mapping[str, Any]) -> Config:
    """Build a Config from a mapping with the same schema as ``config.yaml``.

    Unknown keys are ignored, missing keys keep their defaults.
    """
    audit_fields = {
        k: v
        for k, v in _section(data, "audit").items()
        if k in AuditConfig.__dataclass_fields__
    }
    safety_fields = {
        k: v
        for k, v in _section(data, "safety").items()
        if k in SafetyConfig.__dataclass_fields__
    }

    return Config(
        profile=str(data.get("profile", "strict")),
        audit=AuditConfig(**audit_fields),
        safety=SafetyConfig(**safety_fields),
    )


def _section(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    section = data.get(key) or {}
    if not isinstance(section, Mapping):
        raise ValueError(f"Config section '{key}' must be a mapping, got {type(section).__name__}.")
    return section
