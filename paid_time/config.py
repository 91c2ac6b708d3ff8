"""
Centralized configuration for paid-time.

Deployment values come from environment variables; resolver behaviour comes
from a YAML settings file (see paths.settings_path). Missing or unreadable
settings fall back to the defaults below.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import yaml

from paid_time import paths

logger = logging.getLogger(__name__)

# ============================================================
# Logging
# ============================================================

LOG_LEVEL: str = os.environ.get("PAID_TIME_LOG_LEVEL", "INFO")
"""Root log level for the CLI."""


def _env_flag(name: str) -> bool | None:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return None
    return raw.strip().lower() in ("1", "true", "yes", "on")


LOG_JSON: bool | None = _env_flag("PAID_TIME_LOG_JSON")
"""Force JSON (True) or human (False) logs. None auto-detects from the TTY."""

# ============================================================
# Resolver settings
# ============================================================

_DEFAULT_REJECT_SAME_PRIORITY_OVERLAP = True
_DEFAULT_VERIFY_INVARIANTS = False
_DEFAULT_CSV_DELIMITER = ","


@dataclass(frozen=True)
class ResolverSettings:
    reject_same_priority_overlap: bool = _DEFAULT_REJECT_SAME_PRIORITY_OVERLAP
    """Reject input with overlapping same-priority events instead of resolving by input order."""

    verify_invariants: bool = _DEFAULT_VERIFY_INVARIANTS
    """Re-check disjointness, coverage and priority domination after each resolution."""

    csv_delimiter: str = _DEFAULT_CSV_DELIMITER


def _load_yaml(config_path: Path) -> dict:
    """Load YAML config, return empty dict on failure."""
    if not config_path.exists():
        logger.warning("Settings file not found at %s, using defaults", config_path)
        return {}
    try:
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
    except (yaml.YAMLError, OSError) as exc:
        logger.error("Failed to load settings from %s: %s", config_path, exc)
        return {}
    if not isinstance(data, dict):
        logger.error("Settings file %s is not a mapping, using defaults", config_path)
        return {}
    return data


def _bool_setting(section: dict, key: str, default: bool, config_path: Path) -> bool:
    value = section.get(key, default)
    if not isinstance(value, bool):
        logger.error(
            "Setting %s in %s must be true or false, got %r; using %s",
            key,
            config_path,
            value,
            default,
        )
        return default
    return value


def load_settings(config_path: Path | None = None) -> ResolverSettings:
    """
    Load resolver settings.

    Expected shape:
        resolver:
          reject_same_priority_overlap: true
          verify_invariants: false
        csv:
          delimiter: ","
    """
    if config_path is None:
        config_path = paths.settings_path()

    config = _load_yaml(config_path)
    resolver = config.get("resolver") or {}
    csv_cfg = config.get("csv") or {}

    return ResolverSettings(
        reject_same_priority_overlap=_bool_setting(
            resolver,
            "reject_same_priority_overlap",
            _DEFAULT_REJECT_SAME_PRIORITY_OVERLAP,
            config_path,
        ),
        verify_invariants=_bool_setting(
            resolver, "verify_invariants", _DEFAULT_VERIFY_INVARIANTS, config_path
        ),
        csv_delimiter=str(csv_cfg.get("delimiter", _DEFAULT_CSV_DELIMITER)),
    )
