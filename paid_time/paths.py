from __future__ import annotations

import os
from pathlib import Path

APP_ENV_HOME = "PAID_TIME_HOME"
APP_ENV_CONFIG = "PAID_TIME_CONFIG"


def app_home() -> Path:
    """
    User-writable home for paid-time.
    Override with PAID_TIME_HOME.
    """
    if os.environ.get(APP_ENV_HOME):
        return Path(os.environ[APP_ENV_HOME]).expanduser().resolve()
    return (Path.home() / ".paid_time").resolve()


def config_dir() -> Path:
    return app_home() / "config"


def settings_path() -> Path:
    """
    Settings file location.

    Resolution order:
    1. PAID_TIME_CONFIG env var (explicit override)
    2. <app_home>/config/paid_time.yaml (default)
    """
    if os.environ.get(APP_ENV_CONFIG):
        return Path(os.environ[APP_ENV_CONFIG]).expanduser().resolve()
    return config_dir() / "paid_time.yaml"
