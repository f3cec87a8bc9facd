"""Settings modules selected by the APP_ENV environment variable."""

from __future__ import annotations

import importlib
import os
from types import ModuleType
from typing import Optional

DEFAULT_ENV = "development"

_ENV_MODULES = {
    "development": "config.development",
    "dev": "config.development",
    "production": "config.production",
    "prod": "config.production",
    "testing": "config.testing",
    "test": "config.testing",
}


def get_settings_module(env: Optional[str] = None) -> str:
    """Dotted module path for `env`, or for APP_ENV when not given.

    Unknown names fall back to the development settings.
    """
    name = (env if env is not None else os.getenv("APP_ENV", DEFAULT_ENV)).strip().lower()
    return _ENV_MODULES.get(name, _ENV_MODULES[DEFAULT_ENV])


def load_settings(env: Optional[str] = None) -> ModuleType:
    return importlib.import_module(get_settings_module(env))
