from __future__ import annotations

import os
from typing import Any, Dict, Optional

from formgrid.domain.ports.Settings_provider import Settings_provider


KNOWN_KEYS = [
    "LOG_LEVEL",
    "DEFAULT_LAYOUT",
    "LAYOUTS_DIR",
    "MIN_FIELDS",
    "MAX_PAGES",
    "LINE_TOLERANCE",
    "MIN_LINE_LENGTH",
    "SERVE",
    "DOMAIN",
    "PORT",
    "ALLOWED_CORS_ORIGINS",
    "SWAGGER_ENABLED",
]


class EnvSettings(Settings_provider):
    """Settings read from the process environment.

    `.env` files are loaded by the entry points (`main.py`, the HTTP app)
    via python-dotenv before this class is used.
    """

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        v = os.getenv(key)
        if v is None or v == "":
            return default
        return v

    def get_int(self, key: str, default: Optional[int] = None) -> Optional[int]:
        v = self.get(key)
        if v is None:
            return default
        try:
            return int(v)
        except ValueError as e:
            raise ValueError(f"{key} must be an integer, got {v!r}") from e

    def get_float(self, key: str, default: Optional[float] = None) -> Optional[float]:
        v = self.get(key)
        if v is None:
            return default
        try:
            return float(v)
        except ValueError as e:
            raise ValueError(f"{key} must be a number, got {v!r}") from e

    def get_bool(self, key: str, default: bool = False) -> bool:
        v = self.get(key)
        if v is None:
            return default
        return v.lower() in ("1", "true", "yes")

    def snapshot(self) -> Dict[str, Any]:
        return {k: os.getenv(k, "") for k in KNOWN_KEYS}
