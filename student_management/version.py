from __future__ import annotations

import os
from datetime import UTC, datetime
from importlib.metadata import PackageNotFoundError, version

try:
    _dist_version = version("student-management-api")
except PackageNotFoundError:  # rodando direto do checkout
    _dist_version = "0.1.0-dev"

APP_VERSION = os.getenv("APP_VERSION", _dist_version)
GIT_SHA = os.getenv("GIT_SHA", "local")
BUILD_TIME_UTC = os.getenv("BUILD_TIME_UTC") or datetime.now(UTC).isoformat()
