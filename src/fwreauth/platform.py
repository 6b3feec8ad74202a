from __future__ import annotations

import os
import sys

from fwreauth.constants import APP_NAME
from fwreauth.errors import UnsupportedPlatformError


def is_root() -> bool:
    return os.geteuid() == 0


def require_macos() -> None:
    if sys.platform != "darwin":
        raise UnsupportedPlatformError(f"{APP_NAME} requires macOS (detected: {sys.platform})")
