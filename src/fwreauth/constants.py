from __future__ import annotations

from pathlib import Path


APP_NAME = "fwreauth"

SOCKETFILTERFW = Path("/usr/libexec/ApplicationFirewall/socketfilterfw")
SUDO = Path("/usr/bin/sudo")

DEFAULT_TOOLCHAIN = "cargo"
DEFAULT_BINARY_NAME = "miniserve"

# <home>/.local/share/<toolchain>/bin/<binary>
DEFAULT_INSTALL_SUBDIR = Path(".local") / "share"
