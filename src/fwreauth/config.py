from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from fwreauth.constants import (
    DEFAULT_BINARY_NAME,
    DEFAULT_INSTALL_SUBDIR,
    DEFAULT_TOOLCHAIN,
    SOCKETFILTERFW,
    SUDO,
)


@dataclass(frozen=True)
class Settings:
    home: Path
    toolchain: str
    binary_name: str
    socketfilterfw: Path = SOCKETFILTERFW
    sudo: Path = SUDO

    @property
    def default_binary(self) -> Path:
        return self.home / DEFAULT_INSTALL_SUBDIR / self.toolchain / "bin" / self.binary_name


def resolve_settings(
    home: Path | None = None,
    toolchain: str | None = None,
    binary_name: str | None = None,
) -> Settings:
    """Resolve runtime settings once, at startup.

    The home directory is only looked up here; everything downstream takes
    the returned Settings as a parameter.
    """
    return Settings(
        home=Path(home) if home is not None else Path.home(),
        toolchain=toolchain or DEFAULT_TOOLCHAIN,
        binary_name=binary_name or DEFAULT_BINARY_NAME,
    )
