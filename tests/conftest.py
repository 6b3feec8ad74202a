from pathlib import Path

import pytest

import fwreauth.exec
import fwreauth.firewall as firewall
import fwreauth.reauth as reauth
from fwreauth.config import Settings
from fwreauth.exec import RunResult


class RecordingRunner:
    """Stands in for fwreauth.exec.run and records every command issued."""

    def __init__(self, returncodes: dict[str, int] | None = None):
        self.calls: list[list[str]] = []
        self.returncodes = returncodes or {}

    def __call__(self, cmd: list[str]) -> RunResult:
        self.calls.append(list(cmd))
        flag = next((c for c in cmd if c.startswith("--")), "")
        rc = self.returncodes.get(flag, 0)
        stderr = f"{flag} failed" if rc else ""
        return RunResult(returncode=rc, stdout="", stderr=stderr)

    @property
    def flags(self) -> list[str]:
        return [next(c for c in cmd if c.startswith("--")) for cmd in self.calls]


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    sudo = tmp_path / "sudo"
    sudo.write_text("", encoding="utf-8")
    return Settings(
        home=tmp_path / "home",
        toolchain="cargo",
        binary_name="miniserve",
        socketfilterfw=Path("/usr/libexec/ApplicationFirewall/socketfilterfw"),
        sudo=sudo,
    )


@pytest.fixture
def runner(monkeypatch: pytest.MonkeyPatch) -> RecordingRunner:
    r = RecordingRunner()
    monkeypatch.setattr(firewall, "run", r)
    monkeypatch.setattr(fwreauth.exec.subprocess, "run", _forbid_subprocess)
    monkeypatch.setattr(firewall, "is_root", lambda: False)
    monkeypatch.setattr(reauth, "require_macos", lambda: None)
    return r


def _forbid_subprocess(*_args, **_kwargs):
    raise AssertionError("real subprocess spawned in test")


@pytest.fixture
def binary(tmp_path: Path) -> Path:
    p = tmp_path / "bin" / "demo"
    p.parent.mkdir(parents=True)
    p.write_text("#!/bin/sh\n", encoding="utf-8")
    return p
