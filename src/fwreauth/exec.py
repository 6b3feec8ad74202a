from __future__ import annotations

import subprocess
from dataclasses import dataclass


@dataclass(frozen=True)
class RunResult:
    returncode: int
    stdout: str
    stderr: str


def run(cmd: list[str]) -> RunResult:
    """Run cmd without a shell, capturing both streams.

    A missing executable is reported as exit status 127 rather than raised,
    the same status a shell would give.
    """
    try:
        p = subprocess.run(
            cmd,
            check=False,
            text=True,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except FileNotFoundError as e:
        return RunResult(returncode=127, stdout="", stderr=f"{cmd[0]}: {e.strerror or 'not found'}")
    return RunResult(returncode=p.returncode, stdout=p.stdout, stderr=p.stderr)
