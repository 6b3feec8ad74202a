from __future__ import annotations

import enum
from dataclasses import dataclass

from fwreauth.config import Settings
from fwreauth.errors import PrivilegeError
from fwreauth.exec import RunResult, run
from fwreauth.platform import is_root


class FailurePolicy(enum.Enum):
    # Swallowed entirely: never shown, never retried.
    IGNORE = "ignore"
    # Surfaced as a warning; does not change the exit status.
    REPORT = "report"


@dataclass(frozen=True)
class StepOutcome:
    step: str
    policy: FailurePolicy
    path: str
    result: RunResult

    @property
    def ok(self) -> bool:
        return self.result.returncode == 0

    @property
    def should_report(self) -> bool:
        return not self.ok and self.policy is FailurePolicy.REPORT

    @property
    def detail(self) -> str:
        return self.result.stderr.strip() or self.result.stdout.strip() or f"exit status {self.result.returncode}"


def privileged(cmd: list[str], settings: Settings) -> list[str]:
    if is_root():
        return cmd
    if not settings.sudo.exists():
        raise PrivilegeError(f"{settings.sudo} not found; re-run as root")
    return [str(settings.sudo), *cmd]


def _socketfilterfw(step: str, flag: str, path: str, settings: Settings, policy: FailurePolicy) -> StepOutcome:
    r = run(privileged([str(settings.socketfilterfw), flag, path], settings))
    return StepOutcome(step=step, policy=policy, path=path, result=r)


def remove_app(path: str, settings: Settings) -> StepOutcome:
    # The stale entry may not exist at all ("no such entry"); that is fine.
    return _socketfilterfw("remove", "--remove", path, settings, FailurePolicy.IGNORE)


def add_app(path: str, settings: Settings) -> StepOutcome:
    return _socketfilterfw("add", "--add", path, settings, FailurePolicy.REPORT)


def unblock_app(path: str, settings: Settings) -> StepOutcome:
    return _socketfilterfw("unblock", "--unblockapp", path, settings, FailurePolicy.REPORT)


STEPS = (remove_app, add_app, unblock_app)
