from __future__ import annotations

import os

from fwreauth.colors import print_error, print_success, print_warning
from fwreauth.config import Settings
from fwreauth.errors import MissingBinaryError, UnsupportedPlatformError
from fwreauth.firewall import STEPS, StepOutcome
from fwreauth.platform import require_macos


def resolve_target(arg: str | None, settings: Settings) -> str:
    # Taken verbatim: the same string is checked, passed to socketfilterfw
    # and echoed back, so "./demo" or "/opt/demo/" are never rewritten.
    if not arg:
        return str(settings.default_binary)
    return arg


def check_binary(target: str, settings: Settings) -> None:
    if not os.path.isfile(target):
        raise MissingBinaryError(target, settings.binary_name)


def reauthorize(target: str, settings: Settings) -> list[StepOutcome]:
    """Drop the stale firewall entry for target, then add and unblock it.

    The application firewall keys entries on a content hash, so a rebuilt
    binary at the same path is treated as unknown until re-added. Steps run
    strictly in order and every step is issued regardless of earlier
    outcomes; there is no rollback.
    """
    return [step(target, settings) for step in STEPS]


def do_reauthorize(arg: str | None, settings: Settings) -> int:
    target = resolve_target(arg, settings)

    try:
        check_binary(target, settings)
    except MissingBinaryError as e:
        print_error(str(e))
        return 1

    try:
        require_macos()
    except UnsupportedPlatformError as e:
        print_error(str(e))
        return 2

    for outcome in reauthorize(target, settings):
        if outcome.should_report:
            print_warning(f"warning: firewall {outcome.step} failed for {target}: {outcome.detail}")

    # Printed even after a reported failure; the warnings above carry it.
    print_success(f"firewall: allowed {target}")
    return 0
