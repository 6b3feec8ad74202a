from __future__ import annotations

import argparse
import sys

sys.dont_write_bytecode = True

from fwreauth import __version__
from fwreauth.config import resolve_settings
from fwreauth.constants import APP_NAME
from fwreauth.errors import FwreauthError, PrivilegeError, UnsupportedPlatformError
from fwreauth.reauth import do_reauthorize


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Re-allow a rebuilt binary in the macOS application firewall",
        epilog="exit status: 0 allowed, 1 binary missing or not a regular file, 2 not macOS or sudo unavailable",
    )
    p.add_argument("--version", action="version", version=f"{APP_NAME} {__version__}")
    p.add_argument(
        "binary",
        nargs="?",
        default=None,
        help="Path to the binary (default: ~/.local/share/cargo/bin/miniserve)",
    )
    return p


def _parse_args(argv: list[str]) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    args = _parse_args(argv)

    try:
        settings = resolve_settings()
        return do_reauthorize(args.binary, settings)
    except UnsupportedPlatformError as e:
        print(str(e), file=sys.stderr)
        return 2
    except PrivilegeError as e:
        print(str(e), file=sys.stderr)
        return 2
    except FwreauthError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
