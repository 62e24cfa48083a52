"""
envvault CLI — load .env.vault and run a program with the resulting environment.

Usage:
    envvault run -- my_program arg1 arg2
    envvault run --override -- my_program arg1 arg2
    envvault run --cwd /srv/app -- my_program
    envvault version

Set DOTENV_KEY before calling envvault run.
"""

from __future__ import annotations

import argparse
import enum
import logging
import subprocess
import sys


class ExitCode(enum.IntEnum):
    OK = 0
    ENV_LOAD = 1
    ENV_OVERRIDE_LOAD = 2
    PROGRAM_EXECUTION = 3
    SEPARATOR = 4


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    # Everything after the first "--" belongs to the child program
    program_argv: list[str] | None = None
    if "--" in argv:
        split = argv.index("--")
        argv, program_argv = argv[:split], argv[split + 1 :]

    parser = argparse.ArgumentParser(
        prog="envvault",
        description="Load environment variables from an encrypted .env.vault file.",
    )
    parser.add_argument("--version", action="store_true", help="Show version and exit")

    subparsers = parser.add_subparsers(dest="command")

    # run
    run_parser = subparsers.add_parser(
        "run", help="Load .env.vault and run a program with the resulting environment"
    )
    run_parser.add_argument(
        "--override",
        action="store_true",
        help="Let vault values override existing environment variables",
    )
    run_parser.add_argument("--cwd", type=str, help="Directory holding .env.vault / .env")

    # version
    subparsers.add_parser("version", help="Show version")

    args, extra = parser.parse_known_args(argv)

    if args.version or args.command == "version":
        from envvault import __version__

        print(f"envvault {__version__}")
        return 0

    if args.command == "run":
        if program_argv is None:
            found = extra[0] if extra else "nothing"
            print(f"Invalid separator: {found}. Expected --", file=sys.stderr)
            return ExitCode.SEPARATOR
        if extra:
            parser.error(f"unrecognized arguments: {' '.join(extra)}")
        return _cmd_run(args, program_argv)

    if extra:
        parser.error(f"unrecognized arguments: {' '.join(extra)}")
    parser.print_help()
    return 0


def _configure_logging() -> None:
    from envvault import __version__
    from envvault.config import get_config

    logging.basicConfig(
        level=get_config().log_level,
        format=f"[envvault@{__version__}][%(levelname)s] %(message)s",
        stream=sys.stderr,
    )


def _cmd_run(args: argparse.Namespace, program_argv: list[str]) -> int:
    from envvault.errors import VaultError
    from envvault.loader import load
    from envvault.store import OsEnvironStore

    if not program_argv:
        print("Error: no program given after --", file=sys.stderr)
        return ExitCode.PROGRAM_EXECUTION

    _configure_logging()

    store = OsEnvironStore()
    try:
        load(override=args.override, cwd=args.cwd, store=store)
    except (VaultError, OSError) as e:
        print(e, file=sys.stderr)
        return ExitCode.ENV_OVERRIDE_LOAD if args.override else ExitCode.ENV_LOAD

    try:
        result = subprocess.run(program_argv, env=store.as_dict(), cwd=args.cwd)
    except OSError as e:
        print(f"Failed to execute program: {e}", file=sys.stderr)
        return ExitCode.PROGRAM_EXECUTION

    if result.returncode < 0:
        # Killed by a signal
        return ExitCode.PROGRAM_EXECUTION
    return result.returncode


if __name__ == "__main__":
    sys.exit(main())
