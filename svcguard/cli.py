"""CLI entrypoints for svcguard commands."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

import yaml

from .config import ConfigError
from .git.hooks import install_hook
from .git.staged import GitCommandError
from .guard import Guard
from .logging import configure_logging
from .report import Reporter


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_log_file_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    parser.add_argument(
        "--log-file",
        type=Path,
        default=argparse.SUPPRESS if suppress_default else None,
        help="Also write log records to this file.",
    )


def _add_path_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the repository root (defaults to current directory).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="svcguard",
        description=(
            "Block commits that add services/libs without wiring them into CI "
            "and the root package.json scripts."
        ),
    )
    _add_verbose_option(parser)
    _add_log_file_option(parser)
    subparsers = parser.add_subparsers(dest="command")
    parser.set_defaults(command="check", path=".")

    check_parser = subparsers.add_parser(
        "check",
        help="Check newly staged packages (the default when no command is given).",
    )
    _add_verbose_option(check_parser, suppress_default=True)
    _add_log_file_option(check_parser, suppress_default=True)
    _add_path_argument(check_parser)

    install_parser = subparsers.add_parser(
        "install",
        help="Install svcguard as the repository's git pre-commit hook.",
    )
    _add_verbose_option(install_parser, suppress_default=True)
    _add_log_file_option(install_parser, suppress_default=True)
    _add_path_argument(install_parser)
    install_parser.add_argument(
        "--force",
        action="store_true",
        help="Replace an existing pre-commit hook.",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for svcguard commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    if args.command == "check":
        try:
            result = Guard().run(args.path)
        except (ConfigError, yaml.YAMLError, json.JSONDecodeError, OSError) as exc:
            parser.exit(1, f"svcguard check failed: {exc}\nRun with --verbose for more details.\n")
        sys.exit(Reporter().report(result))
    elif args.command == "install":
        try:
            hook_path = install_hook(args.path, force=bool(getattr(args, "force", False)))
        except (FileExistsError, GitCommandError) as exc:
            parser.exit(1, f"{exc}\n")
        print(f"pre-commit hook installed at {_relativize(hook_path)}")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
