"""
CLI - Command-line interface for hosttune.

Thin wiring around the tuning core: loads configuration, builds the
network tuners factory and runs the selected tuners.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config import Config
from .discovery.filesystem import HostFilesystem
from .protocol.errors import TunerError
from .tuning.executor import DirectExecutor, ScriptRenderingExecutor
from .tuning.network import build_net_tuners_factory
from .ui.console import ConsoleUI, setup_logging

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


def parse_args(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="hosttune",
        description="Raise kernel network limits that are below their recommended values",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    hosttune check
    hosttune tune syn_backlog
    hosttune tune --script ./tune.sh
""",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-c", "--config", help="Path to a TOML config file")
    parser.add_argument("--root", help="Directory treated as the host's / (default: /)")
    parser.add_argument("--timeout", type=float, help="Timeout in seconds for hardware queries")
    parser.add_argument("--json", action="store_true", default=None, help="Print results as JSON")

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", default=None, help="Debug logging")
    verbosity.add_argument("-q", "--quiet", action="store_true", default=None, help="Only print errors")

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List available tuners")

    check_parser = subparsers.add_parser("check", help="Compare parameters against their references")
    check_parser.add_argument("tuners", nargs="*", help="Tuner names (default: all)")

    tune_parser = subparsers.add_parser("tune", help="Raise parameters that are too low")
    tune_parser.add_argument("tuners", nargs="*", help="Tuner names (default: all)")
    tune_parser.add_argument(
        "--script",
        metavar="PATH",
        help="Write commands to an executable script instead of applying them",
    )

    return parser.parse_args(argv)


def _select(available: List[str], requested: List[str]) -> List[str]:
    unknown = [name for name in requested if name not in available]
    if unknown:
        raise ValueError(
            f"Unknown tuner(s): {', '.join(unknown)} (available: {', '.join(available)})"
        )
    return requested or list(available)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    ui = ConsoleUI()

    try:
        config = Config.load(args.config).override_from_args(args)
    except (OSError, ValueError) as e:
        ui.print_error(str(e))
        return EXIT_USAGE

    errors = config.validate()
    if errors:
        for error in errors:
            ui.print_error(error)
        return EXIT_USAGE

    setup_logging(config.output.log_level)
    ui.quiet = config.output.quiet or config.output.json

    fs = HostFilesystem(config.system.root)
    script_path = None

    try:
        # Collaborators first so a missing tool leaves no script behind
        factory = build_net_tuners_factory(fs, DirectExecutor(), timeout=config.system.timeout)
        if args.command == "tune" and config.tuning.mode == "script":
            script_path = str(Path(config.tuning.script_path).resolve())
            factory = factory.with_executor(ScriptRenderingExecutor(HostFilesystem(), script_path))
    except TunerError as e:
        ui.print_error(str(e))
        return EXIT_USAGE

    constructors = factory.tuners()

    if args.command == "list":
        if config.output.json:
            ui.print_json(list(constructors))
        ui.print_tuner_list(list(constructors))
        return EXIT_OK

    try:
        names = _select(list(constructors), config.tuning.tuners)
    except ValueError as e:
        ui.print_error(str(e))
        return EXIT_USAGE

    tuners = [constructors[name]() for name in names]

    if args.command == "check":
        checks = [tuner.check() for tuner in tuners]
        if config.output.json:
            ui.print_json([c.to_dict() for c in checks])
        ui.print_check_results(checks)
        return EXIT_OK if all(c.is_ok for c in checks) else EXIT_FAILED

    results = [tuner.tune() for tuner in tuners]
    if config.output.json:
        ui.print_json([r.to_dict() for r in results])
    ui.print_tune_results(results, script_path)
    return EXIT_OK if all(r.success for r in results) else EXIT_FAILED


if __name__ == "__main__":
    sys.exit(main())
