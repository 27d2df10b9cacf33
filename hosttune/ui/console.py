"""
ConsoleUI - Rich-based console interface.

Provides result tables and logging setup for the hosttune command.
"""

import json
import logging
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from ..protocol.result import CheckResult, TuneResult


def setup_logging(level: str = "INFO", console: Optional[Console] = None):
    """Route hosttune loggers through rich."""
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    logger = logging.getLogger("hosttune")
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False


class ConsoleUI:
    """
    Rich console interface for hosttune.
    """

    def __init__(self, quiet: bool = False, console: Optional[Console] = None):
        self.quiet = quiet
        self.console = console or Console()

    def print(self, *args, **kwargs):
        """Print to console."""
        if self.quiet:
            return
        self.console.print(*args, **kwargs)

    def print_header(self, title: str):
        """Print a section header."""
        if self.quiet:
            return
        self.console.print()
        self.console.rule(f"[bold blue]{title}[/]")

    def print_error(self, message: str):
        """Errors are printed even in quiet mode."""
        self.console.print(f"[bold red]Error:[/] {escape(message)}")

    def print_json(self, payload):
        """Emit machine readable output, ignoring quiet mode."""
        print(json.dumps(payload, indent=2), file=self.console.file)

    def print_tuner_list(self, names: List[str]):
        if self.quiet:
            return
        for name in names:
            self.console.print(f"  {name}")

    def print_check_results(self, results: List[CheckResult]):
        """Display parameter checks."""
        if self.quiet:
            return

        self.print_header("Checks")

        table = Table(box=None)
        table.add_column("Tuner")
        table.add_column("Description", style="dim")
        table.add_column("Current", justify="right")
        table.add_column("Required", justify="right")
        table.add_column("Status")

        for result in results:
            if result.error is not None:
                status = f"[red]error: {escape(str(result.error))}[/]"
            elif result.is_ok:
                status = "[green]ok[/]"
            else:
                color = "red" if result.severity.value == "FATAL" else "yellow"
                status = f"[{color}]{result.severity.value.lower()}[/]"

            table.add_row(
                result.name,
                result.description,
                "" if result.current is None else str(result.current),
                "" if result.required is None else str(result.required),
                status,
            )

        self.console.print(table)

    def print_tune_results(self, results: List[TuneResult], script_path: Optional[str] = None):
        """Display tuning outcomes."""
        if self.quiet:
            return

        self.print_header("Tuning")

        table = Table(box=None)
        table.add_column("Tuner")
        table.add_column("Result")

        for result in results:
            if not result.success:
                outcome = f"[red]failed: {escape(str(result.error))}[/]"
            elif result.changed:
                outcome = "[yellow]scripted[/]" if script_path else "[green]applied[/]"
            else:
                outcome = "[dim]unchanged[/]"
            table.add_row(result.name, outcome)

        self.console.print(table)

        if script_path:
            self.console.print(f"\nScript written to [bold]{script_path}[/]")
        if any(r.reboot_required for r in results):
            self.console.print("[yellow]A reboot is required for some changes to take effect[/]")
