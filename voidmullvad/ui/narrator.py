"""
StepNarrator — progress reporting for install and uninstall runs.

Progress goes to the stdout console; warnings and errors go to the
stderr console so scripts can separate them.

Usage:
    narrator = StepNarrator(console, err_console)
    narrator.step(1, 7, "Downloading latest Mullvad VPN")
    narrator.warn("Failed to stop Mullvad service.")
    narrator.success("Mullvad VPN is now up and running!")
"""

from rich.console import Console
from rich.text import Text

from voidmullvad.ui.progress import render_step
from voidmullvad.ui.theme import STATE_ICONS


class StepNarrator:
    """Prints step lines, warnings, errors and the final summary line."""

    def __init__(
        self,
        console: Console,
        err_console: Console | None = None,
        verbose: bool = False,
    ) -> None:
        self.console = console
        self.err_console = err_console or console
        self.verbose = verbose

    # ── Public API ────────────────────────────────────────────────────────────

    def step(self, index: int, total: int, title: str, dry_run: bool = False) -> None:
        self.console.print(render_step(index, total, title, dry_run=dry_run))

    def command(self, argv: list[str]) -> None:
        """Echo an external command before it runs (verbose mode only)."""
        if not self.verbose:
            return
        line = Text()
        line.append("      $ ", style="dim")
        line.append(" ".join(argv), style="command")
        self.console.print(line)

    def detail(self, message: str) -> None:
        """Dim secondary line under the current step (verbose mode only)."""
        if self.verbose:
            self.console.print(Text(f"      {message}", style="dim"))

    def warn(self, message: str) -> None:
        line = Text()
        line.append(f"{STATE_ICONS['warning']} ", style="warning")
        line.append(message, style="warning")
        self.err_console.print(line)

    def error(self, message: str) -> None:
        line = Text()
        line.append(f"{STATE_ICONS['failed']} ", style="error")
        line.append(message, style="error")
        self.err_console.print(line)

    def success(self, message: str) -> None:
        self.console.print(Text(message, style="success"))

    def info(self, message: str) -> None:
        self.console.print(Text(message))
