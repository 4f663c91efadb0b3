"""
Mullvad VPN uninstall procedure.

Four best-effort phases. Every phase runs even if an earlier one failed,
and inside a phase every path is attempted. Paths that are already gone
are skipped silently; any other removal failure becomes a warning.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from voidmullvad.config import DEFAULTS
from voidmullvad.errors import InstallerError
from voidmullvad.layout import DEFAULT_LAYOUT, Layout
from voidmullvad.procedure import executor
from voidmullvad.procedure.runner import Procedure, Step
from voidmullvad.ui.narrator import StepNarrator


STOP_WARNING = "Failed to stop Mullvad service."


class MullvadUninstall:
    def __init__(
        self,
        layout: Layout = DEFAULT_LAYOUT,
        config: dict | None = None,
        narrator: StepNarrator | None = None,
        run_command: Callable[..., str] | None = None,
    ) -> None:
        self.layout = layout
        self.config = config or dict(DEFAULTS)
        self.narrator = narrator
        self._run_command = run_command or executor.run_command

    def procedure(self) -> Procedure:
        layout = self.layout
        return Procedure(
            name="uninstall",
            policy="best_effort",
            steps=[
                Step("Stopping Mullvad service.", self.stop_service, warning=STOP_WARNING),
                Step(
                    "Uninstalling Mullvad service.",
                    lambda: _remove_all([layout.sv_dir, *layout.binaries]),
                ),
                Step("Uninstalling Mullvad GUI.", lambda: _remove_all([layout.app_dir])),
                Step("Removing Mullvad metadata.", lambda: _remove_all(layout.metadata)),
            ],
        )

    # ── Steps ─────────────────────────────────────────────────────────────────

    def stop_service(self) -> None:
        """
        Bring the service down, then drop its activation symlink.

        The symlink is removed even when `sv down` fails so runsvdir stops
        supervising a service whose binaries are about to disappear.
        """
        link = self.layout.service_link
        argv = ["sv", "down", str(link)]
        if self.narrator is not None:
            self.narrator.command(argv)

        stop_error: InstallerError | None = None
        try:
            self._run_command(argv, timeout=self.config["command_timeout"])
        except InstallerError as e:
            stop_error = e

        removed = executor.remove_path(link)
        if stop_error is not None:
            raise stop_error
        if not removed:
            raise InstallerError(f"{link} does not exist")


def _remove_all(paths: list[Path]) -> list[str]:
    """Remove every path, returning one warning per path that could not go."""
    warnings = []
    for path in paths:
        try:
            executor.remove_path(path)
        except InstallerError as e:
            warnings.append(e.message)
    return warnings
