"""
void-mullvad — entry point.

CLI flags, privilege gate, procedure dispatch, exit code contract:
  1  not root (checked first, whatever the flags)
  0  success, or no operation requested
  1  already installed, or an install step failed
  2  usage error (both --install and --uninstall)
"""

import click
from rich.console import Console

from voidmullvad import __version__
from voidmullvad.config import load_config
from voidmullvad.errors import AlreadyInstalledError, InstallerError, PrivilegeError
from voidmullvad.layout import DEFAULT_LAYOUT
from voidmullvad.procedure.runner import run_procedure
from voidmullvad.system_info import is_root
from voidmullvad.ui.narrator import StepNarrator
from voidmullvad.ui.theme import INSTALLER_THEME


# ── Consoles (shared across the tool) ────────────────────────────────────────

console = Console(theme=INSTALLER_THEME, highlight=False)
err_console = Console(theme=INSTALLER_THEME, highlight=False, stderr=True)


# ── Target layout ────────────────────────────────────────────────────────────

_LAYOUT = DEFAULT_LAYOUT


# ── CLI ───────────────────────────────────────────────────────────────────────

@click.command(name="void-mullvad", context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-V", "--version", prog_name="void-mullvad")
# Operations
@click.option("--install", is_flag=True, default=False, help="Download and install Mullvad VPN.")
@click.option("--uninstall", is_flag=True, default=False, help="Remove Mullvad VPN and its runit service.")
# Modifiers
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="List the steps that would run without executing any of them.",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Echo every external command.")
def cli(install: bool, uninstall: bool, dry_run: bool, verbose: bool) -> None:
    """Install or uninstall Mullvad VPN on Void Linux.

    Unpacks the upstream .deb outside of xbps and registers the daemon
    as a runit service. Must be run as root.

    \b
    Environment variables:
      NO_COLOR=1   Disable all colour output.
    """
    narrator = StepNarrator(console, err_console, verbose=verbose)

    # ── Privilege gate (before any flag is looked at) ─────────────────────────
    if not is_root():
        narrator.error(PrivilegeError().message)
        raise SystemExit(1)

    if install and uninstall:
        raise click.UsageError("--install and --uninstall are mutually exclusive.")

    if not (install or uninstall):
        return

    config = load_config()

    if install:
        _install(narrator, config, dry_run=dry_run)
    else:
        _uninstall(narrator, config, dry_run=dry_run)


# ── Operations ────────────────────────────────────────────────────────────────

def _install(narrator: StepNarrator, config: dict, dry_run: bool) -> None:
    """Run the fail-fast install; any failure exits 1 with a one-line message."""
    from voidmullvad.procedure.install import MullvadInstall

    installer = MullvadInstall(layout=_LAYOUT, config=config, narrator=narrator)

    try:
        installer.check_preconditions()
    except AlreadyInstalledError as e:
        narrator.info(e.message)
        raise SystemExit(1)
    except InstallerError as e:
        narrator.error(e.message)
        raise SystemExit(1)

    result = run_procedure(installer.procedure(), narrator, dry_run=dry_run)
    try:
        result.raise_for_state()
    except InstallerError as e:
        narrator.error(e.message)
        raise SystemExit(1)

    if dry_run:
        narrator.info("Dry run complete. Nothing was changed.")
        return
    narrator.success("Mullvad VPN is now up and running!")


def _uninstall(narrator: StepNarrator, config: dict, dry_run: bool) -> None:
    """Run the best-effort uninstall; always exits 0."""
    from voidmullvad.procedure.uninstall import MullvadUninstall

    uninstaller = MullvadUninstall(layout=_LAYOUT, config=config, narrator=narrator)
    run_procedure(uninstaller.procedure(), narrator, dry_run=dry_run)

    if dry_run:
        narrator.info("Dry run complete. Nothing was changed.")
        return
    narrator.success("Mullvad has been uninstalled.")


# ── Entry ─────────────────────────────────────────────────────────────────────

if __name__ == "__main__":
    cli()
