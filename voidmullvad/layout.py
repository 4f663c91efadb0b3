"""
Fixed filesystem layout touched by install and uninstall.

All paths hang off a single root so the whole layout can be relocated
(tests point it at a temporary directory). Production always uses "/".
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


DOWNLOAD_URL = "https://mullvad.net/en/download/app/deb/latest"

ARCHIVE_NAME = "mullvad.deb"
SERVICE_NAME = "mullvad"
APP_DIR_NAME = "Mullvad VPN"

_BINARIES = (
    "usr/bin/mullvad",
    "usr/bin/mullvad-daemon",
    "usr/bin/mullvad-exclude",
    "usr/bin/mullvad-problem-report",
)

_METADATA = (
    "usr/local/share/zsh/site-functions/_mullvad",
    "usr/share/applications/mullvad-vpn.desktop",
    "usr/share/doc/mullvad-vpn",
    "usr/share/fish/vendor_completions.d/mullvad.fish",
)


@dataclass(frozen=True)
class Layout:
    root: Path = Path("/")

    @property
    def usr_dir(self) -> Path:
        return self.root / "usr"

    @property
    def opt_dir(self) -> Path:
        return self.root / "opt"

    @property
    def app_dir(self) -> Path:
        """Install target; its presence means Mullvad is already installed."""
        return self.opt_dir / APP_DIR_NAME

    @property
    def sv_dir(self) -> Path:
        """runit supervision directory for the daemon."""
        return self.root / "etc" / "sv" / SERVICE_NAME

    @property
    def run_script(self) -> Path:
        return self.sv_dir / "run"

    @property
    def active_dir(self) -> Path:
        """Directory runsvdir watches for active services."""
        return self.root / "var" / "service"

    @property
    def service_link(self) -> Path:
        return self.active_dir / SERVICE_NAME

    @property
    def binaries(self) -> list[Path]:
        return [self.root / p for p in _BINARIES]

    @property
    def metadata(self) -> list[Path]:
        """Shell completions, desktop entry and docs shipped by the package."""
        return [self.root / p for p in _METADATA]


DEFAULT_LAYOUT = Layout()
