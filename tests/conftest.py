"""
Shared pytest fixtures.

Nothing here touches the real root filesystem or the network: the layout is
rooted in tmp_path and FakeSystem stands in for ar / tar / chmod / ln / sv /
xdg-desktop-menu and the archive download.
"""
import os
import tempfile
from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from voidmullvad.errors import CommandError, DownloadError
from voidmullvad.layout import Layout
from voidmullvad.ui.narrator import StepNarrator
from voidmullvad.ui.theme import INSTALLER_THEME


# Files the fake `tar -xf data.tar.xz` materialises, relative to the temp dir
PACKAGE_FILES = (
    "usr/bin/mullvad",
    "usr/bin/mullvad-daemon",
    "usr/bin/mullvad-exclude",
    "usr/bin/mullvad-problem-report",
    "usr/local/share/zsh/site-functions/_mullvad",
    "usr/share/applications/mullvad-vpn.desktop",
    "usr/share/doc/mullvad-vpn/changelog.gz",
    "usr/share/fish/vendor_completions.d/mullvad.fish",
    "opt/Mullvad VPN/mullvad-gui",
    "opt/Mullvad VPN/resources/app.asar",
)


class FakeSystem:
    """Records and emulates every external command against a temp root."""

    def __init__(self) -> None:
        self.calls: list[list[str]] = []
        self.downloads: list[str] = []
        self.fail_on: str | None = None
        self.download_error: Exception | None = None

    def download(self, url: str, dest: Path, timeout: float = 60.0) -> int:
        self.downloads.append(url)
        if self.download_error is not None:
            raise self.download_error
        dest.write_bytes(b"!<arch>\n")
        return 8

    def run(self, argv: list[str], cwd: Path | None = None, timeout: float = 120.0) -> str:
        self.calls.append(list(argv))
        if self.fail_on == argv[0]:
            raise CommandError(argv, 1, f"{argv[0]}: simulated failure")
        handler = getattr(self, "_" + argv[0].replace("-", "_"))
        handler(argv, cwd)
        return ""

    def commands(self) -> list[str]:
        return [argv[0] for argv in self.calls]

    # ── Emulated tools ────────────────────────────────────────────────────────

    def _ar(self, argv, cwd):
        (cwd / "debian-binary").write_text("2.0\n")
        (cwd / "control.tar.xz").write_bytes(b"")
        (cwd / "data.tar.xz").write_bytes(b"")

    def _tar(self, argv, cwd):
        for rel in PACKAGE_FILES:
            path = cwd / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(rel)

    def _chmod(self, argv, cwd):
        path = Path(argv[2])
        path.chmod(path.stat().st_mode | 0o111)

    def _ln(self, argv, cwd):
        target, link = Path(argv[2]), Path(argv[3])
        link.parent.mkdir(parents=True, exist_ok=True)
        if link.is_symlink():
            link.unlink()
        os.symlink(target, link)

    def _xdg_desktop_menu(self, argv, cwd):
        pass

    def _sv(self, argv, cwd):
        if not Path(argv[2]).exists():
            raise CommandError(argv, 1, f"fail: {argv[2]}: unable to change to service directory")


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def layout(tmp_path) -> Layout:
    root = tmp_path / "root"
    (root / "usr").mkdir(parents=True)
    (root / "opt").mkdir()
    (root / "etc" / "sv").mkdir(parents=True)
    (root / "var" / "service").mkdir(parents=True)
    return Layout(root=root)


@pytest.fixture
def fake_system() -> FakeSystem:
    return FakeSystem()


@pytest.fixture
def scratch_tmp(tmp_path, monkeypatch) -> Path:
    """Redirect tempfile.mkdtemp into an inspectable directory."""
    scratch = tmp_path / "scratch"
    scratch.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(scratch))
    return scratch


@pytest.fixture(autouse=True)
def tools_present(monkeypatch):
    """Pretend every install tool is on PATH; tests override when needed."""
    monkeypatch.setattr("voidmullvad.procedure.install.missing_tools", lambda: [])


@pytest.fixture
def captured() -> tuple[StepNarrator, StringIO]:
    """Narrator whose stdout and stderr output both land in one buffer."""
    buf = StringIO()
    con = Console(file=buf, highlight=False, no_color=True, width=200, theme=INSTALLER_THEME)
    return StepNarrator(con, con), buf


@pytest.fixture
def download_error() -> DownloadError:
    return DownloadError("https://example.invalid/x.deb", "503 Service Unavailable")
