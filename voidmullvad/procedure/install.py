"""
Mullvad VPN install procedure.

Seven fail-fast steps: download → extract → copy /usr and /opt →
runit service → activate → refresh desktop menus → clean up.

Files already copied into /usr and /opt are left in place if a later step
fails. The temporary working directory is removed on every path.
"""

from __future__ import annotations

import shutil
import tempfile
from importlib.resources import as_file, files
from pathlib import Path
from typing import Callable

from voidmullvad.config import DEFAULTS
from voidmullvad.errors import AlreadyInstalledError, FilesystemError, InstallerError, MissingToolError
from voidmullvad.layout import ARCHIVE_NAME, DEFAULT_LAYOUT, DOWNLOAD_URL, Layout
from voidmullvad.procedure import executor
from voidmullvad.procedure.runner import Procedure, Step
from voidmullvad.system_info import missing_tools
from voidmullvad.ui.narrator import StepNarrator


TEMP_PREFIX = "void-mullvad-"


class MullvadInstall:
    """
    Builds the install Procedure for a given layout.

    run_command and download default to the real executors; tests swap
    them for fakes that emulate ar / tar / ln against a temporary root.
    """

    def __init__(
        self,
        layout: Layout = DEFAULT_LAYOUT,
        config: dict | None = None,
        narrator: StepNarrator | None = None,
        run_command: Callable[..., str] | None = None,
        download: Callable[..., int] | None = None,
        url: str = DOWNLOAD_URL,
    ) -> None:
        self.layout = layout
        self.config = config or dict(DEFAULTS)
        self.narrator = narrator
        self._run_command = run_command or executor.run_command
        self._download = download or executor.download_archive
        self.url = url
        self.tmp_dir: Path | None = None

    # ── Public API ────────────────────────────────────────────────────────────

    def check_preconditions(self) -> None:
        """Refuse to start when already installed or when a tool is missing."""
        if self.layout.app_dir.exists():
            raise AlreadyInstalledError(self.layout.app_dir)
        missing = missing_tools()
        if missing:
            raise MissingToolError(missing)

    def procedure(self) -> Procedure:
        return Procedure(
            name="install",
            policy="fail_fast",
            steps=[
                Step("Downloading latest Mullvad VPN", self.download),
                Step("Extracting package", self.extract),
                Step("Installing package", self.copy_tree),
                Step("Installing runit service", self.install_service),
                Step("Launching runit service", self.activate_service),
                Step("Refresh XDG desktop entries", self.refresh_desktop),
                Step("Cleaning up.", self.clean_up),
            ],
            finalizer=self.discard_tmp_dir,
        )

    # ── Steps ─────────────────────────────────────────────────────────────────

    def download(self) -> None:
        self.tmp_dir = Path(tempfile.mkdtemp(prefix=TEMP_PREFIX))
        archive = self.tmp_dir / ARCHIVE_NAME
        self._detail(f"{self.url} → {archive}")
        size = self._download(self.url, archive, timeout=self.config["download_timeout"])
        self._detail(f"{size} bytes")

    def extract(self) -> None:
        tmp_dir = self._require_tmp_dir()
        self._run(["ar", "x", ARCHIVE_NAME], cwd=tmp_dir)
        payload = _find_payload(tmp_dir)
        self._run(["tar", "-xf", payload.name], cwd=tmp_dir)

    def copy_tree(self) -> None:
        tmp_dir = self._require_tmp_dir()
        for name, dest in (("usr", self.layout.usr_dir), ("opt", self.layout.opt_dir)):
            src = tmp_dir / name
            if not src.is_dir():
                raise InstallerError(f"Extracted package has no {name}/ tree")
            count = executor.merge_copy(src, dest)
            self._detail(f"{count} entries → {dest}")

    def install_service(self) -> None:
        sv_dir = self.layout.sv_dir
        run_script = self.layout.run_script
        try:
            sv_dir.mkdir(parents=True, exist_ok=True)
            with as_file(files("voidmullvad") / "data" / "run") as bundled:
                shutil.copyfile(bundled, run_script)
        except OSError as e:
            raise FilesystemError("install", run_script, e) from e
        self._run(["chmod", "+x", str(run_script)])

    def activate_service(self) -> None:
        # -n replaces an existing link instead of descending into it
        self._run(["ln", "-sfn", str(self.layout.sv_dir), str(self.layout.service_link)])

    def refresh_desktop(self) -> None:
        self._run(["xdg-desktop-menu", "forceupdate"])

    def clean_up(self) -> None:
        tmp_dir = self._require_tmp_dir()
        try:
            shutil.rmtree(tmp_dir)
        except OSError as e:
            raise FilesystemError("remove", tmp_dir, e) from e
        self.tmp_dir = None

    def discard_tmp_dir(self) -> None:
        """Finalizer: drop the temp dir left behind by a failed run."""
        if self.tmp_dir is not None:
            shutil.rmtree(self.tmp_dir, ignore_errors=True)
            self.tmp_dir = None

    # ── Helpers ───────────────────────────────────────────────────────────────

    def _run(self, argv: list[str], cwd: Path | None = None) -> str:
        if self.narrator is not None:
            self.narrator.command(argv)
        return self._run_command(argv, cwd=cwd, timeout=self.config["command_timeout"])

    def _detail(self, message: str) -> None:
        if self.narrator is not None:
            self.narrator.detail(message)

    def _require_tmp_dir(self) -> Path:
        if self.tmp_dir is None:
            raise InstallerError("No working directory; the download step did not run")
        return self.tmp_dir


def _find_payload(tmp_dir: Path) -> Path:
    """Return the data.tar.* member extracted from the .deb container."""
    candidates = sorted(tmp_dir.glob("data.tar*"))
    if not candidates:
        raise InstallerError("Archive contains no data.tar payload")
    return candidates[0]
