"""
Installer error taxonomy.

Every failure a procedure step can raise is an InstallerError. The CLI
catches the base class, prints its one-line message and exits 1.
"""

from __future__ import annotations

from pathlib import Path


class InstallerError(Exception):
    """Base exception for all installer failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


# ── Preconditions ─────────────────────────────────────────────────────────────

class PrivilegeError(InstallerError):
    """Raised when the process is not running as root."""

    def __init__(self, prog: str = "void-mullvad") -> None:
        super().__init__(f"You must run {prog} as root!")


class AlreadyInstalledError(InstallerError):
    """Raised by install when the target directory already exists."""

    def __init__(self, target: Path) -> None:
        self.target = target
        super().__init__("Mullvad VPN already installed..")


class MissingToolError(InstallerError):
    """Raised when an external tool needed by install is not on PATH."""

    def __init__(self, tools: list[str]) -> None:
        self.tools = tools
        super().__init__(f"Required tools not found on PATH: {', '.join(tools)}")


# ── Step failures ─────────────────────────────────────────────────────────────

class CommandError(InstallerError):
    """Raised when an external command exits non-zero, times out or is missing."""

    def __init__(self, argv: list[str], returncode: int, stderr: str = "") -> None:
        self.argv = argv
        self.returncode = returncode
        self.stderr = stderr
        message = f"`{' '.join(argv)}` failed (exit {returncode})"
        detail = stderr.strip().splitlines()[-1] if stderr.strip() else ""
        if detail:
            message += f": {detail}"
        super().__init__(message)


class DownloadError(InstallerError):
    """Raised when the archive cannot be fetched."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        super().__init__(f"Download of {url} failed: {reason}")


class FilesystemError(InstallerError):
    """Wraps an OSError raised while mutating the filesystem."""

    def __init__(self, action: str, path: Path, error: OSError) -> None:
        self.path = path
        self.error = error
        reason = error.strerror or str(error)
        super().__init__(f"Could not {action} {path}: {reason}")
