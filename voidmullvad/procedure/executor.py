"""
Blocking primitives procedure steps are built from.

Each function either completes or raises an InstallerError subclass:
  run_command      — external tool, argument list, no shell
  download_archive — streamed HTTPS download to a file
  merge_copy       — copy a tree over an existing one, replacing entries
  remove_path      — delete a file, symlink or directory tree
"""

from __future__ import annotations

import os
import shutil
import subprocess
from pathlib import Path

import requests

from voidmullvad import __version__
from voidmullvad.errors import CommandError, DownloadError, FilesystemError


CHUNK_SIZE = 64 * 1024


# ── External commands ─────────────────────────────────────────────────────────

def run_command(
    argv: list[str],
    cwd: Path | None = None,
    timeout: float = 120.0,
) -> str:
    """
    Run an external command and return its stdout.

    Args:
        argv:    Argument list, e.g. ["ar", "x", "mullvad.deb"].
                 Never constructed from user-supplied data.
        cwd:     Working directory for the command.
        timeout: Maximum seconds to wait before aborting.

    Raises CommandError on non-zero exit, timeout, or missing binary.
    """
    # C locale keeps tool error messages in English for the one-line report
    env = {**os.environ, "LANG": "C", "LC_ALL": "C"}
    try:
        proc = subprocess.run(
            argv,
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
            env=env,
        )
    except subprocess.TimeoutExpired:
        raise CommandError(argv, -1, f"timed out after {timeout:g}s") from None
    except FileNotFoundError:
        raise CommandError(argv, 127, f"command not found: {argv[0]}") from None
    except OSError as e:
        raise CommandError(argv, -1, str(e)) from e

    if proc.returncode != 0:
        raise CommandError(argv, proc.returncode, proc.stderr)
    return proc.stdout


# ── Network ───────────────────────────────────────────────────────────────────

def download_archive(url: str, dest: Path, timeout: float = 60.0) -> int:
    """
    Stream url into dest and return the number of bytes written.

    Raises DownloadError on HTTP or transport errors and on an empty body,
    FilesystemError if dest cannot be written.
    """
    headers = {"User-Agent": f"void-mullvad/{__version__}"}
    written = 0
    try:
        with requests.get(url, headers=headers, stream=True, timeout=timeout) as r:
            r.raise_for_status()
            with open(dest, "wb") as f:
                for chunk in r.iter_content(chunk_size=CHUNK_SIZE):
                    if chunk:
                        f.write(chunk)
                        written += len(chunk)
    except requests.RequestException as e:
        raise DownloadError(url, str(e)) from e
    except OSError as e:
        raise FilesystemError("write", dest, e) from e

    if written == 0:
        raise DownloadError(url, "server returned an empty body")
    return written


# ── Filesystem ────────────────────────────────────────────────────────────────

def merge_copy(src: Path, dst: Path) -> int:
    """
    Copy the tree at src over dst and return the number of entries copied.

    Existing directories are merged. Existing files and symlinks are
    replaced. Symlinks are recreated verbatim, never followed.
    """
    copied = 0
    target = dst
    try:
        for current, dirnames, filenames in os.walk(src):
            current_path = Path(current)
            target = target_dir = dst / current_path.relative_to(src)
            target_dir.mkdir(parents=True, exist_ok=True)

            # os.walk reports symlinks to directories as dirs; copy them as links
            links = [d for d in dirnames if (current_path / d).is_symlink()]
            dirnames[:] = [d for d in dirnames if d not in links]

            for name in filenames + links:
                source = current_path / name
                target = target_dir / name
                if target.is_symlink() or target.is_file():
                    target.unlink()
                if source.is_symlink():
                    os.symlink(os.readlink(source), target)
                else:
                    shutil.copy2(source, target)
                copied += 1
    except OSError as e:
        raise FilesystemError("copy into", target, e) from e
    return copied


def remove_path(path: Path) -> bool:
    """
    Delete a file, symlink, or directory tree.

    Returns False if nothing existed at path, True if something was removed.
    Raises FilesystemError on any other failure.
    """
    try:
        if path.is_symlink() or path.is_file():
            path.unlink()
        elif path.is_dir():
            shutil.rmtree(path)
        else:
            return False
    except FileNotFoundError:
        return False
    except OSError as e:
        raise FilesystemError("remove", path, e) from e
    return True
