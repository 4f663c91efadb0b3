"""
Host detection — privileges and external tool availability.
"""

import os
import shutil


# Tools install shells out to, in the order they are first used
INSTALL_TOOLS: tuple[str, ...] = ("ar", "tar", "chmod", "ln", "xdg-desktop-menu")


def is_root() -> bool:
    """Return True when running with an effective UID of 0."""
    return os.geteuid() == 0


def missing_tools(tools: tuple[str, ...] = INSTALL_TOOLS) -> list[str]:
    """Return the subset of tools that are not available on PATH."""
    return [tool for tool in tools if shutil.which(tool) is None]
