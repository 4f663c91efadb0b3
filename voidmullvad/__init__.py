"""void-mullvad — Mullvad VPN installer for runit-based Void Linux"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("void-mullvad")
except PackageNotFoundError:
    __version__ = "dev"

__author__ = "void-mullvad"
