"""
Config file loading for void-mullvad.

Reads /etc/void-mullvad/config.toml and returns structured config.
Never raises — always returns a valid dict with sensible defaults.

Only timeouts are configurable. Install paths and the download URL are fixed.
"""

from pathlib import Path

_CONFIG_PATH = Path("/etc/void-mullvad/config.toml")

DEFAULTS: dict = {
    "download_timeout": 60.0,
    "command_timeout": 120.0,
}


def load_config(path: Path | None = None) -> dict:
    """
    Load and return void-mullvad config from TOML file.

    Returns {"download_timeout": float, "command_timeout": float}.
    Missing file, parse errors, or bad values all fall back to defaults.
    """
    config_path = path or _CONFIG_PATH
    config = dict(DEFAULTS)

    if not config_path.is_file():
        return config

    try:
        raw = config_path.read_bytes()
    except OSError:
        return config

    try:
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore[no-redef]
        except ModuleNotFoundError:
            return config

    try:
        data = tomllib.loads(raw.decode("utf-8"))
    except (tomllib.TOMLDecodeError, UnicodeDecodeError):
        return config

    for key in DEFAULTS:
        value = data.get(key)
        # bool is an int subclass; reject it explicitly
        if isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0:
            config[key] = float(value)

    return config
