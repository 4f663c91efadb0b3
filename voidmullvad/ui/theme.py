"""
void-mullvad visual design system.

All colors, style names, and icons as named constants.
Import from here and never hardcode colors in other modules. Render through
the INSTALLER_THEME style names ("step", "warning", "error", …).
"""

from rich.theme import Theme


# ── Color palette ─────────────────────────────────────────────────────────────
# Terminal-agnostic 24-bit hex values, readable on dark and light backgrounds.

COLOR_ERROR   = "#E05252"      # Warm severity red
COLOR_WARNING = "#D4870A"      # Amber
COLOR_SUCCESS = "#4DBD74"      # Calm sage-green
COLOR_STEP    = "#5BA3C9"      # Slate blue
COLOR_DIM     = "#787878"      # Medium gray
COLOR_COMMAND = "#A0A0A0"      # Silver, brighter than dim text


# ── Step state icons ──────────────────────────────────────────────────────────

ICON_WARNING = "⚠️ "
ICON_FAILED = "❌"
ICON_DRY_RUN = "⏭️ "

STATE_ICONS: dict[str, str] = {
    "warning": ICON_WARNING,
    "failed": ICON_FAILED,
    "dry_run": ICON_DRY_RUN,
}


# ── Rich Theme ────────────────────────────────────────────────────────────────

INSTALLER_THEME = Theme(
    {
        "error":   f"{COLOR_ERROR} bold",
        "warning": f"{COLOR_WARNING} bold",
        "success": f"{COLOR_SUCCESS} bold",
        "step":    f"{COLOR_STEP} bold",
        "dim":     COLOR_DIM,
        "command": COLOR_COMMAND,
    }
)
