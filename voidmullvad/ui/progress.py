"""
Step counter renderer.

Stateless — takes (index, total, title), returns a rich Text.
The caller (StepNarrator) owns state and calls this once per step.

Output:  (3/7) Installing package
"""

from rich.text import Text

from voidmullvad.ui.theme import STATE_ICONS


def render_step(index: int, total: int, title: str, dry_run: bool = False) -> Text:
    """
    Return a styled step line as a rich Text object.

    Args:
        index:   1-based position of the step
        total:   fixed number of steps in the procedure
        title:   progress message for the step
        dry_run: append a "(dry run)" marker

    Returns a single-line Text like:
        (3/7) Installing package
    """
    t = Text()
    t.append(f"({index}/{total})", style="step")
    t.append(f" {title}")
    if dry_run:
        t.append(f"  {STATE_ICONS['dry_run']}(dry run)", style="dim")
    return t
