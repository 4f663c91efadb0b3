"""
Procedure runner.

A Procedure is an ordered list of Steps plus a failure policy:

  fail_fast   — the first failing step aborts the rest (install)
  best_effort — a failing step is reported as a warning and the next
                step still runs (uninstall)

Every step is announced as "(i/N) <title>" before it runs. A step action
may return a list of warning strings for partial failures it recovered
from itself; those are narrated and recorded whatever the policy.

The finalizer, if any, runs after the last attempted step on every path.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Literal, Optional

from voidmullvad.errors import FilesystemError, InstallerError
from voidmullvad.ui.narrator import StepNarrator


Policy = Literal["fail_fast", "best_effort"]


# ── Data model ────────────────────────────────────────────────────────────────

@dataclass
class Step:
    title: str                                      # "Installing package"
    action: Callable[[], Optional[list[str]]]
    warning: str | None = None                      # best_effort message override


@dataclass
class Procedure:
    name: str                                       # "install"
    steps: list[Step]
    policy: Policy = "fail_fast"
    finalizer: Callable[[], None] | None = None

    @property
    def total(self) -> int:
        return len(self.steps)


@dataclass
class ProcedureResult:
    name: str
    state: Literal["done", "aborted"] = "done"
    completed: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    error: InstallerError | None = None

    def raise_for_state(self) -> None:
        """Re-raise the error that aborted the procedure, if any."""
        if self.state == "aborted" and self.error is not None:
            raise self.error


# ── Public API ────────────────────────────────────────────────────────────────

def run_procedure(
    procedure: Procedure,
    narrator: StepNarrator,
    dry_run: bool = False,
) -> ProcedureResult:
    """
    Run every step of procedure in order and return the outcome.

    Never raises for step failures: a fail_fast abort is reported through
    result.state / result.error; call result.raise_for_state() to propagate.
    """
    result = ProcedureResult(name=procedure.name)
    total = procedure.total

    try:
        for idx, step in enumerate(procedure.steps, 1):
            narrator.step(idx, total, step.title, dry_run=dry_run)
            if dry_run:
                continue

            try:
                warnings = step.action() or []
            except (InstallerError, OSError) as exc:
                error = _as_installer_error(exc)
                if procedure.policy == "fail_fast":
                    result.state = "aborted"
                    result.error = error
                    break
                message = step.warning or error.message
                narrator.warn(message)
                result.warnings.append(message)
                continue

            for message in warnings:
                narrator.warn(message)
            result.warnings.extend(warnings)
            result.completed.append(step.title)
    finally:
        if procedure.finalizer is not None and not dry_run:
            procedure.finalizer()

    return result


# ── Internal ──────────────────────────────────────────────────────────────────

def _as_installer_error(exc: InstallerError | OSError) -> InstallerError:
    if isinstance(exc, InstallerError):
        return exc
    return FilesystemError("access", Path(exc.filename or "?"), exc)
