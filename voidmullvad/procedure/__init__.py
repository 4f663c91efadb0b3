"""
Install / uninstall procedures for void-mullvad.

Modules:
  runner.py    — Step / Procedure model and the sequential runner:
                 fail-fast for install, best-effort for uninstall.
  executor.py  — blocking primitives steps are built from: run_command,
                 download_archive, merge_copy, remove_path.
  install.py   — the seven install steps.
  uninstall.py — the four uninstall phases.
"""
