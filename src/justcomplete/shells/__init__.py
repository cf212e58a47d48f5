"""Shell adapters -- render and install completion scripts.

The completion table is shell-agnostic; this sub-package adapts it to the
registration mechanism of each supported shell.

Sub-modules:

* :mod:`~justcomplete.shells.renderer` -- Render ``templates/<shell>.j2``
  with the table and per-shell quoting filters.
* :mod:`~justcomplete.shells.install` -- Default script locations and
  atomic installation.

Exports:
    SUPPORTED_SHELLS: Names accepted by :func:`render_script`.
    render_script: Render the script text for a shell.
    install_script: Render and write the script to disk.
    default_install_path: User-level script location for a shell.
"""

from justcomplete.shells.install import (
    activation_hint,
    default_install_path,
    install_script,
)
from justcomplete.shells.renderer import SUPPORTED_SHELLS, normalize_shell, render_script

__all__ = [
    "SUPPORTED_SHELLS",
    "activation_hint",
    "default_install_path",
    "install_script",
    "normalize_shell",
    "render_script",
]
