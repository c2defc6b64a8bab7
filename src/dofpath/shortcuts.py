"""Shortcut (``.lnk``) resolution backends.

Every backend follows the same contract: ``resolve`` returns the target only
when it is an existing file or directory, and returns ``None`` for anything
else, including failures. Nothing is raised to the caller.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Protocol, runtime_checkable

from dofpath.config.models import ShortcutConfig

try:
    import win32com.client as win32com_client  # type: ignore
except Exception:
    win32com_client = None  # type: ignore

logger = logging.getLogger(__name__)


@runtime_checkable
class ShortcutResolver(Protocol):
    """Resolves a shortcut file to the location it points at."""

    def resolve(self, path: Path) -> Optional[Path]:
        """Return the existing target of ``path`` or ``None``."""
        ...


def _existing(target: Path) -> Optional[Path]:
    try:
        if target.is_dir() or target.is_file():
            return target
    except OSError as exc:
        logger.debug("Cannot stat shortcut target %s: %s", target, exc)
    return None


class NullShortcutResolver:
    """For platforms without native shortcut files."""

    def resolve(self, path: Path) -> Optional[Path]:
        return None


class SymlinkShortcutResolver:
    """Follows a ``.lnk`` that is a symbolic link."""

    def resolve(self, path: Path) -> Optional[Path]:
        try:
            if not path.is_symlink():
                return None
            target = Path(os.readlink(path))
        except OSError as exc:
            logger.debug("Cannot read link %s: %s", path, exc)
            return None
        if not target.is_absolute():
            target = path.parent / target
        return _existing(Path(os.path.normpath(target)))


class WindowsShellShortcutResolver:
    """Reads a Windows shell link through the ``WScript.Shell`` COM object.

    Without pywin32 every lookup returns ``None``.
    """

    def resolve(self, path: Path) -> Optional[Path]:
        if win32com_client is None:
            logger.debug("pywin32 not installed, cannot resolve shortcut %s", path)
            return None
        try:
            shell = win32com_client.Dispatch("WScript.Shell")
            target = shell.CreateShortcut(str(Path(path).absolute())).TargetPath
        except Exception as exc:  # noqa: BLE001 - COM errors mean "no shortcut"
            logger.debug("Shortcut resolution failed for %s: %s", path, exc)
            return None

        if not target:
            return None
        return _existing(Path(str(target).strip()))


def shortcut_resolver_for(config: ShortcutConfig | None = None) -> ShortcutResolver:
    """Pick the backend named by ``config.mode``; ``auto`` follows the running platform."""

    config = config or ShortcutConfig()
    mode = config.mode
    if mode == "auto":
        mode = "windows" if os.name == "nt" else "symlink"

    if mode == "windows":
        return WindowsShellShortcutResolver()
    if mode == "symlink":
        return SymlinkShortcutResolver()
    return NullShortcutResolver()


__all__ = [
    "NullShortcutResolver",
    "ShortcutResolver",
    "SymlinkShortcutResolver",
    "WindowsShellShortcutResolver",
    "shortcut_resolver_for",
]
