"""Install folder and global config file resolution.

The install tree comes in two layouts::

    flat                      split
    <install>/                <install>/
        dofpath module            Config/
        Config/                   x86/  dofpath module
                                  x64/  dofpath module

The global config file for a hosting application is looked up inside that
tree, optionally through a ``.lnk`` shortcut that redirects to a folder kept
elsewhere. Lookups never raise; every miss degrades to a usable default path.
"""

from __future__ import annotations

import enum
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dofpath.config.models import DofPathConfig
from dofpath.shortcuts import ShortcutResolver, shortcut_resolver_for
from dofpath.util.logging import OnceLogger
from dofpath.util.strings import invalid_file_name_chars, invalid_path_chars

logger = logging.getLogger(__name__)

# Shared by every resolver built without its own OnceLogger.
_default_once_logger = OnceLogger(logger)


class InstallLayout(str, enum.Enum):
    FLAT = "flat"
    SPLIT = "split"


@dataclass(frozen=True)
class InstallLocation:
    """Outcome of one install folder lookup."""

    module_dir: Path
    install_folder: Path
    layout: InstallLayout


def sanitize_host_app_name(name: Optional[str], *, windows: Optional[bool] = None) -> str:
    """Strip periods and characters that are invalid in file names or paths."""
    if not name:
        return ""
    invalid = invalid_file_name_chars(windows) | invalid_path_chars(windows) | {"."}
    return "".join(char for char in name if char not in invalid)


def global_config_file_name(host_app_name: Optional[str], settings: Optional[DofPathConfig] = None) -> str:
    naming = (settings or DofPathConfig()).naming
    return f"{naming.prefix}{sanitize_host_app_name(host_app_name)}{naming.extension}"


def _default_module_path() -> Optional[Path]:
    if getattr(sys, "frozen", False):  # PyInstaller / frozen executables
        return Path(sys.executable) if sys.executable else None
    module_file = globals().get("__file__")
    return Path(module_file) if module_file else None


def _is_dir(path: Path) -> bool:
    try:
        return path.is_dir()
    except OSError:
        return False


def _is_file(path: Path) -> bool:
    try:
        return path.is_file()
    except OSError:
        return False


def _exists(path: Path) -> bool:
    try:
        return path.exists() or path.is_symlink()
    except OSError:
        return False


class ConfigPathResolver:
    """Locates the install folder and the per-host-application global config file.

    Args:
        module_path: File (or folder) of the running module. Defaults to the
            frozen executable, or this package when running from source.
        settings: Folder and file naming; defaults to the built-in settings.
        shortcut_resolver: Backend for ``.lnk`` files; defaults to the one
            selected by ``settings.shortcuts``.
        once_logger: Receives one info record per distinct decision; defaults
            to one instance shared across the process.
    """

    def __init__(
        self,
        module_path: Optional[Path | str] = None,
        *,
        settings: Optional[DofPathConfig] = None,
        shortcut_resolver: Optional[ShortcutResolver] = None,
        once_logger: Optional[OnceLogger] = None,
    ) -> None:
        self.module_path = Path(module_path) if module_path else _default_module_path()
        self.settings = settings or DofPathConfig()
        self.shortcut_resolver = shortcut_resolver or shortcut_resolver_for(self.settings.shortcuts)
        self.once_logger = once_logger or _default_once_logger

    def _module_dir(self) -> Optional[Path]:
        if self.module_path is None:
            return None
        module_path = self.module_path.absolute()
        return module_path if _is_dir(module_path) else module_path.parent

    def locate_install(self) -> Optional[InstallLocation]:
        """Inspect the layout around the module; ``None`` when the module location is unknown."""
        module_dir = self._module_dir()
        if module_dir is None:
            return None

        config_dir_name = self.settings.layout.config_dir_name
        parent = module_dir.parent
        if not _is_dir(module_dir / config_dir_name) and parent != module_dir and _is_dir(parent / config_dir_name):
            self.once_logger.once(
                f"install-folder:{module_dir}",
                "Install folder lookup: module: %s, install folder: %s "
                "(parent of the module folder, split per-architecture install)",
                self.module_path,
                parent,
            )
            return InstallLocation(module_dir=module_dir, install_folder=parent, layout=InstallLayout.SPLIT)

        self.once_logger.once(
            f"install-folder:{module_dir}",
            "Install folder lookup: module: %s, install folder: %s (module folder, flat install)",
            self.module_path,
            module_dir,
        )
        return InstallLocation(module_dir=module_dir, install_folder=module_dir, layout=InstallLayout.FLAT)

    def resolve_install_folder(self) -> Optional[Path]:
        location = self.locate_install()
        return location.install_folder if location else None

    def resolve_global_config_file(self, host_app_name: Optional[str]) -> Path:
        """Return the global config file path for ``host_app_name``.

        Search order, first hit wins:

        1. ``<install>/Config/<file>``
        2. ``<install>/Config/<root>.lnk`` pointing at a folder holding ``<file>``
        3. ``<install>/<file>``

        On a miss the path to create is returned instead: under ``Config``
        when that folder exists, otherwise in the install folder. When the
        install folder is unknown the bare file name is returned.
        """
        naming = self.settings.naming
        root_name = f"{naming.prefix}{sanitize_host_app_name(host_app_name)}"
        file_name = root_name + naming.extension

        install_folder = self.resolve_install_folder()
        if install_folder is None:
            return Path(file_name)

        config_dir = install_folder / self.settings.layout.config_dir_name
        key = f"global-config:{install_folder}:{file_name}"

        candidate = config_dir / file_name
        if _is_file(candidate):
            self.once_logger.once(f"{key}:config", "Global config file lookup: found in Config folder: %s", candidate)
            return candidate

        shortcut = config_dir / (root_name + naming.shortcut_extension)
        if _exists(shortcut):
            target = self._resolve_shortcut(shortcut)
            self.once_logger.once(
                f"{key}:shortcut",
                "Global config file lookup: found shortcut (%s) -> %s",
                shortcut,
                target if target is not None else "",
            )
            if target is not None and _is_dir(target):
                candidate = target / file_name
                if _is_file(candidate):
                    self.once_logger.once(
                        f"{key}:shortcut-target",
                        "Global config file lookup: found at shortcut location (%s)",
                        candidate,
                    )
                    return candidate

        candidate = install_folder / file_name
        if _is_file(candidate):
            self.once_logger.once(
                f"{key}:install-folder",
                "Global config file lookup: found in main install folder (%s)",
                candidate,
            )
            return candidate

        if _is_dir(config_dir):
            self.once_logger.once(
                f"{key}:default",
                "Global config file lookup: file not found, but Config folder will be used for other file searches (%s)",
                config_dir,
            )
            return config_dir / file_name

        self.once_logger.once(
            f"{key}:default",
            "Global config file lookup: Config folder (%s) not found, using main install folder for other file searches (%s)",
            config_dir,
            install_folder,
        )
        return install_folder / file_name

    def _resolve_shortcut(self, shortcut: Path) -> Optional[Path]:
        try:
            return self.shortcut_resolver.resolve(shortcut)
        except Exception as exc:  # noqa: BLE001 - a broken shortcut only skips this rule
            logger.debug("Shortcut resolver failed for %s: %s", shortcut, exc)
            return None


def get_install_folder() -> Optional[Path]:
    """Install folder of the running module, or ``None`` when unknown."""
    return ConfigPathResolver().resolve_install_folder()


def get_global_config_file(host_app_name: Optional[str]) -> Path:
    return ConfigPathResolver().resolve_global_config_file(host_app_name)


def install_folder_or_cwd(resolver: Optional[ConfigPathResolver] = None) -> Path:
    """Install folder, falling back to the process working directory."""
    folder = (resolver or ConfigPathResolver()).resolve_install_folder()
    return folder if folder is not None else Path.cwd()


__all__ = [
    "ConfigPathResolver",
    "InstallLayout",
    "InstallLocation",
    "get_global_config_file",
    "get_install_folder",
    "global_config_file_name",
    "install_folder_or_cwd",
    "sanitize_host_app_name",
]
