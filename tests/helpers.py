from __future__ import annotations

from pathlib import Path
from typing import Optional

from dofpath.resolver import ConfigPathResolver
from dofpath.shortcuts import NullShortcutResolver
from dofpath.util.logging import OnceLogger

HOST_APP = "X"
CONFIG_NAME = "GlobalConfig_X.xml"
SHORTCUT_NAME = "GlobalConfig_X.lnk"


def make_flat_install(root: Path, *, with_config: bool = True) -> tuple[Path, Path]:
    """Create ``root/DirectOutput.dll`` (plus ``Config/``); return (install, module)."""

    root.mkdir(parents=True, exist_ok=True)
    if with_config:
        (root / "Config").mkdir(exist_ok=True)
    module = root / "DirectOutput.dll"
    module.write_bytes(b"")
    return root, module


def make_split_install(root: Path, *, arch: str = "x64") -> tuple[Path, Path]:
    """Create ``root/Config`` and ``root/<arch>/DirectOutput.dll``; return (install, module)."""

    (root / "Config").mkdir(parents=True, exist_ok=True)
    arch_dir = root / arch
    arch_dir.mkdir(exist_ok=True)
    module = arch_dir / "DirectOutput.dll"
    module.write_bytes(b"")
    return root, module


def touch(path: Path, text: str = "<GlobalConfig />") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


class FakeShortcutResolver:
    """Maps shortcut paths to fixed targets and records every lookup."""

    def __init__(self, targets: Optional[dict[Path, Path]] = None, *, error: Exception | None = None) -> None:
        self.targets = dict(targets or {})
        self.error = error
        self.calls: list[Path] = []

    def resolve(self, path: Path) -> Optional[Path]:
        self.calls.append(path)
        if self.error is not None:
            raise self.error
        target = self.targets.get(path)
        if target is None or not (target.is_dir() or target.is_file()):
            return None
        return target


def make_resolver(module: Optional[Path], shortcut_resolver=None) -> ConfigPathResolver:
    return ConfigPathResolver(
        module,
        shortcut_resolver=shortcut_resolver or NullShortcutResolver(),
        once_logger=OnceLogger(),
    )
