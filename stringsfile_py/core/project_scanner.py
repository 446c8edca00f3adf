from __future__ import annotations

from fnmatch import fnmatch
from pathlib import Path

from .app_config import AppConfig
from .app_config import load as load_config


def scan_root(root: Path, config: AppConfig | None = None) -> list[Path]:
    """Return every strings table under *root*, sorted.

    Tables are files with the configured extension that sit directly in
    *root* or in a directory whose name matches an include glob
    (``en.lproj``, ``Base.lproj`` …), at most ``max_depth`` levels down.
    """
    if not root.is_dir():
        raise NotADirectoryError(root)
    cfg = config if config is not None else load_config(root)

    found: list[Path] = []
    _collect(root, root=True, depth=0, cfg=cfg, out=found)
    return sorted(found)


def _collect(
    folder: Path, *, root: bool, depth: int, cfg: AppConfig, out: list[Path]
) -> None:
    matches = root or any(fnmatch(folder.name, g) for g in cfg.include_globs)
    for child in folder.iterdir():
        if child.is_file():
            if matches and child.name.endswith(cfg.strings_ext):
                out.append(child)
        elif child.is_dir() and depth < cfg.max_depth:
            _collect(child, root=False, depth=depth + 1, cfg=cfg, out=out)
