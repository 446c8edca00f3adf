"""Repository-local settings for table discovery and reporting."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, replace
from functools import lru_cache
from pathlib import Path
from typing import Any


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Store effective scanner and report settings."""

    strings_ext: str = ".strings"
    include_globs: tuple[str, ...] = ("*.lproj",)
    max_depth: int = 4
    show_columns: bool = True


_MAX_DEPTH_LIMIT = 32


def _candidate_roots(root: Path | None) -> list[Path]:
    """Working directory first, then *root*; a root equal to cwd is read once."""
    cwd = Path.cwd().resolve()
    if root is None or root.resolve() == cwd:
        return [cwd]
    return [cwd, root.resolve()]


def _load_toml(path: Path) -> dict[str, Any]:
    if not path.is_file():
        return {}
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError):
        return {}


def _normalize_ext(value: Any, *, default: str) -> str:
    ext = str(value).strip()
    if not ext:
        return default
    return ext if ext.startswith(".") else f".{ext}"


def _normalize_globs(value: Any, *, default: tuple[str, ...]) -> tuple[str, ...]:
    items = [value] if isinstance(value, str) else value
    if not isinstance(items, list):
        return default
    # dict.fromkeys keeps first-seen order while dropping repeats
    globs = tuple(dict.fromkeys(g for g in (str(i).strip() for i in items) if g))
    return globs or default


def _normalize_depth(value: Any, *, default: int) -> int:
    if isinstance(value, bool):
        return default
    try:
        parsed = int(str(value).strip())
    except (TypeError, ValueError):
        return default
    return max(0, min(parsed, _MAX_DEPTH_LIMIT))


@lru_cache(maxsize=8)
def load(root: Path | None = None) -> AppConfig:
    """Merge `config/app.toml` from the working directory, then from *root*."""
    cfg = AppConfig()
    for base in _candidate_roots(root):
        data = _load_toml(base / "config" / "app.toml")
        scan = data.get("scan", {})
        if isinstance(scan, dict):
            cfg = replace(
                cfg,
                strings_ext=_normalize_ext(
                    scan.get("extension", cfg.strings_ext), default=cfg.strings_ext
                ),
                include_globs=_normalize_globs(
                    scan.get("include_globs"), default=cfg.include_globs
                ),
                max_depth=_normalize_depth(
                    scan.get("max_depth", cfg.max_depth), default=cfg.max_depth
                ),
            )
        report = data.get("report", {})
        if isinstance(report, dict):
            show_columns = report.get("show_columns", cfg.show_columns)
            if isinstance(show_columns, bool):
                cfg = replace(cfg, show_columns=show_columns)
    return cfg
