from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from pathlib import Path

from .app_config import AppConfig
from .app_config import load as load_config
from .bom import detect_bom
from .errors import DeserializationError, UnicodeDecodingError
from .parser import parse_bytes
from .project_scanner import scan_root


@dataclass(frozen=True, slots=True)
class StringsIssue:
    severity: str
    code: str
    path: Path
    detail: str
    line: int | None = None
    column: int | None = None


def check_file(path: Path) -> list[StringsIssue]:
    """Parse one table and describe everything wrong or suspicious in it."""
    try:
        raw = path.read_bytes()
    except OSError as exc:
        return [StringsIssue("error", "read_error", path, f"cannot read file: {exc}")]

    try:
        sf = parse_bytes(raw)
    except UnicodeDecodingError as exc:
        return [StringsIssue("error", "decode_error", path, str(exc))]
    except DeserializationError as exc:
        return [
            StringsIssue(
                "error",
                exc.kind.value,
                path,
                str(exc),
                line=exc.location.line,
                column=exc.location.column,
            )
        ]

    issues: list[StringsIssue] = []
    bom = detect_bom(raw)
    if bom is not None:
        issues.append(
            StringsIssue(
                "warning",
                "bom_present",
                path,
                f"{bom.encoding.codec} byte order mark; saving rewrites as UTF-8.",
            )
        )
    counts = Counter(sf.keys())
    for key, count in counts.items():
        if count > 1:
            issues.append(
                StringsIssue(
                    "warning",
                    "duplicate_key",
                    path,
                    f"key {key!r} appears {count} times.",
                )
            )
    return issues


def scan_issues(root: Path, config: AppConfig | None = None) -> list[StringsIssue]:
    issues: list[StringsIssue] = []
    for path in scan_root(root, config):
        issues.extend(check_file(path))
    issues.sort(key=lambda item: (item.path.as_posix(), item.severity, item.code))
    return issues


def format_report(
    *,
    root: Path,
    issues: list[StringsIssue],
    show_columns: bool | None = None,
) -> str:
    if show_columns is None:
        show_columns = load_config(root).show_columns
    lines = [f"Strings diagnostics: {root.as_posix()}"]
    if not issues:
        lines.append("No issues detected.")
        return "\n".join(lines)
    lines.append(f"Issues: {len(issues)}")
    for issue in issues:
        try:
            rel_path = issue.path.relative_to(root).as_posix()
        except ValueError:
            rel_path = issue.path.as_posix()
        where = ""
        if issue.line is not None:
            where = f":{issue.line + 1}"
            if show_columns and issue.column is not None:
                where += f":{issue.column + 1}"
        lines.append(f"- [{issue.severity}] {issue.code}: {rel_path}{where}")
        lines.append(f"  {issue.detail}")
    return "\n".join(lines)
