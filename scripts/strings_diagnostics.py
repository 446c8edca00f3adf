#!/usr/bin/env python3
from __future__ import annotations

import argparse
from pathlib import Path

from stringsfile_py.core.app_config import load as load_config
from stringsfile_py.core.diagnostics import format_report, scan_issues


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="strings_diagnostics",
        description="Parse every .strings table below a project and report problems.",
    )
    parser.add_argument(
        "project_root",
        nargs="?",
        default=".",
        help="Project root to scan (default: current working directory).",
    )
    parser.add_argument(
        "--warn-only",
        action="store_true",
        help="Always exit 0, even if errors are detected.",
    )
    args = parser.parse_args(argv)

    root = Path(args.project_root).resolve()
    cfg = load_config(root)
    issues = scan_issues(root, cfg)
    print(format_report(root=root, issues=issues, show_columns=cfg.show_columns))
    if args.warn_only:
        return 0
    return 1 if any(issue.severity == "error" for issue in issues) else 0


if __name__ == "__main__":
    raise SystemExit(main())
