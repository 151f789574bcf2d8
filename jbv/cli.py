from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from .blocks import collect_issues, format_forest_tree, has_errors
from .config import load_config
from .errors import JBVUserError
from .jsonic import dumps as jdumps
from .session import EXPORT_FORMATS, ViewSession
from .version import tool_version


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="jbv",
        description="Jinja Block Visualizer (if/elif/else/for structure of templates)",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    p.add_argument(
        "--config",
        metavar="PATH",
        help="путь к YAML-конфигу (по умолчанию ./jbv.yaml, если есть)",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    def add_file(sp: argparse.ArgumentParser) -> None:
        sp.add_argument("file", help="файл шаблона или - для чтения из stdin")

    sp_tree = sub.add_parser("tree", help="Текстовое дерево блоков")
    add_file(sp_tree)

    sp_export = sub.add_parser("export", help="Экспорт дерева (json | mermaid | html)")
    add_file(sp_export)
    sp_export.add_argument("--format", "-f", choices=EXPORT_FORMATS, default="json", help="формат экспорта")
    sp_export.add_argument("--output", "-o", metavar="PATH", help="записать результат в файл вместо stdout")

    sp_locate = sub.add_parser("locate", help="Диапазон навигации для строки (JSON)")
    add_file(sp_locate)
    sp_locate.add_argument("line", type=int, help="номер строки (1-based)")

    sp_check = sub.add_parser("check", help="Структурная проверка тегов (JSON); код 1 при ошибках")
    add_file(sp_check)

    return p


def _setup_logging() -> None:
    level = logging.DEBUG if os.environ.get("JBV_DEBUG") else logging.WARNING
    root = logging.getLogger("jbv")
    root.setLevel(level)
    if not root.handlers:
        h = logging.StreamHandler(sys.stderr)
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        root.addHandler(h)


def _open_session(ns: argparse.Namespace) -> ViewSession:
    """Создаёт сессию и загружает шаблон из файла или stdin ('-')."""
    cfg = load_config(Path(ns.config) if ns.config else None)
    session = ViewSession(cfg)
    if ns.file == "-":
        session.load_text(sys.stdin.read())
    else:
        session.open(Path(ns.file))
    return session


def main(argv: list[str] | None = None) -> int:
    ns = _build_parser().parse_args(argv)
    _setup_logging()

    try:
        session = _open_session(ns)

        if ns.cmd == "tree":
            parsed = session.parsed
            out = format_forest_tree(parsed.forest, line_count=parsed.line_count())
            sys.stdout.write((out or "(no blocks)") + "\n")
            return 0

        if ns.cmd == "export":
            result = session.export(ns.format)
            if ns.output:
                out_path = Path(ns.output)
                try:
                    out_path.write_text(result, encoding="utf-8")
                except OSError as e:
                    raise JBVUserError(f"Failed to write {out_path}: {e}") from e
                sys.stderr.write(f"Exported {ns.format} to: {out_path}\n")
            else:
                sys.stdout.write(result)
            return 0

        if ns.cmd == "locate":
            span = session.navigate(ns.line - 1)
            text = session.parsed.lines[span.line]
            sys.stdout.write(jdumps({
                "line": span.line + 1,
                "startCol": span.start_col,
                "endCol": span.end_col,
                "text": text[span.start_col:span.end_col],
            }))
            return 0

        if ns.cmd == "check":
            issues = collect_issues(session.text or "")
            sys.stdout.write(jdumps({
                "issues": [
                    {"line": i.line + 1, "severity": i.severity, "message": i.message}
                    for i in issues
                ],
            }))
            return 1 if has_errors(issues) else 0

    except JBVUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
