"""CLI parser construction for the todo TUI."""

import argparse
from typing import Any, Mapping


def build_parser(themes: Mapping[str, Any], default_theme: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="todo-tui",
        description="todo-tui: terminal task list (tasks live only for the session)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Keys: q quit | n new task | j/k move | d delete | Enter toggle done / confirm | Esc cancel",
    )
    parser.add_argument("--theme", choices=list(themes.keys()), default=default_theme, help="colour palette")
    parser.add_argument("--mono-select", action="store_true", help="highlight the selected row without status colours")
    parser.add_argument("--log-file", metavar="PATH", help="write diagnostics to this file")
    parser.add_argument("--log-level", metavar="LEVEL", help="logging level (DEBUG, INFO, WARNING, ...)")
    parser.add_argument("--save-theme", action="store_true", help="remember --theme in the user config")
    parser.add_argument("--version", action="store_true", help="print version and exit")
    return parser


__all__ = ["build_parser"]
