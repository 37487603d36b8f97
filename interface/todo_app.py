#!/usr/bin/env python3
"""
todo_tui: interactive terminal task list.

Tasks live in memory for the lifetime of the process; nothing is written to disk
except the optional user preferences in ~/.todo_tui_config.yaml.
"""

import argparse
import logging
import sys
from importlib.metadata import version as pkg_version, PackageNotFoundError
from pathlib import Path
from typing import List, Optional

from config import get_user_log_level, get_user_theme, set_user_theme

from .cli_parser import build_parser as build_cli_parser
from .logging_setup import setup_logging
from .tui_app import TerminalError, TodoTUI
from .tui_themes import DEFAULT_THEME, THEMES

logger = logging.getLogger("todo_tui.app")


def _default_theme() -> str:
    preferred = get_user_theme()
    return preferred if preferred in THEMES else DEFAULT_THEME


def build_parser() -> argparse.ArgumentParser:
    return build_cli_parser(THEMES, _default_theme())


def cmd_tui(args) -> int:
    tui = TodoTUI(
        theme=getattr(args, "theme", DEFAULT_THEME),
        mono_select=getattr(args, "mono_select", False),
    )
    try:
        tui.run()
    except TerminalError as exc:
        logger.exception("terminal failure")
        print(f"UI crashed:\n{exc}", file=sys.stderr)
        return 1
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if getattr(args, "version", False):
        try:
            print(pkg_version("todo-tui"))
        except PackageNotFoundError:
            print("0.0.0")
        return 0
    log_file = Path(args.log_file) if args.log_file else None
    setup_logging(log_file, args.log_level or get_user_log_level() or None)
    if args.save_theme:
        set_user_theme(args.theme)
    return cmd_tui(args)


if __name__ == "__main__":
    sys.exit(main())
