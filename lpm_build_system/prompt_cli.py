from __future__ import annotations

import argparse
import os
import sys

from . import prompt_utilities as pu
from .prompt_style import BuildSystemDirError, PromptStyle, load_prompt_style


def _style_from_args(args: argparse.Namespace) -> PromptStyle:
    return load_prompt_style(args.build_system_dir)


def cmd_msg(args: argparse.Namespace) -> int:
    pu.format_message(args.category, args.text, style=_style_from_args(args))
    return 0


def cmd_error(args: argparse.Namespace) -> int:
    style = _style_from_args(args)
    if args.exit:
        pu.print_msg_error_and_exit(args.text, style=style, original_cwd=os.getcwd())
    pu.print_msg_error(args.text, style=style)
    return 0


def cmd_rule(args: argparse.Namespace) -> int:
    pu.draw_horizontal_line_across_the_terminal_window(args.symbol)
    return 0


def cmd_header(args: argparse.Namespace) -> int:
    pu.print_formatted_script_header(args.name, args.symbol, style=_style_from_args(args))
    return 0


def cmd_footer(args: argparse.Namespace) -> int:
    pu.print_formatted_script_footer(args.name, args.symbol, style=_style_from_args(args))
    return 0


def cmd_back_to_script(args: argparse.Namespace) -> int:
    pu.print_formatted_back_to_script_msg(args.name, args.symbol, style=_style_from_args(args))
    return 0


def cmd_preview_begin(args: argparse.Namespace) -> int:
    pu.print_formatted_file_preview_begin(args.file, style=_style_from_args(args))
    return 0


def cmd_preview_end(args: argparse.Namespace) -> int:
    pu.print_formatted_file_preview_end(style=_style_from_args(args))
    return 0


def cmd_preview(args: argparse.Namespace) -> int:
    pu.print_formatted_file_preview(args.file, style=_style_from_args(args))
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="lpm-prompt")
    p.add_argument(
        "--build-system-dir",
        default=".",
        help="Directory named 'build_system' holding .env and .env.prompt (default: cwd)",
    )

    sub = p.add_subparsers(dest="subcmd", required=True)

    for name, category in [
        ("msg", "BASE"),
        ("done", "DONE"),
        ("warning", "WARNING"),
        ("awaiting-input", "AWAITING_INPUT"),
    ]:
        sp = sub.add_parser(name, help=f"Print a {category} message")
        sp.add_argument("text")
        sp.set_defaults(func=cmd_msg, category=category)

    sp = sub.add_parser("error", help="Print an error message to stderr")
    sp.add_argument("text")
    sp.add_argument("--exit", action="store_true", help="Exit with status 1 afterwards")
    sp.set_defaults(func=cmd_error)

    sp = sub.add_parser("rule", help="Draw a line across the terminal")
    sp.add_argument("symbol", nargs="?", default="=")
    sp.set_defaults(func=cmd_rule)

    sp = sub.add_parser("header", help="Print a script header")
    sp.add_argument("name")
    sp.add_argument("symbol", nargs="?", default="=")
    sp.set_defaults(func=cmd_header)

    sp = sub.add_parser("footer", help="Print a script footer")
    sp.add_argument("name")
    sp.add_argument("symbol", nargs="?", default="=")
    sp.set_defaults(func=cmd_footer)

    sp = sub.add_parser("back-to-script", help="Print a 'back to <script>' banner")
    sp.add_argument("name", nargs="?", default=pu.UPSTREAM_SCRIPT_NAME)
    sp.add_argument("symbol", nargs="?", default="=")
    sp.set_defaults(func=cmd_back_to_script)

    sp = sub.add_parser("preview-begin", help="Open a file preview frame")
    sp.add_argument("file")
    sp.set_defaults(func=cmd_preview_begin)

    sp = sub.add_parser("preview-end", help="Close a file preview frame")
    sp.set_defaults(func=cmd_preview_end)

    sp = sub.add_parser("preview", help="Print a file inside a preview frame")
    sp.add_argument("file")
    sp.set_defaults(func=cmd_preview)

    return p


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)
    try:
        return int(args.func(args))
    except (BuildSystemDirError, FileNotFoundError, ValueError) as e:
        sys.stderr.write(f"ERROR: {e}\n")
        return 1
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
