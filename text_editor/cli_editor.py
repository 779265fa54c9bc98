import argparse
import json
import sys
from typing import Any

from text_editor.container import container
from text_editor.entities.command import CommandName


def _parse_view_range(raw: str) -> list[int | None]:
    parts = [p.strip() for p in raw.split(",")]
    if len(parts) != 2:
        raise argparse.ArgumentTypeError("expected START,END (e.g. 10,-1 or ,20)")
    try:
        return [int(p) if p else None for p in parts]
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid line numbers: {raw}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="text-editor",
        description="Run one text editor command and print the JSON result.",
    )
    parser.add_argument("command", choices=CommandName.values(), help="Command to run")
    parser.add_argument("path", help="Absolute path to a file or directory")
    parser.add_argument(
        "--view-range",
        type=_parse_view_range,
        default=None,
        help="Line range for view, START,END (1-indexed, END -1 = end of file)",
    )
    parser.add_argument("--file-text", default=None, help="Content for create")
    parser.add_argument(
        "--file-text-from",
        default=None,
        help="Read the content for create from a file ('-' for stdin)",
    )
    parser.add_argument("--old-str", default=None, help="Exact text to replace")
    parser.add_argument("--new-str", default=None, help="Replacement or inserted text")
    parser.add_argument(
        "--insert-line", type=int, default=None, help="0-indexed insertion line"
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Pretty print the result with colors",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    file_text = args.file_text
    if args.file_text_from is not None:
        if args.file_text_from == "-":
            file_text = sys.stdin.read()
        else:
            with open(args.file_text_from, "r", encoding="utf-8") as f:
                file_text = f.read()

    arguments: dict[str, Any] = {"command": args.command, "path": args.path}
    for key, value in (
        ("view_range", args.view_range),
        ("file_text", file_text),
        ("old_str", args.old_str),
        ("new_str", args.new_str),
        ("insert_line", args.insert_line),
    ):
        if value is not None:
            arguments[key] = value

    result = container.get_dispatcher().execute(arguments)

    if args.pretty:
        from rich import box
        from rich.console import Console
        from rich.panel import Panel
        from rich.text import Text

        console = Console(soft_wrap=True)
        style = "green" if result.success else "red"
        console.print(Text(result.message, style=f"bold {style}"))
        if result.content is not None:
            console.print(
                Panel(
                    Text(result.content),
                    title=args.path,
                    box=box.ROUNDED,
                    border_style=style,
                    expand=True,
                )
            )
    else:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))

    return 0 if result.success else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
