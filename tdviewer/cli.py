"""
Command line entry point.

Commands:
    serve   Run the viewer API with uvicorn
    render  Load a .json/.jsonl file and write one page of the view as HTML

Examples:
    tdviewer serve --port 8000
    tdviewer render data/train.jsonl --filter python --page 2 --out page.html
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from tdviewer.config import (
    ALL_LANGUAGES,
    API_HOST,
    API_PORT,
    DEFAULT_PAGE_SIZE,
    INVALID_FILE_MESSAGE,
    PAGE_SIZE_OPTIONS,
)
from tdviewer.dataset.ingestion import DatasetLoadError, read_dataset_file
from tdviewer.dataset.state import ViewerState
from tdviewer.observability.logging import get_logger
from tdviewer.render.page import render_page

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tdviewer",
        description="Browse, filter and paginate chat-style training data (.json / .jsonl).",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the viewer web app")
    serve.add_argument("--host", default=API_HOST)
    serve.add_argument("--port", type=int, default=API_PORT)

    render = sub.add_parser("render", help="Render one page of a dataset to HTML")
    render.add_argument(
        "input",
        nargs="?",
        help="Path to a .json or .jsonl file (omit to render the built-in sample data)",
    )
    render.add_argument("--filter", default=ALL_LANGUAGES, help="Language label, or 'all'")
    render.add_argument("--page", type=int, default=1, help="1-based page number")
    render.add_argument(
        "--page-size",
        type=int,
        default=DEFAULT_PAGE_SIZE,
        choices=PAGE_SIZE_OPTIONS,
        help="Conversations per page",
    )
    render.add_argument("--out", default="viewer.html", help="Output HTML file path")

    return parser


def run_render(args: argparse.Namespace) -> int:
    state = ViewerState(items_per_page=args.page_size)

    if args.input:
        input_path = Path(args.input)
        try:
            state.load_dataset(read_dataset_file(input_path))
        except DatasetLoadError as e:
            logger.warning("Could not load %s: %s", input_path, e)
            print(INVALID_FILE_MESSAGE, file=sys.stderr)
            return 1
    else:
        state.load_sample()

    # Same order as the UI: filter resets the page, then jump to the page
    state.set_filter(args.filter)
    state.set_page(args.page)

    view = state.get_current_page_view()
    out_path = Path(args.out)
    try:
        out_path.write_text(render_page(view), encoding="utf-8")
    except OSError as e:
        logger.error("Could not write %s: %s", out_path, e)
        print(f"Could not write output file: {out_path}", file=sys.stderr)
        return 1

    print()
    print("=" * 72)
    print("Render complete")
    print("=" * 72)
    print(f"Input:   {args.input or '(sample data)'}")
    print(f"Output:  {out_path}")
    print(f"Filter:  {view.current_filter}")
    print(f"{view.page_info} ({len(view.conversations)} conversations on this page)")
    print()
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "serve":
        from tdviewer.api.app import main as serve

        serve(host=args.host, port=args.port)
        return 0

    return run_render(args)


if __name__ == "__main__":
    sys.exit(main())
