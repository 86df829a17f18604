import argparse
import importlib.util
import json
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from dirtree import APP_NAME, __version__
from dirtree.config import ReportConfig, load_config, with_output_name
from dirtree.errors import DirTreeError
from dirtree.generator import generate_report
from dirtree.utils import format_count

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dirtree",
        description="Index a directory into a self-contained HTML tree report.",
    )
    parser.add_argument(
        "root",
        nargs="?",
        help="Directory to index. Without it a folder chooser is shown, "
        "or the current directory is used when no GUI is available.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="JSON configuration file (defaults to $DIRTREE_CONFIG).",
    )
    parser.add_argument(
        "--output-name",
        help="File name of the report written into the root directory.",
    )
    parser.add_argument(
        "--no-gui",
        action="store_true",
        help="Never show dialogs, even when a display is available.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output a JSON summary.",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log every entry visited.")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log errors.")
    parser.add_argument("--version", action="version", version=f"{APP_NAME} {__version__}")
    return parser


def gui_available() -> bool:
    if importlib.util.find_spec("PySide6") is None:
        return False
    if sys.platform.startswith("linux"):
        return bool(os.environ.get("DISPLAY") or os.environ.get("WAYLAND_DISPLAY"))
    return True


def configure_logging(config: ReportConfig, verbose: bool = False, quiet: bool = False) -> None:
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.getLevelName(config.log_level)
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _console_progress(every: int):
    def progress(processed: int) -> None:
        if processed % every == 0:
            print(f"Processing: {format_count(processed)} items", file=sys.stderr)

    return progress


def run_headless(root: str, config: ReportConfig, as_json: bool) -> int:
    try:
        result = generate_report(root, config, progress=_console_progress(config.progress_every))
    except DirTreeError as exc:
        logger.error("%s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if as_json:
        payload = {
            "status": "ok",
            "output_path": result.output_path,
            "total_size": result.stats.total_size,
            "folder_count": result.stats.folder_count,
            "file_count": result.stats.file_count,
            "elapsed_sec": round(result.elapsed_sec, 3),
        }
        print(json.dumps(payload, indent=2))
    else:
        print(f"HTML file created: {result.output_path}")
        print(
            f"{format_count(result.stats.folder_count)} Folders | "
            f"{format_count(result.stats.file_count)} Files"
        )
    return 0


def resolve_root(root: Optional[str], use_gui: bool) -> Optional[str]:
    if root and root.strip():
        return os.path.abspath(root)
    if use_gui:
        from dirtree.app import pick_directory

        return pick_directory()
    return os.getcwd()


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        if args.output_name:
            config = with_output_name(config, args.output_name)
    except (OSError, ValueError) as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2

    configure_logging(config, verbose=args.verbose, quiet=args.quiet)

    use_gui = not args.no_gui and not args.json and gui_available()
    root = resolve_root(args.root, use_gui)
    if root is None:
        logger.info("Cancelled.")
        return 0

    if use_gui:
        from dirtree.app import run_with_dialog

        return run_with_dialog(root, config)
    return run_headless(root, config, args.json)


if __name__ == "__main__":
    raise SystemExit(main())
