"""CLI interface with subcommand routing."""

import argparse
import logging
import os
import sys

from storyboard_builder.constants import SCRIPT_TITLE, STORE_PATH, VERSION
from storyboard_builder.errors import StoryboardError
from storyboard_builder.store import JsonFileStore
from storyboard_builder.workflow import (
    create_storyboard,
    decode_storyboards,
    find_storyboard,
    status_message,
)

logger = logging.getLogger(__name__)


def _fail(message: str):
    print(f"Error: {message}", file=sys.stderr)
    raise SystemExit(1)


def _read_script(file_path: str | None) -> str:
    """Read script text from a file, or stdin for '-' / no argument."""
    if not file_path or file_path == "-":
        return sys.stdin.read()
    if not os.path.exists(file_path):
        _fail(f"File not found: {file_path}")
    try:
        with open(file_path, encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Could not read script %s: %s", file_path, e)
        _fail(f"Could not read {file_path}: {e}")


def _load_storyboards(args):
    return decode_storyboards(JsonFileStore(args.store).load())


def cmd_new(args):
    """Create a storyboard from a script and save it."""
    text = _read_script(args.file)

    if not text or not text.strip():
        _fail("Please paste your structured script data before creating.")

    store = JsonFileStore(args.store)
    try:
        storyboard = create_storyboard(text, store, title=args.title)
    except StoryboardError as e:
        logger.error("Processing error: %s", e.message)
        _fail(e.message)

    print(status_message(len(storyboard.scenes)))
    print(f"Storyboard id: {storyboard.id}")


def cmd_list(args):
    """List stored storyboards, most recent first."""
    storyboards = _load_storyboards(args)
    if not storyboards:
        print("No storyboards found.")
        return
    print("Storyboards:")
    for sb in storyboards:
        print(f"  {sb.id}  {sb.title:<24} {len(sb.scenes):>3} scenes  {sb.last_edited}")


def cmd_show(args):
    """Print one storyboard scene by scene."""
    try:
        storyboard = find_storyboard(_load_storyboards(args), args.ref)
    except StoryboardError as e:
        _fail(e.message)

    print(f"Storyboard: {storyboard.title} ({storyboard.id})")
    print(f"Last edited: {storyboard.last_edited}")
    for scene in storyboard.scenes:
        print(f"\nScene {scene.number}")
        print(f"  VO:    {scene.vo_script or '(none)'}")
        if scene.notes:
            notes = scene.notes.replace("\n", "\n         ")
            print(f"  Notes: {notes}")


def main(argv=None):
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="storyboard",
        description="Storyboard Builder: turn a delimited script into storyboard scenes",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument("--store", default=STORE_PATH, help="Path to the storyboard store (default: %(default)s)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show progress logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # new
    new_parser = subparsers.add_parser("new", help="Create a storyboard from a script file (or stdin)")
    new_parser.add_argument("file", nargs="?", help="Path to the script text file, '-' for stdin")
    new_parser.add_argument("--title", default=SCRIPT_TITLE, help="Storyboard title")
    new_parser.set_defaults(func=cmd_new)

    # list
    list_parser = subparsers.add_parser("list", help="List stored storyboards")
    list_parser.set_defaults(func=cmd_list)

    # show
    show_parser = subparsers.add_parser("show", help="Show a storyboard's scenes")
    show_parser.add_argument("ref", help="Storyboard id, or 'latest'")
    show_parser.set_defaults(func=cmd_show)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return

    args.func(args)
