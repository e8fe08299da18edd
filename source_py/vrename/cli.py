"""
Command-line interface for vrename.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .types import Config, RenameOperation, VRenameError
from .editor import resolve_editor, edit_names
from .renamer import plan_renames, apply_renames
from .jsonoutput import JSONOutput
from .tui import run_tui

LOG_FORMAT = '%(asctime)s.%(msecs)03d %(levelname)s: %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def create_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="vrename",
        description="vrename - batch rename files with your preferred text editor",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
The given file names are written one per line to a temporary file which is
opened in $EDITOR. Edit the lines, save and quit; each file is then renamed
to the name on its line. Do not add or remove lines.
        """
    )

    parser.add_argument(
        "files",
        nargs="*",
        help="Files to rename"
    )
    parser.add_argument(
        "-e", "--editor",
        type=str,
        default="",
        help="Editor command to use (default: $EDITOR)"
    )
    parser.add_argument(
        "-d", "--dry-run",
        action="store_true",
        help="Show the renames without applying them"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output the renames in JSON format instead of human-readable text"
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Print plain status lines instead of the rich terminal UI"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default="",
        help="Optional path to write detailed operation log"
    )

    return parser


def parse_args(argv: Optional[List[str]] = None) -> Optional[Config]:
    """Parse command-line arguments and create Config.

    Returns None when there is nothing to rename; usage has been printed.
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    editor = resolve_editor(args.editor)

    if not args.files:
        parser.print_help(sys.stderr)
        return None

    return Config(
        file_names=args.files,
        editor=editor,
        dry_run=args.dry_run,
        json=args.json,
        plain=args.plain,
        verbose=args.verbose,
        log_file=args.log_file if args.log_file else None,
    )


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """Configure the root logger for the command-line tool."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        force=True,
    )
    if log_file:
        root = logging.getLogger()
        # The console keeps its level; the log file gets everything
        for handler in root.handlers:
            handler.setLevel(level)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
        root.addHandler(file_handler)
        root.setLevel(logging.DEBUG)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    try:
        config = parse_args(argv)
        if config is None:
            return 0

        setup_logging(config.verbose, config.log_file)
        logging.info(f"Starting vrename with config: {config}")

        if not config.json and not config.plain:
            return run_tui(config)

        return process_files(config)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user", file=sys.stderr)
        return 1
    except VRenameError as e:
        print(f"failed: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logging.debug("Unexpected error", exc_info=True)
        print(f"failed: {e}", file=sys.stderr)
        return 1


def process_files(config: Config) -> int:
    """Edit the names, then rename the files, with plain or JSON output."""
    name_map = edit_names(config.editor, config.file_names)
    operations = plan_renames(name_map)
    logging.info(f"Mapped {len(operations)} names")

    applied = []
    for op in apply_renames(operations, config.dry_run):
        applied.append(op)
        if not config.json:
            print_rename(op, config.dry_run)

    if config.json:
        print(JSONOutput.to_json(JSONOutput.from_results(applied, config.dry_run)))

    return 0


def print_rename(op: RenameOperation, dry_run: bool) -> None:
    """Print one status line for a rename."""
    verb = "would rename" if dry_run else "renamed"
    print(f'{verb} "{op.from_path}" to "{op.to_path}"', file=sys.stderr)


if __name__ == "__main__":
    sys.exit(main())
