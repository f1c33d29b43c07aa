"""Main entry point for fsmap."""

import argparse
import json
import logging
import sys
from pathlib import Path

from fsmap.errors import LayoutError, ValidationError, safe_path, validate_directory, validate_range
from fsmap.layout.engine import LayoutConfig, LayoutEngine
from fsmap.model.expansion import ExpansionState
from fsmap.model.provider import FileSystemProvider


logger = logging.getLogger(__name__)

# Layout recursion uses a few Python frames per level
MAX_DEPTH_LIMIT = 200


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog="fsmap",
        description="Interactive node-link map of a directory tree",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        default=Path.home(),
        help="Root directory path to visualize (default: home directory)",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        metavar="N",
        help="Deepest level drawn below the root ring (default: unlimited)",
    )
    parser.add_argument(
        "--show-hidden",
        action="store_true",
        help="Show hidden files and directories (starting with '.')",
    )
    parser.add_argument(
        "--expand",
        action="append",
        default=[],
        type=Path,
        metavar="DIR",
        help="Directory to start expanded (repeatable)",
    )
    parser.add_argument(
        "--dump",
        action="store_true",
        help="Print one layout pass as JSON instead of opening the window",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging verbosity (default: WARNING)",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> LayoutConfig:
    """Create the layout configuration from CLI options.

    Raises:
        ValidationError: If --max-depth is out of range
    """
    if args.max_depth is not None:
        validate_range(args.max_depth, 0, MAX_DEPTH_LIMIT, "max_depth")
    return LayoutConfig(
        show_hidden=args.show_hidden,
        max_depth=args.max_depth,
    )


def build_expansion(args: argparse.Namespace) -> ExpansionState:
    expansion = ExpansionState()
    for path in args.expand:
        expansion.expand(safe_path(path))
    return expansion


def dump_layout(root_path: Path, config: LayoutConfig, expansion: ExpansionState) -> int:
    """Run one headless layout pass and print it as JSON."""
    engine = LayoutEngine(FileSystemProvider(), config=config)
    result = engine.layout(root_path, expansion=expansion)
    json.dump(result.to_dict(), sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code
    """
    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        root_path = safe_path(args.path)
        validate_directory(root_path)
        config = build_config(args)
        expansion = build_expansion(args)
    except (ValidationError, LayoutError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.dump:
        return dump_layout(root_path, config, expansion)

    from PyQt6.QtWidgets import QApplication

    from fsmap.controller.controller import Controller

    app = QApplication(sys.argv if argv is None else [sys.argv[0], *argv])

    controller = Controller(root_path, config=config, expansion=expansion)
    app.aboutToQuit.connect(controller.stop)
    controller.show()
    controller.start()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
