#!/usr/bin/env python3
"""
Layered Range Trees - build a range tree, interval tree or segment tree over
a seeded random input, run one query and print (or draw) the answer.

This is the main entry point for the application.
"""

import sys
import argparse
from pathlib import Path

from rangetrees.config import Config, STRUCTURES
from rangetrees.debug import set_debug_enabled
from rangetrees.errors import RangeTreeError
from rangetrees.scene import build_scene


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Layered Range Trees - windowed range queries over points and segments"
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        help="Path to configuration file (default: auto-detect)"
    )
    parser.add_argument(
        "-s", "--structure",
        choices=STRUCTURES,
        help="Index to build (default: from configuration)"
    )
    parser.add_argument("--seed", type=int, help="Seed for the input generator")
    parser.add_argument("--count", type=int, help="Number of points or segments")
    parser.add_argument(
        "--window",
        type=int, nargs=4, metavar=("X1", "Y1", "X2", "Y2"),
        help="Query window for the range trees"
    )
    parser.add_argument(
        "--line",
        type=int, nargs=3, metavar=("X", "Y1", "Y2"),
        help="Vertical query line for the interval and segment trees"
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Open the viewer instead of only printing"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output"
    )
    return parser.parse_args(argv)


def load_config(args) -> Config:
    """Load configuration and apply command line overrides."""
    config = Config.load(args.config)
    if args.structure:
        config.structure = args.structure
    if args.seed is not None:
        config.generator.seed = args.seed
    if args.count is not None:
        config.generator.count = args.count
    if args.window:
        config.query.window = tuple(args.window)
    if args.line:
        config.query.line = tuple(args.line)
    if args.debug:
        config.debug = True
    return config


def show(config: Config, scene) -> int:
    """Open the viewer on `scene` and run the Qt event loop."""
    from PySide6.QtWidgets import QApplication
    from gui.main_window import MainWindow

    app = QApplication(sys.argv)
    app.setApplicationName("Layered Range Trees")
    app.setStyle("Fusion")

    window = MainWindow(config, scene)
    window.show()
    return app.exec()


def run(argv=None) -> int:
    args = parse_args(argv)

    # Load configuration
    try:
        config = load_config(args)
    except FileNotFoundError as e:
        print(f"Error: {e}")
        print(f"\nThe default location is {Config.get_default_config_path()}")
        return 1
    except Exception as e:
        print(f"Error loading configuration: {e}")
        return 1

    set_debug_enabled(config.debug)
    if config.debug:
        print(f"Loaded configuration from: {args.config or Config.get_default_config_path()}",
              file=sys.stderr)

    try:
        scene = build_scene(config.structure, config.generator, config.query)
    except (RangeTreeError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    print(scene.describe())
    if args.show:
        return show(config, scene)
    return 0


def main():
    """Main entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
