"""brewlog command-line interface."""

import argparse
import sys

from .app import App
from .config import Config, load_config, setup_logging
from .core import format_entry_details, format_entry_item
from .models import CONFIG_PATH, BrewlogError
from .seed import sample_data


def build_app(cfg: Config) -> App:
    coffees, grinders, entries = sample_data()
    return App(
        entries=entries,
        coffees=coffees,
        grinders=grinders,
        keymap=cfg.keymap(),
        date_fmt=cfg.date_format,
    )


def cmd_list(args: argparse.Namespace, app: App) -> None:
    shown = 0
    for i, e in enumerate(app.entries, start=1):
        if args.favorites and not e.favorite:
            continue
        print(f"{i:>3}.{format_entry_item(e, app.coffees, app.date_fmt)}")
        shown += 1
    if not shown:
        print("(no entries)")


def cmd_show(args: argparse.Namespace, app: App) -> None:
    idx = args.index
    if idx < 1 or idx > len(app.entries):
        sys.exit("Index out of range.")
    for row in format_entry_details(app.entries[idx - 1], app.coffees, app.grinders, app.date_fmt):
        print(row)


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser."""
    p = argparse.ArgumentParser(prog="brewlog", description="Browse and edit an espresso brewing log.")
    p.add_argument(
        "-c",
        "--config",
        default=CONFIG_PATH,
        help=f"Path to config file (default: {CONFIG_PATH})",
    )
    p.add_argument("--log-file", help="Write logs to this file")
    p.add_argument("-v", "--verbose", action="store_true", help="Log at DEBUG level")
    sub = p.add_subparsers(dest="cmd")

    s_list = sub.add_parser("list", help="Print the entry list")
    s_list.add_argument("--favorites", action="store_true", help="Only show starred entries")
    s_list.set_defaults(func=cmd_list)

    s_show = sub.add_parser("show", help="Print one entry's fields")
    s_show.add_argument("index", type=int, help="Entry index from `list`")
    s_show.set_defaults(func=cmd_show)

    return p


def main(argv=None) -> None:
    """CLI entry point. Launches the TUI if no subcommand given."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        cfg = load_config(args.config)
        setup_logging(cfg, args.log_file, args.verbose)
    except BrewlogError as e:
        sys.exit(str(e))
    app = build_app(cfg)

    if args.cmd is None:
        from .tui import main as tui_main

        tui_main(app)
    else:
        args.func(args, app)


if __name__ == "__main__":
    main()
