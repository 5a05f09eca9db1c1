"""Main CLI entry point for dict_dispatch."""

import argparse
import logging
import sys

from dict_dispatch import __version__
from dict_dispatch.cli.commands import config, detect, lookup, raise_window, speak, translate
from dict_dispatch.models import Backend, SpeechCommand


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="dict_dispatch",
        description="Look up words in your installed dictionary applications",
        epilog="Use 'dict_dispatch <command> --help' for command-specific help",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log what is being detected and invoked",
    )
    parser.add_argument(
        "--backend",
        choices=[b.value for b in Backend],
        help="Use this dictionary instead of the detected one",
    )
    parser.add_argument(
        "--speech",
        choices=[s.value for s in SpeechCommand],
        help="Use this speech command instead of the detected one",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # dict_dispatch lookup [text ...]
    lookup_parser = subparsers.add_parser(
        "lookup",
        help="Look up the selection, the word at point, or a prompted word",
        description="Send the selection or word at point to the configured dictionary",
    )
    lookup_parser.add_argument(
        "text",
        nargs="*",
        help="A word (word at point) or several words (selection)",
    )
    source_group = lookup_parser.add_mutually_exclusive_group()
    source_group.add_argument(
        "--stdin",
        action="store_true",
        help="Read the selection from standard input (no text or --line allowed)",
    )
    source_group.add_argument("--line", help="Text of the line under the cursor")
    lookup_parser.add_argument(
        "--column",
        type=int,
        help="Zero-based cursor column within --line",
    )
    lookup_parser.add_argument(
        "--no-prompt",
        action="store_true",
        help="Do not ask for a word when there is nothing at point",
    )

    # dict_dispatch translate [text ...]
    translate_parser = subparsers.add_parser(
        "translate",
        help="Translate text with Easydict's HTTP server",
        description="Translate text with Easydict, falling back to its URL scheme",
    )
    translate_parser.add_argument("text", nargs="*", help="Text to translate (default: stdin)")
    translate_parser.add_argument("--to", help="Target language code (e.g. zh-Hans, en)")
    translate_parser.add_argument("--service", help="Easydict service type (e.g. Apple)")
    translate_parser.add_argument("--port", type=int, help="Easydict HTTP server port")
    translate_parser.add_argument(
        "--no-prompt",
        action="store_true",
        help="Do not ask for missing language or service",
    )

    # dict_dispatch raise
    subparsers.add_parser(
        "raise",
        help="Bring the dictionary's main window to the front",
    )

    # dict_dispatch speak <text ...>
    speak_parser = subparsers.add_parser("speak", help="Read text aloud")
    speak_parser.add_argument("text", nargs="+", help="Text to read aloud")

    # dict_dispatch detect
    subparsers.add_parser(
        "detect",
        help="Show the detected dictionary and speech command",
    )

    # dict_dispatch config <action>
    config_parser = subparsers.add_parser("config", help="Manage saved settings")
    config_sub = config_parser.add_subparsers(dest="action", required=True)
    config_sub.add_parser("show", help="Show saved settings")
    set_parser = config_sub.add_parser("set", help="Save a setting")
    set_parser.add_argument("key", help="Setting name (e.g. backend, target_language)")
    set_parser.add_argument("value", help="Setting value")
    unset_parser = config_sub.add_parser("unset", help="Remove a saved setting")
    unset_parser.add_argument("key", help="Setting name")
    config_sub.add_parser("reset", help="Remove all saved settings")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point with subcommands."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        )

    # Dispatch to appropriate command
    if args.command == "lookup":
        return lookup.lookup_command(args)
    elif args.command == "translate":
        return translate.translate_command(args)
    elif args.command == "raise":
        return raise_window.raise_command(args)
    elif args.command == "speak":
        return speak.speak_command(args)
    elif args.command == "detect":
        return detect.detect_command(args)
    elif args.command == "config":
        return config.config_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
