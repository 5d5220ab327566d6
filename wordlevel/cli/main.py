"""
WordLevel CLI — Check text against a graded word list.
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from wordlevel import __version__
from wordlevel.core.config import Settings, load_settings
from wordlevel.core.session import CheckerSession
from wordlevel.nlp.backends import TAGGERS, get_tagger
from wordlevel.render.highlight import render_html, render_text, to_dict, word_count_label


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordlevel",
        description="Flag words outside a graded vocabulary list",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"wordlevel {__version__}",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Settings YAML file (default: WORDLEVEL_CONFIG env var, then packaged defaults)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    subparsers.add_parser("levels", help="List the configured word list levels")

    check_parser = subparsers.add_parser("check", help="Check a text")
    check_parser.add_argument(
        "input",
        type=str,
        help="Input text or path to file (use - for stdin)",
    )
    source = check_parser.add_mutually_exclusive_group()
    source.add_argument(
        "--level",
        type=str,
        default=None,
        help="Level name to check against (default: the first configured level)",
    )
    source.add_argument(
        "--wordlist",
        type=str,
        default=None,
        help="Word list JSON file or URL to check against",
    )
    check_parser.add_argument(
        "--format",
        choices=["text", "html", "json"],
        default="text",
        help="Output format: text (default, invalid words in brackets), html, json",
    )
    check_parser.add_argument(
        "--tagger",
        choices=sorted(TAGGERS),
        default=None,
        help="Tagger backend (default: from settings)",
    )

    # Logging configuration
    check_parser.add_argument(
        "--log-level",
        type=str,
        choices=["silent", "info", "verbose", "debug"],
        default=None,
        help="Log verbosity level (default: info, or WORDLEVEL_LOG_LEVEL env var)",
    )
    check_parser.add_argument(
        "--log-channel",
        type=str,
        default=None,
        help="Comma-separated log channels to show (validate,vocab,tagger,schedule,web,system). Default: all",
    )
    return parser


def main(argv: list[str] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "levels":
        return run_levels(args)

    if args.command == "check":
        return run_check(args)

    return 0


def _load_settings(path: Optional[str]) -> Optional[Settings]:
    """Load settings, printing a one-line error instead of raising."""
    try:
        return load_settings(path)
    except FileNotFoundError as e:
        print(e, file=sys.stderr)
    except yaml.YAMLError:
        print(f"Settings file is not valid YAML: {path or 'default'}", file=sys.stderr)
    except ValidationError as e:
        first = e.errors()[0]
        where = ".".join(str(part) for part in first["loc"]) or "settings"
        print(f"Invalid settings: {where}: {first['msg']}", file=sys.stderr)
    return None


def run_levels(args: argparse.Namespace) -> int:
    settings = _load_settings(args.config)
    if settings is None:
        return 2
    if not settings.wordlists:
        print("No word lists are configured.", file=sys.stderr)
        return 1
    for level in settings.wordlists:
        print(f"{level.name}\t{level.file}")
    return 0


def run_check(args: argparse.Namespace) -> int:
    """Run check command."""
    from wordlevel.core.logging import configure_logging

    channels = None
    if args.log_channel:
        channels = [ch.strip() for ch in args.log_channel.split(",")]

    configure_logging(
        level=args.log_level,
        channels=channels,
        force=True,
    )

    # Get input text
    if args.input == "-":
        text = sys.stdin.read()
    elif len(args.input) < 256 and Path(args.input).is_file():
        # Only check as path if it's short enough to be a valid path
        text = Path(args.input).read_text(encoding="utf-8")
    else:
        text = args.input

    settings = _load_settings(args.config)
    if settings is None:
        return 2

    tagger_name = args.tagger or settings.tagger
    tagger_kwargs = {"model_name": settings.spacy_model} if tagger_name == "spacy" else {}
    tagger = get_tagger(tagger_name, **tagger_kwargs)

    session = CheckerSession(
        tagger,
        settings,
        on_alert=lambda message: print(message, file=sys.stderr),
    )

    try:
        if args.wordlist:
            loaded = asyncio.run(session.load_wordlist(args.wordlist))
        elif args.level:
            loaded = asyncio.run(session.select_level(args.level))
        else:
            loaded = asyncio.run(session.start())
    except KeyError as e:
        names = ", ".join(level.name for level in settings.wordlists)
        print(f"{e.args[0]}. Available: {names}", file=sys.stderr)
        return 2

    if not loaded:
        return 2

    result = session.check(text)

    if args.format == "json":
        output = json.dumps(
            {"wordlist": session.store.source, **to_dict(result)},
            indent=2,
            ensure_ascii=False,
        )
    elif args.format == "html":
        output = str(render_html(result))
    else:
        output = render_text(result)
        output += f"\n\n{word_count_label(result)} ({result.invalid_count} outside the list)"

    print(output)

    return 0 if result.all_valid else 1


if __name__ == "__main__":
    sys.exit(main())
